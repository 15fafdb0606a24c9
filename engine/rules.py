"""Win detection and turn helpers for 3x3 tic-tac-toe."""

from __future__ import annotations

import operator
from typing import Optional, Sequence, Tuple

from engine.marks import Mark, Outcome

BOARD_ROWS = 3
BOARD_COLS = 3
CELL_COUNT = BOARD_ROWS * BOARD_COLS

Line = Tuple[int, int, int]

WINNING_LINES: Tuple[Line, ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),  # diagonals
)


def in_bounds(index: object) -> bool:
    """Return whether index addresses a cell of the board."""
    # bool is an int subclass but never a cell index.
    if isinstance(index, bool):
        return False
    try:
        position = operator.index(index)
    except TypeError:
        return False
    return 0 <= position < CELL_COUNT


def opponent(mark: Mark) -> Mark:
    """Return the other player's mark. EMPTY has no opponent."""
    return mark.opponent()


def is_won(cells: Sequence[Mark], mark: Mark) -> bool:
    """Return whether mark fills any winning line of the snapshot."""
    if mark == Mark.EMPTY:
        return False
    for a, b, c in WINNING_LINES:
        if cells[a] == mark and cells[b] == mark and cells[c] == mark:
            return True
    return False


def winning_line(cells: Sequence[Mark]) -> Optional[Line]:
    """Return the first completed line, or None."""
    for line in WINNING_LINES:
        a, b, c = line
        if cells[a] != Mark.EMPTY and cells[a] == cells[b] == cells[c]:
            return line
    return None


def evaluate_outcome(cells: Sequence[Mark]) -> Outcome:
    """Derive the outcome of a snapshot."""
    x_won = is_won(cells, Mark.X)
    o_won = is_won(cells, Mark.O)
    if x_won and o_won:
        raise ValueError("Both marks have a winning line; board is unreachable.")
    if x_won:
        return Outcome.won_by(Mark.X)
    if o_won:
        return Outcome.won_by(Mark.O)
    if all(cell != Mark.EMPTY for cell in cells):
        return Outcome.draw()
    return Outcome.in_progress()


def pos_to_index(row: int, col: int) -> int:
    """Convert (row, col) to a flattened index."""
    return row * BOARD_COLS + col
