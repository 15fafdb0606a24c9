"""Tic-tac-toe board state, move queries, and state encoding."""

from __future__ import annotations

import operator
from typing import Iterable, List, Sequence, Tuple

import numpy as np

from engine.errors import InvalidMove
from engine.marks import Mark
from engine.rules import BOARD_COLS, BOARD_ROWS, CELL_COUNT, in_bounds

_PLANE_INDEX = {Mark.EMPTY: 0, Mark.X: 1, Mark.O: 2}


class Board:
    """Passive 3x3 grid of marks, indexed row-major from 0 to 8."""

    rows: int = BOARD_ROWS
    cols: int = BOARD_COLS

    def __init__(self) -> None:
        self._cells: List[Mark] = [Mark.EMPTY] * CELL_COUNT

    @classmethod
    def from_cells(cls, cells: Iterable[object]) -> "Board":
        """Build a board from nine marks (or their string values)."""
        marks = [Mark(cell) for cell in cells]
        if len(marks) != CELL_COUNT:
            raise ValueError(f"Expected {CELL_COUNT} cells, got {len(marks)}.")
        board = cls()
        board._cells = marks
        return board

    def clone(self) -> "Board":
        cloned = Board.__new__(Board)
        cloned._cells = list(self._cells)
        return cloned

    def cells(self) -> Tuple[Mark, ...]:
        """Read-only snapshot of the nine cells."""
        return tuple(self._cells)

    def get_cell(self, index: int) -> Mark:
        return self._cells[index]

    def apply(self, index: int, mark: Mark) -> int:
        """Place mark on an empty cell and return the cell index as a plain int."""
        mark = Mark(mark)
        if mark is Mark.EMPTY:
            raise ValueError("Cannot place EMPTY on the board.")
        if not in_bounds(index):
            raise InvalidMove(index, f"index must be an integer in [0, {CELL_COUNT - 1}]")
        index = operator.index(index)
        if self._cells[index] is not Mark.EMPTY:
            raise InvalidMove(index, f"cell is already occupied by {self._cells[index].symbol}")
        self._cells[index] = mark
        return index

    def reset(self) -> None:
        """Clear every cell."""
        self._cells = [Mark.EMPTY] * CELL_COUNT

    @staticmethod
    def available_moves(cells: Sequence[Mark]) -> List[int]:
        """Indices of empty cells in ascending order."""
        return [index for index, cell in enumerate(cells) if cell == Mark.EMPTY]

    @staticmethod
    def is_full(cells: Sequence[Mark]) -> bool:
        return Mark.EMPTY not in cells

    def mark_count(self, mark: Mark) -> int:
        return sum(1 for cell in self._cells if cell is mark)

    def encode_state(self) -> np.ndarray:
        """One-hot planes (empty, X, O) of shape (3, rows, cols)."""
        encoded = np.zeros((3, self.rows, self.cols), dtype=np.float32)
        for index, cell in enumerate(self._cells):
            row, col = divmod(index, self.cols)
            encoded[_PLANE_INDEX[cell], row, col] = 1.0
        return encoded

    def legal_action_mask(self) -> np.ndarray:
        """Boolean mask over the nine cells marking empty ones."""
        return np.array([cell is Mark.EMPTY for cell in self._cells], dtype=np.bool_)

    def render_ascii(self) -> str:
        """Return a simple human-readable board representation."""
        lines: List[str] = ["    " + " ".join(str(c) for c in range(self.cols))]
        for row in range(self.rows):
            row_cells = self._cells[row * self.cols:(row + 1) * self.cols]
            lines.append(f"{row:>2d}  " + " ".join(cell.symbol for cell in row_cells))
        return "\n".join(lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Board({''.join(cell.symbol for cell in self._cells)})"
