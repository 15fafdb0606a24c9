"""Tests for win detection and outcome evaluation."""

import numpy as np
import pytest

from engine.marks import GameStatus, Mark, Outcome
from engine.rules import WINNING_LINES, evaluate_outcome, in_bounds, is_won, opponent, winning_line

E, X, O = Mark.EMPTY, Mark.X, Mark.O


def board_with(mark, line):
    cells = [E] * 9
    for index in line:
        cells[index] = mark
    return cells


@pytest.mark.parametrize("line", WINNING_LINES)
def test_every_line_wins(line):
    cells = board_with(X, line)
    assert is_won(cells, X)
    assert not is_won(cells, O)
    assert winning_line(cells) == line


def test_empty_mark_never_wins():
    assert not is_won([E] * 9, E)


def test_no_win_on_mixed_board():
    cells = [X, O, X, X, O, O, O, X, X]
    assert not is_won(cells, X)
    assert not is_won(cells, O)
    assert winning_line(cells) is None
    assert evaluate_outcome(cells) == Outcome.draw()


def test_opponent_is_a_bijection():
    assert opponent(X) is O
    assert opponent(O) is X
    with pytest.raises(ValueError):
        opponent(E)


def test_evaluate_outcome_states():
    assert evaluate_outcome([E] * 9) == Outcome.in_progress()
    won = evaluate_outcome(board_with(O, (2, 4, 6)))
    assert won.status is GameStatus.WON
    assert won.winner is O
    assert won.is_terminal


def test_two_winners_is_rejected():
    cells = [X, X, X, O, O, O, E, E, E]
    assert is_won(cells, X) and is_won(cells, O)
    with pytest.raises(ValueError):
        evaluate_outcome(cells)


@pytest.mark.parametrize("index, expected", [(0, True), (8, True), (-1, False), (9, False), ("3", False), (True, False)])
def test_in_bounds(index, expected):
    assert in_bounds(index) is expected


def reachable_positions():
    """Every position reachable from the empty board with X moving first."""
    seen = set()
    stack = [(E,) * 9]
    while stack:
        cells = stack.pop()
        if cells in seen:
            continue
        seen.add(cells)
        if is_won(cells, X) or is_won(cells, O) or E not in cells:
            continue
        mover = X if cells.count(X) == cells.count(O) else O
        for index, cell in enumerate(cells):
            if cell is E:
                stack.append(cells[:index] + (mover,) + cells[index + 1:])
    return seen


def test_reachable_positions_have_at_most_one_winner():
    positions = reachable_positions()
    assert len(positions) == 5478
    winners = {"x": 0, "o": 0, "both": 0}
    for cells in positions:
        x_won, o_won = is_won(cells, X), is_won(cells, O)
        if x_won and o_won:
            winners["both"] += 1
        elif x_won:
            winners["x"] += 1
        elif o_won:
            winners["o"] += 1
    assert winners["both"] == 0
    assert winners["x"] > winners["o"] > 0


def test_plain_string_snapshot():
    cells = ["X", "X", "X", "O", "O", "", "", "", ""]
    assert is_won(cells, X)
    assert not is_won(["", "", "", "", "", "", "", "", ""], "")
    assert winning_line(cells) == (0, 1, 2)
    assert evaluate_outcome([""] * 9) == Outcome.in_progress()
    assert winning_line([""] * 9) is None


def test_in_bounds_accepts_numpy_integers():
    assert in_bounds(np.int64(4))
    assert not in_bounds(np.int64(9))
    assert not in_bounds(np.float64(4.0))
