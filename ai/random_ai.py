"""Uniform-random move selection.

Picks any empty cell with equal probability. Useful as a baseline opponent
and for exercising the optimal strategy in self-play.
"""

from __future__ import annotations

import logging
import random
from typing import Optional

from ai.base_ai import BaseAI
from engine.board import Board
from engine.marks import Mark
from engine.rules import evaluate_outcome

LOGGER = logging.getLogger(__name__)


class RandomAI(BaseAI):
    """AI that selects uniformly random empty cells."""

    def __init__(self, mark: Mark, seed: Optional[int] = None, name: str = "Computer") -> None:
        super().__init__(mark, name)
        self._rng = random.Random(seed)

    def choose_move(self, board: Board) -> int:
        cells = board.cells()
        if evaluate_outcome(cells).is_terminal:
            raise RuntimeError("No legal moves available.")
        choice = self._rng.choice(Board.available_moves(cells))
        LOGGER.debug("Random %s picked cell %d", self.mark.symbol, choice)
        return choice
