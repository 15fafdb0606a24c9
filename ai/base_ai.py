"""Base AI interface."""

from __future__ import annotations

from abc import abstractmethod

from engine.board import Board
from engine.marks import Mark
from engine.players import Player


class BaseAI(Player):
    """Search-driven player: the controller asks it to move on its turn."""

    search_driven = True

    def __init__(self, mark: Mark, name: str = "Computer") -> None:
        super().__init__(mark, name)

    @abstractmethod
    def choose_move(self, board: Board) -> int:
        """Choose a legal cell index for the given board."""
        raise NotImplementedError

    def propose_move(self, board: Board) -> int:
        return self.choose_move(board)
