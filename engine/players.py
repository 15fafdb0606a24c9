"""Player capability interface and the interactive player."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Optional, Sequence

from engine.board import Board
from engine.marks import Mark

MoveSource = Callable[[Sequence[Mark]], int]


class Player(ABC):
    """A named participant with a fixed mark."""

    search_driven: bool = False

    def __init__(self, mark: Mark, name: str) -> None:
        if mark is Mark.EMPTY:
            raise ValueError("A player needs a non-empty mark.")
        self._mark = mark
        self.name = name

    @property
    def mark(self) -> Mark:
        return self._mark

    @abstractmethod
    def propose_move(self, board: Board) -> int:
        """Propose the next cell index for the given board."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, mark={self._mark.symbol})"


class HumanPlayer(Player):
    """Interactive player whose moves come from outside the engine."""

    def __init__(
        self,
        mark: Mark = Mark.X,
        name: str = "Player 1",
        move_source: Optional[MoveSource] = None,
    ) -> None:
        super().__init__(mark, name)
        self.move_source = move_source

    def propose_move(self, board: Board) -> int:
        if self.move_source is None:
            raise RuntimeError(f"{self.name} has no move source; submit moves directly.")
        return self.move_source(board.cells())
