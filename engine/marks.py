"""Cell marks and game outcome types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional


class Mark(str, Enum):
    """Content of a board cell."""

    EMPTY = ""
    X = "X"
    O = "O"

    def opponent(self) -> "Mark":
        if self is Mark.EMPTY:
            raise ValueError("EMPTY has no opponent.")
        return Mark.O if self is Mark.X else Mark.X

    @property
    def symbol(self) -> str:
        return MARK_SYMBOL[self]


MARK_SYMBOL: Dict[Mark, str] = {
    Mark.EMPTY: ".",
    Mark.X: "X",
    Mark.O: "O",
}

PLAYER_MARKS = (Mark.X, Mark.O)


class GameStatus(str, Enum):
    """Lifecycle status of one game."""

    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """Game outcome derived from a board snapshot."""

    status: GameStatus
    winner: Optional[Mark] = None

    @classmethod
    def in_progress(cls) -> "Outcome":
        return cls(GameStatus.IN_PROGRESS)

    @classmethod
    def won_by(cls, mark: Mark) -> "Outcome":
        if mark is Mark.EMPTY:
            raise ValueError("A game cannot be won by EMPTY.")
        return cls(GameStatus.WON, mark)

    @classmethod
    def draw(cls) -> "Outcome":
        return cls(GameStatus.DRAW)

    @property
    def is_terminal(self) -> bool:
        return self.status is not GameStatus.IN_PROGRESS

    def describe(self) -> str:
        if self.status is GameStatus.WON and self.winner is not None:
            return f"{self.winner.symbol} wins"
        if self.status is GameStatus.DRAW:
            return "draw"
        return "in progress"
