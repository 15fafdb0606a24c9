"""Caller-facing game errors."""

from __future__ import annotations


class GameError(Exception):
    """Base class for recoverable game errors."""


class InvalidMove(GameError, ValueError):
    """Move index out of range or targeting an occupied cell."""

    def __init__(self, index: object, reason: str) -> None:
        super().__init__(f"Invalid move {index!r}: {reason}")
        self.index = index
        self.reason = reason


class GameOver(GameError, RuntimeError):
    """Move submitted after the game already ended."""
