"""Build computer players by strategy name."""

from __future__ import annotations

from typing import Optional

from ai.base_ai import BaseAI
from ai.minimax_ai import MinimaxAI
from ai.random_ai import RandomAI
from engine.marks import Mark

AI_KINDS = ("minimax", "random")


def build_ai(
    kind: str,
    mark: Mark,
    seed: Optional[int] = None,
    prefer_fast_wins: bool = False,
    name: str = "Computer",
) -> BaseAI:
    if kind == "minimax":
        return MinimaxAI(mark, prefer_fast_wins=prefer_fast_wins, name=name)
    if kind == "random":
        return RandomAI(mark, seed=seed, name=name)
    raise ValueError(f"Unsupported AI type: {kind}")
