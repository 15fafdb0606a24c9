"""Game configuration loaded from JSON."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Optional

from engine.game import StartPolicy
from engine.marks import Mark, PLAYER_MARKS


class GameConfig:
    """Settings for a human-vs-computer session."""

    def __init__(self, payload: Optional[Dict[str, object]] = None) -> None:
        payload = payload or {}
        self.human_mark = Mark(str(payload.get("human_mark", "X")).upper())
        if self.human_mark not in PLAYER_MARKS:
            raise ValueError(f"human_mark must be X or O, got {self.human_mark!r}.")
        self.human_name = str(payload.get("human_name", "Player 1"))
        self.human_first = bool(payload.get("human_first", True))
        self.start_policy = StartPolicy(str(payload.get("start_policy", StartPolicy.FIXED.value)))

        opponent = payload.get("opponent", {})
        self.opponent_kind = str(opponent.get("kind", "minimax"))
        self.opponent_name = str(opponent.get("name", "Computer"))
        self.prefer_fast_wins = bool(opponent.get("prefer_fast_wins", False))
        seed = opponent.get("seed")
        self.seed = None if seed is None else int(seed)

    @property
    def computer_mark(self) -> Mark:
        return self.human_mark.opponent()

    @staticmethod
    def read_payload(path: str | Path) -> Dict[str, object]:
        return json.loads(Path(path).read_text(encoding="utf-8"))

    @classmethod
    def from_json(cls, path: str | Path) -> "GameConfig":
        return cls(cls.read_payload(path))
