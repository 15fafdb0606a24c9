"""AI-vs-AI match runner for tic-tac-toe strategies."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

import numpy as np

from ai.base_ai import BaseAI
from ai.factory import build_ai
from engine.board import Board
from engine.game import Game
from engine.marks import GameStatus, Mark, Outcome

LOGGER = logging.getLogger(__name__)


@dataclass
class PolicySpec:
    """Serializable strategy descriptor."""

    kind: str  # minimax or random
    seed: Optional[int] = None
    prefer_fast_wins: bool = False

    def build(self, mark: Mark, seed: Optional[int] = None) -> BaseAI:
        return build_ai(
            self.kind,
            mark,
            seed=self.seed if seed is None else seed,
            prefer_fast_wins=self.prefer_fast_wins,
            name=f"{self.kind}-{mark.symbol}",
        )


@dataclass
class SelfPlayConfig:
    """Self-play generation config."""

    base_seed: Optional[int] = None
    log_every: int = 10
    alternate_opener: bool = False


@dataclass
class GameTrajectory:
    """One complete game: placements, encoded positions, and result."""

    placements: List[int]
    states: np.ndarray
    outcome: Outcome
    opener: Mark = Mark.X

    @property
    def plies(self) -> int:
        return len(self.placements)


def simulate_game(x_ai: BaseAI, o_ai: BaseAI, opener: Mark = Mark.X) -> GameTrajectory:
    """Play one game between two computer players in a fresh Game."""
    first, second = (x_ai, o_ai) if opener is Mark.X else (o_ai, x_ai)
    # Both players are search-driven, so the controller finishes the game on creation.
    game = Game(first, second)

    board = Board()
    states: List[np.ndarray] = [board.encode_state()]
    for mark, index in game.history:
        board.apply(index, mark)
        states.append(board.encode_state())

    return GameTrajectory(
        placements=[index for _, index in game.history],
        states=np.stack(states),
        outcome=game.current_outcome(),
        opener=opener,
    )


class SelfPlayRunner:
    """Runs AI-vs-AI matches and returns trajectories."""

    def __init__(self, config: SelfPlayConfig | None = None) -> None:
        self.config = config or SelfPlayConfig()

    def run_games(self, x_ai: BaseAI, o_ai: BaseAI, n_games: int) -> List[GameTrajectory]:
        if x_ai.mark is not Mark.X or o_ai.mark is not Mark.O:
            raise ValueError("x_ai must play X and o_ai must play O.")
        trajectories: List[GameTrajectory] = []
        for game_index in range(n_games):
            opener = Mark.O if self.config.alternate_opener and game_index % 2 else Mark.X
            trajectory = simulate_game(x_ai, o_ai, opener=opener)
            trajectories.append(trajectory)
            if (game_index + 1) % max(1, self.config.log_every) == 0:
                LOGGER.info(
                    "Self-play game %d/%d | opener=%s outcome=%s plies=%d",
                    game_index + 1,
                    n_games,
                    opener.symbol,
                    trajectory.outcome.describe(),
                    trajectory.plies,
                )
        return trajectories

    def run_games_from_specs(
        self,
        x_spec: PolicySpec,
        o_spec: PolicySpec,
        n_games: int,
    ) -> List[GameTrajectory]:
        base_seed = self.config.base_seed
        x_ai = x_spec.build(Mark.X, seed=base_seed)
        o_ai = o_spec.build(Mark.O, seed=None if base_seed is None else base_seed + 1)
        return self.run_games(x_ai, o_ai, n_games=n_games)

    @staticmethod
    def summarize(trajectories: Sequence[GameTrajectory]) -> Dict[str, int]:
        summary = {"x_wins": 0, "o_wins": 0, "draws": 0}
        for trajectory in trajectories:
            outcome = trajectory.outcome
            if outcome.status is GameStatus.DRAW:
                summary["draws"] += 1
            elif outcome.winner is Mark.X:
                summary["x_wins"] += 1
            elif outcome.winner is Mark.O:
                summary["o_wins"] += 1
        return summary
