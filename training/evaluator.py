"""Head-to-head evaluation of two strategies."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from training.self_play import PolicySpec, SelfPlayConfig, SelfPlayRunner

LOGGER = logging.getLogger(__name__)


@dataclass
class EvaluatorConfig:
    """Evaluation match settings."""

    games_per_side: int = 50
    base_seed: int = 10_000


@dataclass
class EvaluationReport:
    """Result of challenger vs baseline, counted from the challenger's side."""

    challenger_wins: int
    baseline_wins: int
    draws: int

    @property
    def games(self) -> int:
        return self.challenger_wins + self.baseline_wins + self.draws

    @property
    def score_rate(self) -> float:
        """Wins count 1, draws 0.5."""
        return (self.challenger_wins + 0.5 * self.draws) / max(1, self.games)


class Evaluator:
    """Plays the challenger as X and as O against the baseline."""

    def __init__(self, config: EvaluatorConfig | None = None) -> None:
        self.config = config or EvaluatorConfig()

    def evaluate(self, challenger: PolicySpec, baseline: PolicySpec) -> EvaluationReport:
        runner = SelfPlayRunner(
            SelfPlayConfig(
                base_seed=self.config.base_seed,
                log_every=max(1, self.config.games_per_side // 5),
            )
        )
        as_x = runner.summarize(runner.run_games_from_specs(challenger, baseline, self.config.games_per_side))
        as_o = runner.summarize(runner.run_games_from_specs(baseline, challenger, self.config.games_per_side))

        report = EvaluationReport(
            challenger_wins=as_x["x_wins"] + as_o["o_wins"],
            baseline_wins=as_x["o_wins"] + as_o["x_wins"],
            draws=as_x["draws"] + as_o["draws"],
        )
        LOGGER.info(
            "Eval %s vs %s | W:%d L:%d D:%d score_rate=%.3f",
            challenger.kind,
            baseline.kind,
            report.challenger_wins,
            report.baseline_wins,
            report.draws,
            report.score_rate,
        )
        return report
