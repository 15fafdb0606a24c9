"""Run AI-vs-AI tic-tac-toe matches from the terminal."""

from __future__ import annotations

import argparse
import logging
from typing import Optional

from ai.factory import AI_KINDS
from training.evaluator import Evaluator, EvaluatorConfig
from training.self_play import PolicySpec, SelfPlayConfig, SelfPlayRunner


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Tic-tac-toe AI-vs-AI matches.")
    parser.add_argument("--x-ai", choices=list(AI_KINDS), default="minimax", help="Strategy playing X")
    parser.add_argument("--o-ai", choices=list(AI_KINDS), default="random", help="Strategy playing O")
    parser.add_argument("--games", type=int, default=20, help="Number of games to play")
    parser.add_argument("--alternate-opener", action="store_true", help="Let O open every other game")
    parser.add_argument("--fast-wins", action="store_true", help="Minimax prefers quicker wins")
    parser.add_argument("--evaluate", action="store_true", help="Play both colour assignments and report X's score")
    parser.add_argument("--seed", type=int, default=None, help="Base random seed")
    parser.add_argument("--show-boards", action="store_true", help="Print each final position")
    parser.add_argument("--log-level", type=str, default="INFO", help="Python logging level")
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))

    x_spec = PolicySpec(kind=args.x_ai, prefer_fast_wins=args.fast_wins)
    o_spec = PolicySpec(kind=args.o_ai, prefer_fast_wins=args.fast_wins)

    if args.evaluate:
        config = EvaluatorConfig(games_per_side=max(1, args.games // 2))
        if args.seed is not None:
            config.base_seed = args.seed
        report = Evaluator(config).evaluate(x_spec, o_spec)
        print(
            f"{args.x_ai} vs {args.o_ai}: W {report.challenger_wins} "
            f"L {report.baseline_wins} D {report.draws} score {report.score_rate:.3f}"
        )
        return

    runner = SelfPlayRunner(
        SelfPlayConfig(
            base_seed=args.seed,
            log_every=max(1, args.games // 10),
            alternate_opener=args.alternate_opener,
        )
    )
    trajectories = runner.run_games_from_specs(x_spec, o_spec, n_games=args.games)
    if args.show_boards:
        for number, trajectory in enumerate(trajectories, start=1):
            print(f"Game {number}: moves={trajectory.placements} -> {trajectory.outcome.describe()}")
    summary = runner.summarize(trajectories)
    print(f"X ({args.x_ai}) wins: {summary['x_wins']} | O ({args.o_ai}) wins: {summary['o_wins']} | draws: {summary['draws']}")


if __name__ == "__main__":
    main()
