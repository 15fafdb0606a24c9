"""CLI entrypoint for playing tic-tac-toe against the computer."""

from __future__ import annotations

import argparse
import logging
from typing import Any, Dict, Optional

from ai.factory import AI_KINDS, build_ai
from engine.config import GameConfig
from engine.errors import GameError
from engine.game import Game, StartPolicy
from engine.marks import GameStatus
from engine.players import HumanPlayer
from engine.rules import BOARD_COLS, BOARD_ROWS, pos_to_index


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play tic-tac-toe in the terminal.")
    parser.add_argument("--config", type=str, default=None, help="Path to game config JSON")
    parser.add_argument("--opponent", type=str, default=None, choices=list(AI_KINDS), help="Computer strategy")
    parser.add_argument("--human-mark", type=str, default=None, choices=["X", "O"], help="Mark the human plays")
    parser.add_argument(
        "--start-policy",
        type=str,
        default=None,
        choices=[policy.value for policy in StartPolicy],
        help="Who opens each new game",
    )
    parser.add_argument("--computer-first", action="store_true", help="Let the computer open the first game")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random strategy")
    parser.add_argument("--log-level", type=str, default="WARNING", help="Python logging level")
    return parser.parse_args(argv)


def load_config(args: argparse.Namespace) -> GameConfig:
    """Read the JSON config (if any) and apply command-line overrides."""
    payload: Dict[str, Any] = {}
    if args.config:
        payload = dict(GameConfig.read_payload(args.config))
    opponent = dict(payload.get("opponent", {}))
    if args.opponent is not None:
        opponent["kind"] = args.opponent
    if args.seed is not None:
        opponent["seed"] = args.seed
    payload["opponent"] = opponent
    if args.human_mark is not None:
        payload["human_mark"] = args.human_mark
    if args.start_policy is not None:
        payload["start_policy"] = args.start_policy
    if args.computer_first:
        payload["human_first"] = False
    return GameConfig(payload)


def parse_user_move(command: str) -> Optional[int]:
    """Accept either a cell index (0-8) or "<row> <col>"."""
    parts = command.strip().split()
    if len(parts) == 1:
        return int(parts[0])
    if len(parts) == 2:
        row, col = int(parts[0]), int(parts[1])
        if not (0 <= row < BOARD_ROWS and 0 <= col < BOARD_COLS):
            return None
        return pos_to_index(row, col)
    return None


def describe_outcome(game: Game) -> str:
    """Announce the result by player name."""
    outcome = game.current_outcome()
    if outcome.status is GameStatus.WON and outcome.winner is not None:
        winner = game.player_for(outcome.winner)
        return f"{winner.name if winner else outcome.winner.symbol} wins!"
    if outcome.status is GameStatus.DRAW:
        return "It's a tie!"
    return "Game in progress."


def build_game(config: GameConfig) -> Game:
    human = HumanPlayer(config.human_mark, name=config.human_name)
    computer = build_ai(
        config.opponent_kind,
        config.computer_mark,
        seed=config.seed,
        prefer_fast_wins=config.prefer_fast_wins,
        name=config.opponent_name,
    )
    first, second = (human, computer) if config.human_first else (computer, human)
    return Game(first, second, start_policy=config.start_policy)


def run_cli(argv: Optional[list[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))
    logger = logging.getLogger("tictactoe.cli")

    config = load_config(args)
    game = build_game(config)
    logger.info("Starting game. Human=%s Computer=%s", config.human_mark.symbol, config.computer_mark.symbol)
    print("Commands: <index 0-8> | <row> <col> | new | quit")

    while True:
        outcome = game.current_outcome()
        print()
        print(game.board.render_ascii())

        if outcome.is_terminal:
            print(f"Game over: {describe_outcome(game)}")
            answer = input("Play again? [y/N] ").strip().lower()
            if answer not in {"y", "yes"}:
                break
            game.new_game()
            continue

        user_input = input(f"{game.current_player.name} ({game.current_player.mark.symbol})> ").strip()
        if user_input.lower() in {"quit", "exit"}:
            print("Exiting game.")
            break
        if user_input.lower() == "new":
            game.new_game()
            continue

        try:
            index = parse_user_move(user_input)
        except ValueError:
            print("Invalid numeric input.")
            continue
        if index is None:
            print("Invalid command format.")
            continue

        try:
            game.submit_move(index)
        except GameError as exc:
            print(exc)


if __name__ == "__main__":
    run_cli()
