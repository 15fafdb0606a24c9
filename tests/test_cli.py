"""Tests for configuration loading and the terminal front ends."""

import json

import pytest

from ai.minimax_ai import MinimaxAI
from ai.random_ai import RandomAI
from cli import main as play_cli
from cli import selfplay as selfplay_cli
from engine.config import GameConfig
from engine.game import Game, StartPolicy
from engine.marks import Mark
from engine.players import HumanPlayer


def test_config_defaults():
    config = GameConfig()
    assert config.human_mark is Mark.X
    assert config.computer_mark is Mark.O
    assert config.opponent_kind == "minimax"
    assert config.start_policy is StartPolicy.FIXED
    assert config.human_first
    assert config.seed is None


def test_config_from_json(tmp_path):
    path = tmp_path / "game.json"
    path.write_text(
        json.dumps(
            {
                "human_mark": "o",
                "start_policy": "alternate",
                "opponent": {"kind": "random", "seed": 3},
            }
        ),
        encoding="utf-8",
    )
    config = GameConfig.from_json(path)
    assert config.human_mark is Mark.O
    assert config.start_policy is StartPolicy.ALTERNATE
    assert config.opponent_kind == "random"
    assert config.seed == 3


def test_config_rejects_empty_mark():
    with pytest.raises(ValueError):
        GameConfig({"human_mark": ""})


@pytest.mark.parametrize("command, expected", [("4", 4), ("1 2", 5), ("0 0", 0), ("3 3", None), ("a b c", None)])
def test_parse_user_move(command, expected):
    assert play_cli.parse_user_move(command) == expected


def test_parse_user_move_rejects_text():
    with pytest.raises(ValueError):
        play_cli.parse_user_move("centre")


def test_cli_overrides_config(tmp_path):
    path = tmp_path / "game.json"
    path.write_text(json.dumps({"opponent": {"kind": "minimax"}}), encoding="utf-8")
    args = play_cli.parse_args(["--config", str(path), "--opponent", "random", "--seed", "9", "--computer-first"])
    config = play_cli.load_config(args)
    assert config.opponent_kind == "random"
    assert config.seed == 9
    assert not config.human_first


def test_build_game_computer_first():
    game = play_cli.build_game(GameConfig({"human_first": False}))
    assert isinstance(game.starting_player, MinimaxAI)
    assert game.board_snapshot().count(Mark.O) == 1
    assert isinstance(game.current_player, HumanPlayer)


def test_build_game_random_opponent():
    game = play_cli.build_game(GameConfig({"opponent": {"kind": "random", "seed": 1}}))
    assert isinstance(game.players[1], RandomAI)


def test_run_cli_plays_and_quits(monkeypatch, capsys):
    answers = iter(["4", "4", "9", "x", "quit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    play_cli.run_cli([])
    out = capsys.readouterr().out
    assert "already occupied" in out
    assert "Invalid move 9" in out
    assert "Invalid numeric input." in out
    assert "Exiting game." in out


def test_selfplay_cli_summary(capsys):
    selfplay_cli.main(["--x-ai", "minimax", "--o-ai", "minimax", "--games", "2", "--log-level", "WARNING"])
    out = capsys.readouterr().out
    assert "draws: 2" in out


def test_selfplay_cli_evaluate(capsys):
    selfplay_cli.main(["--x-ai", "minimax", "--o-ai", "random", "--games", "4", "--evaluate", "--seed", "2"])
    out = capsys.readouterr().out
    assert "minimax vs random" in out
    assert " L 0 " in out


def test_describe_outcome_names_the_winner():
    game = Game(HumanPlayer(Mark.X, "Alice"), HumanPlayer(Mark.O, "Bob"))
    assert play_cli.describe_outcome(game) == "Game in progress."
    for index in (0, 4, 1, 3, 2):
        game.submit_move(index)
    assert play_cli.describe_outcome(game) == "Alice wins!"


def test_describe_outcome_tie():
    game = Game(HumanPlayer(Mark.X, "Alice"), HumanPlayer(Mark.O, "Bob"))
    for index in (0, 4, 8, 1, 7, 6, 2, 5, 3):
        game.submit_move(index)
    assert play_cli.describe_outcome(game) == "It's a tie!"
