"""Turn controller and the library-level game API."""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional, Tuple

from engine.board import Board
from engine.errors import GameOver
from engine.marks import Mark, Outcome
from engine.players import Player
from engine.rules import evaluate_outcome

LOGGER = logging.getLogger(__name__)

Placement = Tuple[Mark, int]


class StartPolicy(str, Enum):
    """Who opens a game started with new_game()."""

    FIXED = "fixed"
    ALTERNATE = "alternate"


class Game:
    """
    One independent game: board, outcome, and the two players.

    Every placement is followed by an explicit outcome recomputation. When
    the player on turn is search-driven, its move is computed and applied
    inline, so a single submit_move() may place two marks.
    """

    def __init__(
        self,
        first_player: Player,
        second_player: Player,
        start_policy: StartPolicy = StartPolicy.FIXED,
    ) -> None:
        if first_player.mark is second_player.mark:
            raise ValueError("Players must use distinct marks.")
        self.players: Tuple[Player, Player] = (first_player, second_player)
        self.start_policy = StartPolicy(start_policy)
        self.board = Board()
        self.history: List[Placement] = []
        self.games_played = 0
        self._outcome = Outcome.in_progress()
        self._starter = first_player
        self._current = first_player
        self._begin()

    @property
    def current_player(self) -> Player:
        return self._current

    @property
    def starting_player(self) -> Player:
        return self._starter

    def current_outcome(self) -> Outcome:
        return self._outcome

    def board_snapshot(self) -> Tuple[Mark, ...]:
        return self.board.cells()

    def player_for(self, mark: Mark) -> Optional[Player]:
        for player in self.players:
            if player.mark is mark:
                return player
        return None

    def submit_move(self, index: int) -> Outcome:
        """Apply a move for the player on turn, then let computer players reply."""
        self._place(index)
        self._run_search_driven()
        return self._outcome

    def play_turn(self) -> Outcome:
        """Ask the player on turn to propose a move and submit it."""
        if self._outcome.is_terminal:
            raise GameOver(f"Game already finished: {self._outcome.describe()}.")
        return self.submit_move(self._current.propose_move(self.board))

    def new_game(self) -> Outcome:
        """Clear the board and start the next game per the start policy."""
        if self.start_policy is StartPolicy.ALTERNATE:
            self._starter = self._other(self._starter)
        self.board.reset()
        self.history = []
        self._outcome = Outcome.in_progress()
        self._current = self._starter
        self._begin()
        return self._outcome

    def _begin(self) -> None:
        self.games_played += 1
        LOGGER.info(
            "Game %d: %s (%s) opens against %s (%s)",
            self.games_played,
            self._starter.name,
            self._starter.mark.symbol,
            self._other(self._starter).name,
            self._other(self._starter).mark.symbol,
        )
        self._run_search_driven()

    def _place(self, index: int) -> None:
        if self._outcome.is_terminal:
            raise GameOver(f"Game already finished: {self._outcome.describe()}.")
        mover = self._current
        # Board.apply raises InvalidMove before touching anything.
        index = self.board.apply(index, mover.mark)
        self.history.append((mover.mark, index))
        self._outcome = evaluate_outcome(self.board.cells())
        LOGGER.debug("%s placed %s at %d -> %s", mover.name, mover.mark.symbol, index, self._outcome.describe())
        if self._outcome.is_terminal:
            LOGGER.info("Game %d finished: %s", self.games_played, self._outcome.describe())
            return
        self._current = self._other(mover)

    def _run_search_driven(self) -> None:
        while not self._outcome.is_terminal and self._current.search_driven:
            self._place(self._current.propose_move(self.board))

    def _other(self, player: Player) -> Player:
        first, second = self.players
        return second if player is first else first


def new_game(
    first_player: Player,
    second_player: Player,
    start_policy: StartPolicy = StartPolicy.FIXED,
) -> Game:
    """Create an independent game handle; first_player opens."""
    return Game(first_player, second_player, start_policy=start_policy)


def submit_move(game: Game, index: int) -> Outcome:
    """Submit a move; raises InvalidMove or GameOver without changing state."""
    return game.submit_move(index)


def current_outcome(game: Game) -> Outcome:
    return game.current_outcome()


def board_snapshot(game: Game) -> Tuple[Mark, ...]:
    return game.board_snapshot()
