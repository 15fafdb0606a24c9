"""Exhaustive minimax search for tic-tac-toe."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ai.base_ai import BaseAI
from engine.board import Board
from engine.marks import Mark
from engine.rules import is_won, opponent

LOGGER = logging.getLogger(__name__)

WIN_SCORE = 10
LOSS_SCORE = -10
DRAW_SCORE = 0


@dataclass(frozen=True)
class SearchResult:
    """Best move and its game-theoretic score. index is None on a terminal board."""

    index: Optional[int]
    score: int


@dataclass
class SearchStats:
    """Counters collected during one search."""

    nodes: int = 0


def search(
    cells: Sequence[Mark],
    player_to_maximize: Mark,
    prefer_fast_wins: bool = False,
    stats: Optional[SearchStats] = None,
) -> SearchResult:
    """
    Full-depth minimax over a snapshot, scored for player_to_maximize.

    player_to_maximize is also the side on move at the root. Scores are
    +10 / 0 / -10 without depth discount unless prefer_fast_wins is set,
    in which case wins score 10 - plies and losses plies - 10. Ties go to
    the lowest index. The snapshot passed in is never modified.
    """
    player_to_maximize = Mark(player_to_maximize)
    if player_to_maximize is Mark.EMPTY:
        raise ValueError("Cannot search for EMPTY.")
    work = [Mark(cell) for cell in cells]
    return _minimax(work, player_to_maximize, player_to_maximize, 0, prefer_fast_wins, stats or SearchStats())


def rank_moves(
    cells: Sequence[Mark],
    player_to_maximize: Mark,
    prefer_fast_wins: bool = False,
) -> List[Tuple[int, int]]:
    """Return (index, score) for every root move, in ascending index order."""
    player_to_maximize = Mark(player_to_maximize)
    work = [Mark(cell) for cell in cells]
    if _terminal_score(work, player_to_maximize, 0, prefer_fast_wins) is not None:
        return []
    return _score_children(work, player_to_maximize, player_to_maximize, 0, prefer_fast_wins, SearchStats())


def _terminal_score(
    cells: List[Mark],
    maximizer: Mark,
    depth: int,
    prefer_fast_wins: bool,
) -> Optional[int]:
    if is_won(cells, maximizer):
        return WIN_SCORE - depth if prefer_fast_wins else WIN_SCORE
    if is_won(cells, opponent(maximizer)):
        return LOSS_SCORE + depth if prefer_fast_wins else LOSS_SCORE
    if not Board.available_moves(cells):
        return DRAW_SCORE
    return None


def _minimax(
    cells: List[Mark],
    maximizer: Mark,
    player: Mark,
    depth: int,
    prefer_fast_wins: bool,
    stats: SearchStats,
) -> SearchResult:
    stats.nodes += 1
    terminal = _terminal_score(cells, maximizer, depth, prefer_fast_wins)
    if terminal is not None:
        return SearchResult(index=None, score=terminal)

    children = _score_children(cells, maximizer, player, depth, prefer_fast_wins, stats)

    best_index, best_score = children[0]
    for index, score in children[1:]:
        # Strict comparison keeps the first (lowest index) of equal scores.
        if player is maximizer and score > best_score:
            best_index, best_score = index, score
        elif player is not maximizer and score < best_score:
            best_index, best_score = index, score
    return SearchResult(index=best_index, score=best_score)


def _score_children(
    cells: List[Mark],
    maximizer: Mark,
    player: Mark,
    depth: int,
    prefer_fast_wins: bool,
    stats: SearchStats,
) -> List[Tuple[int, int]]:
    next_player = opponent(maximizer) if player is maximizer else maximizer
    children: List[Tuple[int, int]] = []
    for index in Board.available_moves(cells):
        cells[index] = player
        result = _minimax(cells, maximizer, next_player, depth + 1, prefer_fast_wins, stats)
        cells[index] = Mark.EMPTY
        children.append((index, result.score))
    return children


class MinimaxAI(BaseAI):
    """Optimal player: always plays the minimax best move for its own mark."""

    def __init__(self, mark: Mark, prefer_fast_wins: bool = False, name: str = "Computer") -> None:
        super().__init__(mark, name)
        self.prefer_fast_wins = prefer_fast_wins
        self.last_stats = SearchStats()

    def choose_move(self, board: Board) -> int:
        """Choose move via exhaustive minimax search."""
        cells = board.cells()
        self.last_stats = SearchStats()
        result = search(cells, self.mark, prefer_fast_wins=self.prefer_fast_wins, stats=self.last_stats)
        if result.index is None:
            raise RuntimeError("No legal moves available.")
        self._log_diagnostics(cells, result.index)
        LOGGER.debug(
            "Minimax %s selected %d with score %d after %d nodes",
            self.mark.symbol,
            result.index,
            result.score,
            self.last_stats.nodes,
        )
        return result.index

    def _log_diagnostics(self, cells: Sequence[Mark], chosen: int) -> None:
        """Emit the score of every candidate when DEBUG is enabled."""
        if not LOGGER.isEnabledFor(logging.DEBUG):
            return
        for index, score in rank_moves(cells, self.mark, self.prefer_fast_wins):
            LOGGER.debug("Candidate move=%d score=%d chosen=%s", index, score, index == chosen)
