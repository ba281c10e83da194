"""Sliding puzzle solver."""

from __future__ import annotations

import logging

from npuzzle.engine.heuristic import manhattan
from npuzzle.engine.search import SearchResult, a_star
from npuzzle.engine.search.astar import TieBreak
from npuzzle.engine.solvability import is_solvable
from npuzzle.models.board import Board, Direction
from npuzzle.models.errors import SearchExhaustedError, UnsolvableBoardError

logger = logging.getLogger(__name__)


class Solver:
    """Stateless solver; all methods are static."""

    @staticmethod
    def solve(
        board: Board,
        tie_break: TieBreak = "fifo",
        max_expansions: int | None = None,
        timeout_sec: float | None = None,
    ) -> SearchResult:
        """Return the optimal solution of *board*.

        Raises :class:`UnsolvableBoardError` before any search when the
        parity check rejects the board, and :class:`SearchExhaustedError`
        when the search stops without reaching the goal.
        """
        if not Solver.is_solvable(board):
            logger.info("Rejected unsolvable %d×%d board", board.size, board.size)
            raise UnsolvableBoardError()

        result = a_star(
            board,
            manhattan,
            tie_break=tie_break,
            max_expansions=max_expansions,
            timeout_sec=timeout_sec,
        )
        if result.path is None:
            raise SearchExhaustedError(result)
        logger.info(
            "Solved %d×%d board in %d moves (%d nodes expanded)",
            board.size, board.size, result.cost, result.expanded,
        )
        return result

    @staticmethod
    def hint(board: Board) -> Direction | None:
        """Return the first move of an optimal solution, or ``None`` if solved."""
        if board.is_goal():
            return None
        moves = Solver.solve(board).moves
        return moves[0] if moves else None

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state."""
        return is_solvable(board)
