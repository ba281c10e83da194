"""Vanilla terminal reporter: no third-party dependencies.

Prints every board of a solution as plain rows of integers, numbered
from step 0, followed by a completion line.
"""

from __future__ import annotations

from collections.abc import Sequence

from npuzzle.engine.gamesolver import Solver
from npuzzle.engine.search.astar import TieBreak
from npuzzle.models.board import Board
from npuzzle.models.errors import SearchExhaustedError

SOLVING = "Solving the puzzle..."
FINISHED = "Solver finished."
NO_SOLUTION = "No solution found."
UNSOLVABLE = "The given puzzle is unsolvable."


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> str:
    """Return the board as whitespace-separated rows."""
    return "\n".join(" ".join(str(val) for val in row) for row in board.tiles)


def report_path(path: Sequence[Board]) -> None:
    """Print each step of *path* and the completion marker."""
    for step, board in enumerate(path):
        print(f"Step {step}:")
        print(_render_board(board))
        print()
    print(FINISHED)


# -- public entry point -------------------------------------------------------


def run(
    board: Board,
    tie_break: TieBreak = "fifo",
    max_expansions: int | None = None,
    timeout_sec: float | None = None,
) -> bool:
    """Solve *board* and print the result. Returns True when solved."""
    if not Solver.is_solvable(board):
        print(UNSOLVABLE)
        return False

    print(SOLVING)
    try:
        result = Solver.solve(
            board,
            tie_break=tie_break,
            max_expansions=max_expansions,
            timeout_sec=timeout_sec,
        )
    except SearchExhaustedError:
        print(NO_SOLUTION)
        return False

    report_path(result.path)
    return True
