"""Exceptions raised by the puzzle model and solver."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from npuzzle.engine.search.astar import SearchResult


class PuzzleError(Exception):
    """Base class for every puzzle-specific error."""


class MalformedBoardError(PuzzleError, ValueError):
    """The tiles do not describe a valid N×N board."""


class UnsolvableBoardError(PuzzleError):
    """The board has the wrong permutation parity to reach the goal."""

    def __init__(self, message: str = "The given puzzle is unsolvable.") -> None:
        super().__init__(message)


class SearchExhaustedError(PuzzleError):
    """The search stopped without reaching the goal."""

    def __init__(self, result: SearchResult) -> None:
        self.result = result
        super().__init__(
            f"No solution found (termination={result.termination}, "
            f"expanded={result.expanded})."
        )
