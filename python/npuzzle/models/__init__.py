from npuzzle.models.board import Board, Direction
from npuzzle.models.errors import (
    MalformedBoardError,
    PuzzleError,
    SearchExhaustedError,
    UnsolvableBoardError,
)

__all__ = [
    "Board",
    "Direction",
    "MalformedBoardError",
    "PuzzleError",
    "SearchExhaustedError",
    "UnsolvableBoardError",
]
