"""Manhattan-distance heuristic."""

from __future__ import annotations

from npuzzle.models.board import Board


def manhattan(board: Board) -> int:
    """Sum of Manhattan distances of every tile to its goal cell (blank ignored).

    Admissible and consistent for unit-cost blank moves, so A* using it
    returns a minimum-move solution.
    """
    n = board.size
    dist = 0
    for r, row in enumerate(board.tiles):
        for c, tile in enumerate(row):
            if tile == 0:
                continue
            gr, gc = divmod(tile - 1, n)
            dist += abs(r - gr) + abs(c - gc)
    return dist
