"""Shared fixtures: an exhaustive 3×3 oracle and sampled boards.

The oracle is a breadth-first search from the goal over flat tuples, so
it does not depend on any code under test. It covers all 181,440
solvable 3×3 boards and gives their exact minimum move counts.
"""

from __future__ import annotations

import random
from collections import deque

import pytest

from npuzzle.models.board import Board

_N = 3
_GOAL = (1, 2, 3, 4, 5, 6, 7, 8, 0)


def _adjacent(i: int) -> list[int]:
    r, c = divmod(i, _N)
    out: list[int] = []
    if r > 0:      out.append(i - _N)
    if r < _N - 1: out.append(i + _N)
    if c > 0:      out.append(i - 1)
    if c < _N - 1: out.append(i + 1)
    return out


_ADJ = [_adjacent(i) for i in range(_N * _N)]


@pytest.fixture(scope="session")
def distances_3x3() -> dict[tuple[int, ...], int]:
    """Map every reachable 3×3 flat board to its optimal solution length."""
    dist = {_GOAL: 0}
    queue = deque([_GOAL])
    while queue:
        s = queue.popleft()
        z = s.index(0)
        for j in _ADJ[z]:
            lst = list(s)
            lst[z], lst[j] = lst[j], lst[z]
            t = tuple(lst)
            if t not in dist:
                dist[t] = dist[s] + 1
                queue.append(t)
    return dist


@pytest.fixture(scope="session")
def sampled_3x3(distances_3x3: dict[tuple[int, ...], int]) -> list[tuple[Board, int]]:
    """A fixed random sample of solvable 3×3 boards with their optimal cost."""
    rng = random.Random(42)
    flats = rng.sample(sorted(distances_3x3), 80)
    return [(Board.from_flat(_N, list(f)), distances_3x3[f]) for f in flats]


@pytest.fixture
def replay():
    """Return a helper applying tile directions, failing on an illegal move."""

    def _replay(board: Board, moves) -> Board:
        for i, direction in enumerate(moves):
            options = dict(board.neighbors())
            assert direction in options, f"Move {i} ({direction.value}) is illegal"
            board = options[direction]
        return board

    return _replay
