"""Permutation-parity solvability check."""

from __future__ import annotations

from collections.abc import Sequence

from npuzzle.models.board import Board


def count_inversions(values: Sequence[int]) -> int:
    """Count pairs ``i < j`` with ``values[i] > values[j]``, ignoring the blank."""
    arr = [v for v in values if v != 0]
    inversions = 0
    for i in range(len(arr)):
        for j in range(i + 1, len(arr)):
            if arr[i] > arr[j]:
                inversions += 1
    return inversions


def is_solvable(board: Board) -> bool:
    """Return True if *board* can reach the goal state.

    - N odd:  the inversion count must be even.
    - N even: inversions plus the blank's row (0-based from the top) must
      be odd. The goal itself has 0 inversions and the blank on row N-1.
    """
    inversions = count_inversions(board.flat())
    if board.size % 2 == 1:
        return inversions % 2 == 0
    blank_row = board.blank_pos[0]
    return (inversions + blank_row) % 2 == 1
