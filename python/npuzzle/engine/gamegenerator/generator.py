"""Generates sliding puzzle boards for the solver."""

from __future__ import annotations

import random

from npuzzle.models.board import Board


class GameGenerator:
    """Creates boards by walking the blank away from the solved state."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board.goal(size)

    @staticmethod
    def scramble(size: int, depth: int, seed: int | None = None) -> Board:
        """Return a board at most *depth* blank moves away from the goal.

        The walk never undoes its previous move, so small depths still give
        distinct boards. Every result is solvable.
        """
        rng = random.Random(seed)
        board = Board.goal(size)
        prev: Board | None = None

        for _ in range(depth):
            candidates = board.successors()
            if prev in candidates and len(candidates) > 1:
                candidates.remove(prev)
            prev, board = board, rng.choice(candidates)
        return board

    @staticmethod
    def generate(size: int, seed: int | None = None) -> Board:
        """Return a random *solvable* board that is not already solved."""
        rng = random.Random(seed)
        while True:
            board = GameGenerator.scramble(size, size * size * 100, rng.randrange(2**32))
            if not board.is_goal():
                return board

    @staticmethod
    def unsolvable_variant(board: Board) -> Board:
        """Swap the first two non-blank tiles, flipping the board's parity."""
        flat = list(board.flat())
        i, j = [k for k, v in enumerate(flat) if v != 0][:2]
        flat[i], flat[j] = flat[j], flat[i]
        return Board.from_flat(board.size, flat)
