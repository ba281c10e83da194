"""Board model for the N-puzzle."""

from __future__ import annotations

import json
import math
import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from functools import lru_cache
from pathlib import Path

from npuzzle.models.errors import MalformedBoardError


class Direction(StrEnum):
    """Direction in which a *tile* slides into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# Blank offsets in successor order (up, down, left, right) paired with the
# direction the displaced tile travels.
_BLANK_MOVES: tuple[tuple[int, int, Direction], ...] = (
    (-1, 0, Direction.DOWN),
    (1, 0, Direction.UP),
    (0, -1, Direction.RIGHT),
    (0, 1, Direction.LEFT),
)

_SEPARATORS = re.compile(r"[\s,;]+")
_BRACKETS = re.compile(r"[\[\]()]")


@dataclass(frozen=True, order=True)
class Board:
    """Immutable N×N arrangement of tiles.

    Tiles are stored as a tuple of row tuples. 0 represents the blank.
    Boards compare, order and hash by value, so they can be used directly
    as dictionary keys during search.
    """

    size: int
    tiles: tuple[tuple[int, ...], ...]
    blank_pos: tuple[int, int] = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.size < 2:
            raise MalformedBoardError(f"Board size must be at least 2, got {self.size}.")
        if not _is_sequence(self.tiles) or not all(_is_sequence(row) for row in self.tiles):
            raise MalformedBoardError("Board tiles must be a sequence of rows.")
        rows = tuple(tuple(row) for row in self.tiles)
        if len(rows) != self.size or any(len(row) != self.size for row in rows):
            raise MalformedBoardError(
                f"Expected {self.size} rows of {self.size} tiles, "
                f"got row lengths {[len(row) for row in rows]}."
            )
        flat = [v for row in rows for v in row]
        bad = [v for v in flat if not isinstance(v, int) or isinstance(v, bool)]
        if bad:
            raise MalformedBoardError(f"Tiles must be integers, got {bad!r}.")
        if sorted(flat) != list(range(self.size * self.size)):
            missing = sorted(set(range(self.size * self.size)) - set(flat))
            duplicates = sorted({v for v in flat if flat.count(v) > 1})
            raise MalformedBoardError(
                f"Tiles must be 0..{self.size * self.size - 1} exactly once "
                f"(missing: {missing}, duplicated: {duplicates})."
            )
        index = flat.index(0)
        object.__setattr__(self, "tiles", rows)
        object.__setattr__(self, "blank_pos", divmod(index, self.size))

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> Board:
        """Create a board from a list of rows; the size is the row count."""
        return cls(size=len(rows), tiles=rows)

    @classmethod
    def from_flat(cls, size: int, flat: Sequence[int]) -> Board:
        """Chunk *flat* into *size* rows, e.g. ``from_flat(2, [1, 2, 3, 0])``."""
        if len(flat) != size * size:
            raise MalformedBoardError(
                f"Expected {size * size} tiles for size {size}, got {len(flat)}."
            )
        return cls(size=size, tiles=tuple(zip(*[iter(flat)] * size)))

    @classmethod
    def goal(cls, size: int) -> Board:
        """Return the solved board: 1..N²-1 in row-major order, blank last."""
        return cls.from_flat(size, [*range(1, size * size), 0])

    @classmethod
    def parse(cls, text: str, size: int | None = None) -> Board:
        """Parse integers separated by whitespace, commas or semicolons.

        When *size* is omitted it is inferred from the tile count, which
        must then be a perfect square.
        """
        tokens = _SEPARATORS.split(_BRACKETS.sub(" ", text).strip())
        try:
            flat = [int(t) for t in tokens if t]
        except ValueError as exc:
            raise MalformedBoardError(f"Board contains a non-integer tile: {exc}") from exc
        if size is None:
            size = math.isqrt(len(flat))
            if size * size != len(flat):
                raise MalformedBoardError(
                    f"{len(flat)} tiles do not form a square board."
                )
        return cls.from_flat(size, flat)

    @classmethod
    def from_file(cls, path: Path, size: int | None = None) -> Board:
        """Load a board from *path*.

        Accepts either a JSON list of rows or the plain text format
        understood by :meth:`parse` (typically one row per line).
        """
        text = Path(path).read_text()
        if text.lstrip().startswith("[["):
            try:
                rows = json.loads(text)
            except json.JSONDecodeError as exc:
                raise MalformedBoardError(f"Invalid JSON board in {path}: {exc}") from exc
            return cls.from_rows(rows)
        return cls.parse(text, size=size)

    # -- queries --------------------------------------------------------------

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row][col]

    def flat(self) -> tuple[int, ...]:
        return tuple(v for row in self.tiles for v in row)

    def rows(self) -> list[list[int]]:
        return [list(row) for row in self.tiles]

    def is_goal(self) -> bool:
        """Check if all tiles are in their goal positions."""
        return self.tiles == _goal_tiles(self.size)

    def is_tile_correct(self, row: int, col: int) -> bool:
        """True when the cell holds the value the goal board has there."""
        return self.tiles[row][col] == _goal_tiles(self.size)[row][col]

    # -- moves ----------------------------------------------------------------

    def neighbors(self) -> list[tuple[Direction, Board]]:
        """Return every board one blank swap away, with the tile direction.

        The blank is tried up, down, left, then right.
        """
        br, bc = self.blank_pos
        out: list[tuple[Direction, Board]] = []
        for dr, dc, direction in _BLANK_MOVES:
            tr, tc = br + dr, bc + dc
            if 0 <= tr < self.size and 0 <= tc < self.size:
                out.append((direction, self._swap((tr, tc))))
        return out

    def successors(self) -> list[Board]:
        return [board for _, board in self.neighbors()]

    def direction_to(self, other: Board) -> Direction:
        """Return the tile direction that turns this board into *other*."""
        for direction, board in self.neighbors():
            if board == other:
                return direction
        raise ValueError("Boards are not one blank move apart.")

    def _swap(self, target: tuple[int, int]) -> Board:
        br, bc = self.blank_pos
        tr, tc = target
        grid = [list(row) for row in self.tiles]
        grid[br][bc], grid[tr][tc] = grid[tr][tc], grid[br][bc]
        # A swap of a valid board is valid, so skip __post_init__ checks.
        obj = object.__new__(Board)
        object.__setattr__(obj, "size", self.size)
        object.__setattr__(obj, "tiles", tuple(tuple(row) for row in grid))
        object.__setattr__(obj, "blank_pos", (tr, tc))
        return obj

    def __str__(self) -> str:
        return "\n".join(" ".join(str(v) for v in row) for row in self.tiles)


@lru_cache(maxsize=None)
def _goal_tiles(size: int) -> tuple[tuple[int, ...], ...]:
    return Board.goal(size).tiles


def _is_sequence(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))
