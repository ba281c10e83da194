"""A* search over sliding-puzzle boards."""

from __future__ import annotations

import heapq
import itertools
import logging
from collections.abc import Callable
from dataclasses import dataclass
from time import perf_counter
from typing import Literal

from npuzzle.engine.heuristic import manhattan
from npuzzle.models.board import Board, Direction

logger = logging.getLogger(__name__)

Heuristic = Callable[[Board], int]
TieBreak = Literal["fifo", "lifo", "h"]
Termination = Literal["ok", "exhausted", "limit", "timeout"]

TIE_BREAKS: tuple[str, ...] = ("fifo", "lifo", "h")


@dataclass(frozen=True, slots=True)
class SearchNode:
    """A discovered board with its path cost and a link to its parent."""

    board: Board
    g: int
    h: int
    parent: SearchNode | None = None

    @property
    def f(self) -> int:
        return self.g + self.h


@dataclass
class SearchResult:
    """Outcome and instrumentation of one A* run."""

    path: list[Board] | None
    termination: Termination
    expanded: int = 0
    generated: int = 0
    peak_open: int = 0
    time: float = 0.0
    tie_break: str = "fifo"
    relaxed: int = 0

    @property
    def solved(self) -> bool:
        return self.path is not None

    @property
    def cost(self) -> int | None:
        """Number of moves in the solution, or None when unsolved."""
        return len(self.path) - 1 if self.path is not None else None

    @property
    def moves(self) -> list[Direction]:
        """Tile directions that replay the path from its first board."""
        if not self.path:
            return []
        return [a.direction_to(b) for a, b in itertools.pairwise(self.path)]


def reconstruct_path(node: SearchNode | None) -> list[Board]:
    """Walk parent links back to the root and return boards root-first."""
    path: list[Board] = []
    while node is not None:
        path.append(node.board)
        node = node.parent
    path.reverse()
    return path


def _priority(tie_break: str, node: SearchNode, ctr: int) -> tuple[int, int, int]:
    if tie_break == "fifo":
        return (node.f, 0, ctr)
    if tie_break == "lifo":
        return (node.f, 0, -ctr)
    if tie_break == "h":
        return (node.f, node.h, ctr)
    raise ValueError(f"Unknown tie_break {tie_break!r}; expected one of {TIE_BREAKS}.")


def a_star(
    start: Board,
    heuristic: Heuristic = manhattan,
    tie_break: TieBreak = "fifo",
    max_expansions: int | None = None,
    timeout_sec: float | None = None,
) -> SearchResult:
    """Search from *start* to the goal board of the same size.

    The frontier is a binary heap ordered by ``f = g + h`` and then by
    *tie_break*: ``"fifo"`` expands equal-f nodes in discovery order,
    ``"lifo"`` most recent first, ``"h"`` lowest heuristic first.

    ``visited`` maps each discovered board to whether it has been
    expanded. A board that is rediscovered through a strictly cheaper
    path while still on the frontier is pushed again; the stale entry is
    dropped when it is popped. Expanded boards are never reopened.

    Never raises for an unreachable goal: the outcome is reported through
    :attr:`SearchResult.termination`.
    """
    t0 = perf_counter()
    counter = itertools.count()

    root = SearchNode(board=start, g=0, h=heuristic(start))
    open_heap: list[tuple[tuple[int, int, int], SearchNode]] = [
        (_priority(tie_break, root, next(counter)), root)
    ]
    visited: dict[Board, bool] = {start: False}
    best_g: dict[Board, int] = {start: 0}

    expanded = 0
    generated = 0
    relaxed = 0
    peak_open = 1

    def _result(path: list[Board] | None, termination: Termination) -> SearchResult:
        result = SearchResult(
            path=path,
            termination=termination,
            expanded=expanded,
            generated=generated,
            peak_open=peak_open,
            time=perf_counter() - t0,
            tie_break=tie_break,
            relaxed=relaxed,
        )
        logger.debug(
            "A* %s: expanded=%d generated=%d relaxed=%d peak_open=%d cost=%s in %.3fs",
            termination, expanded, generated, relaxed, peak_open, result.cost, result.time,
        )
        return result

    logger.debug("A* start: size=%d h0=%d tie_break=%s", start.size, root.h, tie_break)

    while open_heap:
        peak_open = max(peak_open, len(open_heap))
        _, node = heapq.heappop(open_heap)
        if visited[node.board] or node.g > best_g[node.board]:
            continue
        visited[node.board] = True

        if node.board.is_goal():
            return _result(reconstruct_path(node), "ok")

        # Limits count expansions, so a popped goal is still accepted.
        if max_expansions is not None and expanded >= max_expansions:
            return _result(None, "limit")
        if timeout_sec is not None and (perf_counter() - t0) > timeout_sec:
            return _result(None, "timeout")

        expanded += 1
        g2 = node.g + 1
        for succ in node.board.successors():
            generated += 1
            state = visited.get(succ)
            if state:
                continue
            if state is None:
                visited[succ] = False
                h2 = heuristic(succ)
            elif g2 < best_g[succ]:
                relaxed += 1
                h2 = heuristic(succ)
            else:
                continue
            best_g[succ] = g2
            child = SearchNode(board=succ, g=g2, h=h2, parent=node)
            heapq.heappush(open_heap, (_priority(tie_break, child, next(counter)), child))

    return _result(None, "exhausted")
