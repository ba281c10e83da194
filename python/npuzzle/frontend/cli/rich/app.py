"""Rich terminal reporter: tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same
solver and outcome messages as the vanilla reporter.
"""

from __future__ import annotations

from collections.abc import Sequence

import rich.box
from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from npuzzle.engine.gamesolver import Solver
from npuzzle.engine.search import SearchResult
from npuzzle.engine.search.astar import TieBreak
from npuzzle.frontend.cli.vanilla.app import FINISHED, NO_SOLUTION, SOLVING, UNSOLVABLE
from npuzzle.models.board import Board, Direction
from npuzzle.models.errors import SearchExhaustedError

console = Console()


# -- board rendering ----------------------------------------------------------


def _cell(board: Board, r: int, c: int, width: int, moved: tuple[int, int] | None) -> Text:
    val = board.get_tile(r, c)
    if val == 0:
        return Text("·".rjust(width), style="dim")
    if (r, c) == moved:
        style = "bold black on yellow"
    elif board.is_tile_correct(r, c):
        style = "bold green"
    else:
        style = "bold white"
    return Text(str(val).rjust(width), style=style)


def _render_board(board: Board, previous: Board | None = None) -> Table:
    """Grid of one solution step; the tile moved from *previous* is highlighted."""
    width = len(str(board.size * board.size - 1))
    # The moved tile now sits where the previous board had its blank.
    moved = previous.blank_pos if previous is not None else None
    grid = Table(
        show_header=False,
        box=rich.box.SQUARE,
        border_style="blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        grid.add_column(justify="right", min_width=width)
    for r in range(board.size):
        grid.add_row(*(_cell(board, r, c, width, moved) for c in range(board.size)))
    return grid


def _step_panel(
    step: int,
    board: Board,
    previous: Board | None,
    move: Direction | None,
) -> Panel:
    title = f"[bold cyan]Step {step}[/bold cyan]"
    if move is not None:
        title += f" [dim]({move.value})[/dim]"
    return Panel(
        Align.center(_render_board(board, previous)),
        title=title,
        border_style="cyan" if not board.is_goal() else "bold green",
        padding=(0, 2),
        expand=False,
    )


def _summary(result: SearchResult) -> Text:
    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(result.cost), style="bold yellow")
    stats.append("    Expanded: ", style="dim")
    stats.append(str(result.expanded), style="bold yellow")
    stats.append("    Relaxed: ", style="dim")
    stats.append(str(result.relaxed), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(f"{result.time:.3f}s", style="bold yellow")
    return stats


def report_path(path: Sequence[Board], moves: Sequence[Direction] = ()) -> None:
    """Print each step of *path* as a panel, then the completion marker."""
    previous: Board | None = None
    for step, board in enumerate(path):
        move = moves[step - 1] if 0 < step <= len(moves) else None
        console.print(_step_panel(step, board, previous, move))
        previous = board
    console.print(Text(FINISHED, style="bold green"))


# -- public entry point -------------------------------------------------------


def run(
    board: Board,
    tie_break: TieBreak = "fifo",
    max_expansions: int | None = None,
    timeout_sec: float | None = None,
) -> bool:
    """Solve *board* and print the result with Rich. Returns True when solved."""
    if not Solver.is_solvable(board):
        console.print(Text(UNSOLVABLE, style="bold red"))
        return False

    console.print(Text(SOLVING, style="bold cyan"))
    with console.status("[cyan]Searching…[/cyan]"):
        try:
            result = Solver.solve(
                board,
                tie_break=tie_break,
                max_expansions=max_expansions,
                timeout_sec=timeout_sec,
            )
        except SearchExhaustedError as exc:
            console.print(Text.assemble(
                (NO_SOLUTION, "bold red"),
                (f"  ({exc.result.termination}, {exc.result.expanded} expanded)", "dim"),
            ))
            return False

    report_path(result.path, result.moves)
    console.print(_summary(result))
    return True
