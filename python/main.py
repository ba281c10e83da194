#!/usr/bin/env python3
"""N-Puzzle A* Solver.

Usage::

    python main.py                              # solve the built-in 4×4 board
    python main.py -b "1 2 3 4 0 6 7 5 8"       # 3×3 board, size inferred
    python main.py -i board.txt -f rich         # board from a file, Rich output
    python main.py --scramble 30 --seed 7 -s 4  # random solvable 4×4 board
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from npuzzle.engine.gamegenerator import GameGenerator  # noqa: E402
from npuzzle.models.board import Board  # noqa: E402
from npuzzle.models.errors import MalformedBoardError  # noqa: E402

DEFAULT_SIZE = 4
DEFAULT_BOARD: tuple[tuple[int, ...], ...] = (
    (0, 1, 2, 3),
    (6, 7, 8, 4),
    (5, 9, 10, 11),
    (13, 14, 15, 12),
)


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


class TieBreak(StrEnum):
    fifo = "fifo"
    lifo = "lifo"
    h = "h"


_RUNNERS = {
    Frontend.vanilla: "npuzzle.frontend.cli.vanilla.app",
    Frontend.rich: "npuzzle.frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


def _load_board(
    board: Optional[str],
    input_file: Optional[Path],
    size: Optional[int],
    scramble: Optional[int],
    seed: Optional[int],
) -> Board:
    sources = [s for s in (board, input_file, scramble) if s is not None]
    if len(sources) > 1:
        raise typer.BadParameter("Use only one of --board, --input and --scramble.")
    try:
        if board is not None:
            return Board.parse(board, size=size)
        if input_file is not None:
            return Board.from_file(input_file, size=size)
    except MalformedBoardError as exc:
        raise typer.BadParameter(str(exc)) from exc
    if scramble is not None:
        return GameGenerator.scramble(size or DEFAULT_SIZE, scramble, seed)
    return Board.from_rows(DEFAULT_BOARD)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    board: Optional[str] = typer.Option(
        None, "-b", "--board",
        help="Tiles in row-major order, 0 for the blank (e.g. \"1 2 3 4 0 6 7 5 8\").",
    ),
    input_file: Optional[Path] = typer.Option(
        None, "-i", "--input",
        exists=True, dir_okay=False, readable=True,
        help="File with one board row per line, or a JSON list of rows.",
    ),
    size: Optional[int] = typer.Option(
        None, "-s", "--size",
        min=2, envvar="NPUZZLE_SIZE",
        help=f"Board size N. Inferred from the tiles when omitted; {DEFAULT_SIZE} for --scramble.",
    ),
    scramble: Optional[int] = typer.Option(
        None, "--scramble",
        min=0,
        help="Generate a solvable board this many random moves from the goal.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Random seed for --scramble.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="How to print the solution.",
    ),
    tie_break: TieBreak = typer.Option(
        TieBreak.fifo, "--tie-break",
        help="Order among frontier nodes with equal f = g + h.",
    ),
    max_expansions: Optional[int] = typer.Option(
        None, "--max-expansions",
        min=1,
        help="Give up after expanding this many boards.",
    ),
    timeout: Optional[float] = typer.Option(
        None, "--timeout",
        min=0.0,
        help="Give up after this many seconds.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search statistics.",
    ),
) -> None:
    """Solve an N-puzzle with A* and the Manhattan heuristic."""
    _configure_logging(verbose)
    start = _load_board(board, input_file, size, scramble, seed)

    mod = importlib.import_module(_RUNNERS[frontend])
    solved = mod.run(
        start,
        tie_break=tie_break.value,
        max_expansions=max_expansions,
        timeout_sec=timeout,
    )
    if not solved:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
