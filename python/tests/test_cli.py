"""Command-line driver and path reporters."""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from main import app
from npuzzle.frontend.cli.rich.app import _cell, _render_board
from npuzzle.frontend.cli.vanilla.app import report_path
from npuzzle.models.board import Board

runner = CliRunner()


TWO_MOVE_OUTPUT = """\
Solving the puzzle...
Step 0:
1 2 3
4 0 6
7 5 8

Step 1:
1 2 3
4 5 6
7 0 8

Step 2:
1 2 3
4 5 6
7 8 0

Solver finished.
"""


def test_default_board_is_solved() -> None:
    result = runner.invoke(app, [])
    assert result.exit_code == 0, result.output
    assert result.stdout.startswith("Solving the puzzle...\nStep 0:\n0 1 2 3\n")
    assert "Step 12:\n1 2 3 4\n5 6 7 8\n9 10 11 12\n13 14 15 0\n" in result.stdout
    assert "Step 13:" not in result.stdout
    assert result.stdout.endswith("Solver finished.\n")


def test_board_option_prints_every_step() -> None:
    result = runner.invoke(app, ["--board", "1 2 3 4 0 6 7 5 8"])
    assert result.exit_code == 0, result.output
    assert result.stdout == TWO_MOVE_OUTPUT


def test_unsolvable_board_skips_search() -> None:
    result = runner.invoke(app, ["-b", "1 2 3 4 5 6 8 7 0"])
    assert result.exit_code == 1
    assert result.stdout == "The given puzzle is unsolvable.\n"


def test_malformed_board_is_a_usage_error() -> None:
    result = runner.invoke(app, ["-b", "1 2 3 4 5 6 7 8 8"])
    assert result.exit_code == 2


def test_conflicting_sources_are_rejected() -> None:
    result = runner.invoke(app, ["-b", "1 2 3 0", "--scramble", "3"])
    assert result.exit_code == 2


def test_expansion_limit_reports_no_solution() -> None:
    result = runner.invoke(app, ["--max-expansions", "1"])
    assert result.exit_code == 1
    assert result.stdout == "Solving the puzzle...\nNo solution found.\n"


def test_input_file_text(tmp_path) -> None:
    path = tmp_path / "board.txt"
    path.write_text("1 2 3\n4 0 6\n7 5 8\n")
    result = runner.invoke(app, ["-i", str(path)])
    assert result.exit_code == 0, result.output
    assert result.stdout == TWO_MOVE_OUTPUT


def test_input_file_json(tmp_path) -> None:
    path = tmp_path / "board.json"
    path.write_text(json.dumps([[1, 2], [0, 3]]))
    result = runner.invoke(app, ["--input", str(path)])
    assert result.exit_code == 0, result.output
    assert "Step 1:\n1 2\n3 0\n" in result.stdout


@pytest.mark.parametrize(
    "text",
    ['[[1, "a"], [2, 0]]', "[[1, 2], 3]", "[[1.0, 2.0], [3.0, 0.0]]"],
)
def test_input_file_json_malformed(tmp_path, text: str) -> None:
    path = tmp_path / "board.json"
    path.write_text(text)
    result = runner.invoke(app, ["--input", str(path)])
    assert result.exit_code == 2


def test_scramble_with_seed_is_reproducible() -> None:
    args = ["--scramble", "15", "--seed", "4", "--size", "3"]
    first = runner.invoke(app, args)
    second = runner.invoke(app, args)
    assert first.exit_code == 0, first.output
    assert first.stdout == second.stdout
    assert first.stdout.endswith("7 8 0\n\nSolver finished.\n")


def test_rich_frontend() -> None:
    result = runner.invoke(app, ["-f", "rich", "-b", "1 2 3 4 0 6 7 5 8"])
    assert result.exit_code == 0, result.output
    assert "Step 0" in result.stdout
    assert "Step 2" in result.stdout
    assert "Solver finished." in result.stdout


def test_rich_frontend_unsolvable() -> None:
    result = runner.invoke(app, ["-f", "rich", "-b", "2 1 3 0"])
    assert result.exit_code == 1
    assert "The given puzzle is unsolvable." in result.stdout


def test_tie_break_option() -> None:
    result = runner.invoke(app, ["--tie-break", "lifo", "-b", "1 2 3 4 0 6 7 5 8"])
    assert result.exit_code == 0, result.output
    assert result.stdout == TWO_MOVE_OUTPUT


def test_report_path_contract(capsys) -> None:
    report_path([Board.from_rows([[1, 2], [0, 3]]), Board.goal(2)])
    assert capsys.readouterr().out == "Step 0:\n1 2\n0 3\n\nStep 1:\n1 2\n3 0\n\nSolver finished.\n"


def test_rich_board_highlights_moved_tile() -> None:
    before = Board.from_rows([[1, 2, 3], [4, 0, 6], [7, 5, 8]])
    after = Board.from_rows([[1, 2, 3], [4, 5, 6], [7, 0, 8]])
    assert _cell(after, 1, 1, 1, moved=before.blank_pos).style == "bold black on yellow"
    assert _cell(after, 0, 0, 1, moved=before.blank_pos).style == "bold green"
    assert _cell(after, 2, 1, 1, moved=before.blank_pos).style == "dim"
    assert _render_board(after, before).row_count == 3
