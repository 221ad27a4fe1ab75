"""Command-line entry point."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from main import app

runner = CliRunner()


@pytest.fixture
def puzzle(tmp_path: Path) -> Path:
    path = tmp_path / "puzzle.txt"
    path.write_text("3 3\n1 2 3\n4 0 5\n7 8 6\n")
    return path


def _invoke(tmp_path: Path, *args: str):
    return runner.invoke(
        app,
        [*args, str(tmp_path / "solution.txt"), str(tmp_path / "stats.txt")],
    )


@pytest.mark.parametrize(
    ("algorithm", "order"),
    [("bfs", "UDLR"), ("dfs", "rdul"), ("astr", "manh"), ("astr", "hamm")],
)
def test_writes_solution_and_stats(
    tmp_path: Path, puzzle: Path, algorithm: str, order: str
) -> None:
    result = _invoke(tmp_path, algorithm, order, str(puzzle), "--quiet")

    assert result.exit_code == 0, result.output
    solution = (tmp_path / "solution.txt").read_text().splitlines()
    stats = (tmp_path / "stats.txt").read_text().splitlines()
    assert len(solution) == 2
    assert int(solution[0]) == len(solution[1])
    assert set(solution[1]) <= set("UDLR")
    assert len(stats) == 5
    assert stats[0] == solution[0]


def test_bfs_report_contents(tmp_path: Path, puzzle: Path) -> None:
    result = _invoke(tmp_path, "bfs", "UDLR", str(puzzle))

    assert result.exit_code == 0, result.output
    assert (tmp_path / "solution.txt").read_text() == "2\nRD\n"
    assert "RD" in result.output


def test_unsolvable_puzzle_writes_sentinel(tmp_path: Path) -> None:
    path = tmp_path / "puzzle.txt"
    path.write_text("2 2\n2 1\n3 0\n")

    result = _invoke(tmp_path, "bfs", "UDLR", str(path), "-q")

    assert result.exit_code == 0, result.output
    assert (tmp_path / "solution.txt").read_text() == "-1\n"
    assert (tmp_path / "stats.txt").read_text().splitlines()[:2] == ["-1", "12"]


def test_max_depth_option_bounds_dfs(tmp_path: Path, puzzle: Path) -> None:
    result = _invoke(tmp_path, "dfs", "UDLR", str(puzzle), "--max-depth", "1", "-q")

    assert result.exit_code == 0, result.output
    assert (tmp_path / "solution.txt").read_text() == "-1\n"


def test_invalid_strategy_is_a_usage_error(tmp_path: Path, puzzle: Path) -> None:
    result = _invoke(tmp_path, "greedy", "UDLR", str(puzzle))

    assert result.exit_code == 2
    assert not (tmp_path / "solution.txt").exists()


@pytest.mark.parametrize(
    ("algorithm", "order"),
    [("bfs", "UDLX"), ("dfs", "UUDL"), ("astr", "euclid"), ("astr", "UDLR"), ("bfs", "manh")],
)
def test_invalid_order_is_a_usage_error(
    tmp_path: Path, puzzle: Path, algorithm: str, order: str
) -> None:
    result = _invoke(tmp_path, algorithm, order, str(puzzle))

    assert result.exit_code == 2
    assert not (tmp_path / "solution.txt").exists()


@pytest.mark.parametrize(
    ("text", "error"),
    [
        (None, "PuzzleFileNotFoundError"),
        ("", "PuzzleFileEmptyError"),
        ("2 2\n1 x\n3 0\n", "PuzzleFileCorruptError"),
    ],
    ids=["missing", "empty", "corrupt"],
)
def test_bad_input_file_exits_with_classified_error(
    tmp_path: Path, text: str | None, error: str
) -> None:
    path = tmp_path / "puzzle.txt"
    if text is not None:
        path.write_text(text)

    result = _invoke(tmp_path, "bfs", "UDLR", str(path))

    assert result.exit_code == 1
    assert error in result.output
    assert not (tmp_path / "solution.txt").exists()


def test_board_without_blank_exits_before_search(tmp_path: Path) -> None:
    path = tmp_path / "puzzle.txt"
    path.write_text("2 2\n1 2\n3 4\n")

    result = _invoke(tmp_path, "astr", "manh", str(path))

    assert result.exit_code == 1
    assert not (tmp_path / "solution.txt").exists()
