"""Puzzle file loading and report writing."""

from __future__ import annotations

from pathlib import Path

import pytest

from backend.models.board import Direction
from backend.models.errors import (
    PuzzleFileCorruptError,
    PuzzleFileEmptyError,
    PuzzleFileError,
    PuzzleFileNotFoundError,
)
from backend.models.puzzlefile import load_board, write_solution, write_stats
from backend.models.result import SolveResult


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "puzzle.txt"
    path.write_text(text)
    return path


# -- loading ------------------------------------------------------------------


def test_load_square_board(tmp_path: Path) -> None:
    path = _write(tmp_path, "3 3\n1 2 3\n4 5 6\n7 8 0\n")

    board = load_board(path)

    assert (board.width, board.height) == (3, 3)
    assert board.is_solved()


def test_load_reads_height_before_width(tmp_path: Path) -> None:
    path = _write(tmp_path, "2 3\n1 2 3\n4 0 5\n\n")

    board = load_board(path)

    assert (board.width, board.height) == (3, 2)
    assert board.rows() == [[1, 2, 3], [4, 0, 5]]


def test_load_accepts_irregular_whitespace(tmp_path: Path) -> None:
    path = _write(tmp_path, "2  2\n 1\t2 \n3   0")

    assert load_board(str(path)).tiles == (1, 2, 3, 0)


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(PuzzleFileNotFoundError) as excinfo:
        load_board(tmp_path / "nope.txt")

    assert excinfo.value.path == tmp_path / "nope.txt"


def test_empty_file(tmp_path: Path) -> None:
    with pytest.raises(PuzzleFileEmptyError):
        load_board(_write(tmp_path, ""))


@pytest.mark.parametrize(
    "text",
    [
        "3 3\n1 2 3\n4 x 6\n7 8 0\n",
        "3 three\n1 2 3\n4 5 6\n7 8 0\n",
        "3\n1 2 3\n",
        "\n1 2\n3 0\n",
        "2 2\n1 2\n",
        "2 2\n1 2 3\n4 0\n",
        "2 2\n1 -2\n3 0\n",
        "0 0\n",
    ],
    ids=[
        "bad-cell",
        "bad-dimension",
        "missing-dimension",
        "blank-first-line",
        "missing-row",
        "long-row",
        "negative-cell",
        "zero-size",
    ],
)
def test_corrupt_file(tmp_path: Path, text: str) -> None:
    with pytest.raises(PuzzleFileCorruptError):
        load_board(_write(tmp_path, text))


def test_file_errors_are_distinct(tmp_path: Path) -> None:
    errors: list[type[PuzzleFileError]] = []
    for path in (tmp_path / "missing", _write(tmp_path, "")):
        with pytest.raises(PuzzleFileError) as excinfo:
            load_board(path)
        errors.append(type(excinfo.value))
    with pytest.raises(PuzzleFileError) as excinfo:
        load_board(_write(tmp_path, "2 2\n1 a\n3 0\n"))
    errors.append(type(excinfo.value))

    assert errors == [PuzzleFileNotFoundError, PuzzleFileEmptyError, PuzzleFileCorruptError]


# -- reports ------------------------------------------------------------------


_FOUND = SolveResult(
    path=(Direction.RIGHT, Direction.DOWN),
    visited_states=12,
    processed_states=7,
    max_depth=2,
    elapsed=0.0015,
)
_NOT_FOUND = SolveResult(
    path=None, visited_states=360, processed_states=360, max_depth=21, elapsed=0.25
)


def test_write_solution(tmp_path: Path) -> None:
    path = tmp_path / "out" / "solution.txt"

    write_solution(path, _FOUND)

    assert path.read_text() == "2\nRD\n"


def test_write_solution_without_path(tmp_path: Path) -> None:
    path = tmp_path / "solution.txt"

    write_solution(path, _NOT_FOUND)

    assert path.read_text() == "-1\n"


def test_write_stats(tmp_path: Path) -> None:
    path = tmp_path / "stats.txt"

    write_stats(path, _FOUND)

    assert path.read_text().splitlines() == ["2", "12", "7", "2", "1.500"]


def test_write_stats_without_path(tmp_path: Path) -> None:
    path = tmp_path / "stats.txt"

    write_stats(path, _NOT_FOUND)

    assert path.read_text().splitlines() == ["-1", "360", "360", "21", "250.000"]
