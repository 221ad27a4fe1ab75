"""Puzzle file loading and report writing.

Input format::

    <height> <width>
    <row 1: width integers>
    ...
    <row height>

The solution report holds the path length (``-1`` if none) and, when a path
exists, the move letters on a second line.  The statistics report holds path
length, visited states, processed states, max depth and elapsed milliseconds,
one per line.
"""

from __future__ import annotations

import logging
from pathlib import Path

from backend.models.board import Board
from backend.models.errors import (
    PuzzleFileCorruptError,
    PuzzleFileEmptyError,
    PuzzleFileNotFoundError,
)
from backend.models.result import SolveResult

logger = logging.getLogger(__name__)


# -- loading ------------------------------------------------------------------


def _parse_cell(token: str, path: Path) -> int:
    try:
        value = int(token)
    except ValueError:
        raise PuzzleFileCorruptError(path, f"not an integer: {token!r}") from None
    if value < 0:
        raise PuzzleFileCorruptError(path, f"negative value: {value}")
    return value


def load_board(filepath: Path | str) -> Board:
    """Read a board from *filepath*.

    Raises ``PuzzleFileNotFoundError`` if the file can't be read,
    ``PuzzleFileEmptyError`` if it has no first line and
    ``PuzzleFileCorruptError`` if any token or count is wrong.
    """
    path = Path(filepath)
    try:
        contents = path.read_text()
    except (OSError, UnicodeDecodeError):
        raise PuzzleFileNotFoundError(path) from None

    lines = contents.splitlines()
    if not lines:
        raise PuzzleFileEmptyError(path)

    dims = lines[0].split()
    if len(dims) < 2:
        raise PuzzleFileCorruptError(path, "first line must hold height and width")
    height, width = (_parse_cell(t, path) for t in dims[:2])
    if height == 0 or width == 0:
        raise PuzzleFileCorruptError(path, f"bad dimensions {height}×{width}")

    rows = [line.split() for line in lines[1:] if line.strip()]
    if len(rows) != height:
        raise PuzzleFileCorruptError(path, f"expected {height} rows, found {len(rows)}")

    flat: list[int] = []
    for y, row in enumerate(rows):
        if len(row) != width:
            raise PuzzleFileCorruptError(
                path, f"row {y + 1} has {len(row)} values, expected {width}"
            )
        flat.extend(_parse_cell(t, path) for t in row)

    logger.debug("Loaded %d×%d board from %s", width, height, path)
    return Board.from_flat(width, height, flat)


# -- reports ------------------------------------------------------------------


def _write(filepath: Path | str, lines: list[str]) -> None:
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines) + "\n")
    logger.debug("Wrote %s", path)


def write_solution(filepath: Path | str, result: SolveResult) -> None:
    lines = [str(result.path_length)]
    if result.path is not None:
        lines.append(result.path_letters)
    _write(filepath, lines)


def write_stats(filepath: Path | str, result: SolveResult) -> None:
    _write(
        filepath,
        [
            str(result.path_length),
            str(result.visited_states),
            str(result.processed_states),
            str(result.max_depth),
            f"{result.elapsed_ms:.3f}",
        ],
    )
