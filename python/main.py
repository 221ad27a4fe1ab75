#!/usr/bin/env python3
"""Sliding Puzzle Solver.

Usage::

    python main.py bfs RDUL puzzle.txt solution.txt stats.txt
    python main.py dfs lurd puzzle.txt solution.txt stats.txt --max-depth 25
    python main.py astr manh puzzle.txt solution.txt stats.txt -v
"""

import logging
import sys
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.solver import Solver  # noqa: E402
from backend.models.errors import (  # noqa: E402
    ConfigurationError,
    InvalidBoardError,
    PuzzleFileError,
)
from backend.models.puzzlefile import load_board, write_solution, write_stats  # noqa: E402
from backend.models.strategy import DEFAULT_MAX_DEPTH, Algorithm, Strategy  # noqa: E402
from frontend.cli.rich.report import print_report  # noqa: E402

console = Console()
err_console = Console(stderr=True)


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _fail(message: str) -> NoReturn:
    err_console.print(f"[bold red]{message}[/bold red]")
    raise typer.Exit(code=1)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    algorithm: Algorithm = typer.Argument(
        ..., help="Search strategy: bfs, dfs or astr.",
    ),
    order: str = typer.Argument(
        ...,
        help="Move order for bfs/dfs (a permutation of U, D, L, R) "
        "or heuristic for astr (hamm / manh).",
    ),
    input_file: Path = typer.Argument(..., help="Puzzle to solve."),
    solution_file: Path = typer.Argument(..., help="Where to write the path."),
    stats_file: Path = typer.Argument(..., help="Where to write the statistics."),
    max_depth: int = typer.Option(
        DEFAULT_MAX_DEPTH, "-d", "--max-depth",
        min=0,
        envvar="SLIDING_MAX_DEPTH",
        help="Depth bound for dfs.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress.",
    ),
    quiet: bool = typer.Option(
        False, "-q", "--quiet",
        help="Only write the report files.",
    ),
) -> None:
    """Solve a sliding puzzle with BFS, DFS or A*."""
    _configure_logging(verbose)

    try:
        strategy = Strategy.from_args(algorithm, order, max_depth=max_depth)
    except ConfigurationError as exc:
        raise typer.BadParameter(str(exc), param_hint="'ORDER'") from exc

    try:
        board = load_board(input_file)
        result = Solver.solve(board, strategy)
    except PuzzleFileError as exc:
        _fail(f"{type(exc).__name__}: {exc}")
    except InvalidBoardError as exc:
        _fail(f"Invalid board in {input_file}: {exc}")

    write_solution(solution_file, result)
    write_stats(stats_file, result)

    if not quiet:
        print_report(console, board, strategy, result)


if __name__ == "__main__":
    app()
