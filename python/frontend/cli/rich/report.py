"""Rich terminal report of a finished search.

Uses the ``rich`` library for styled output of a finished solve call.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.models.board import Board
from backend.models.result import SolveResult
from backend.models.strategy import Strategy


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    ms = seconds * 1000.0
    if ms < 1000:
        return f"{ms:.3f} ms"
    return f"{seconds:.3f} s"


# -- board rendering ----------------------------------------------------------


def render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.width * board.height - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.width):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


# -- statistics ---------------------------------------------------------------


def render_stats(result: SolveResult) -> Table:
    table = Table(show_header=False, box=rich.box.SIMPLE, padding=(0, 1))
    table.add_column(style="dim")
    table.add_column(justify="right", style="bold yellow")

    table.add_row("Path length", str(result.path_length))
    table.add_row("Visited states", f"{result.visited_states:,}")
    table.add_row("Processed states", f"{result.processed_states:,}")
    table.add_row("Max depth", str(result.max_depth))
    table.add_row("Time", _format_time(result.elapsed))
    return table


def render_path(result: SolveResult) -> Text:
    text = Text()
    if result.path is None:
        text.append("No solution found.", style="bold red")
    elif not result.path:
        text.append("Already solved!", style="bold green")
    else:
        text.append("Path: ", style="dim")
        text.append(result.path_letters, style="bold cyan")
    return text


# -- public entry point -------------------------------------------------------


def print_report(
    console: Console, board: Board, strategy: Strategy, result: SolveResult
) -> None:
    """Print the start board, the found path and the statistics."""
    body = Group(
        Align.center(render_board(board)),
        Text(""),
        Align.center(render_path(result)),
        Align.center(render_stats(result)),
    )
    border = "green" if result.solved else "red"
    panel = Panel(
        body,
        title=(
            f"[bold cyan]{board.width}×{board.height}  "
            f"{strategy.describe()}[/bold cyan]"
        ),
        border_style=border,
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
