"""Tracks the counters and clock of a search in progress."""

from __future__ import annotations

import time

from backend.models.board import Board, Direction
from backend.models.result import SolveResult


class SearchStats:
    """Counts processed boards and times the search."""

    def __init__(self) -> None:
        self.processed_states: int = 0
        self.max_depth: int = 0
        self._start_time: float = time.perf_counter()

    # -- time tracking --------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        return time.perf_counter() - self._start_time

    # -- counters -------------------------------------------------------------

    def record(self, board: Board) -> None:
        """Count *board* as processed and update the max depth."""
        self.processed_states += 1
        if board.depth > self.max_depth:
            self.max_depth = board.depth

    def result(
        self, path: tuple[Direction, ...] | None, visited_states: int
    ) -> SolveResult:
        return SolveResult(
            path=path,
            visited_states=visited_states,
            processed_states=self.processed_states,
            max_depth=self.max_depth,
            elapsed=self.elapsed_time,
        )
