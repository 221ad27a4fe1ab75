"""Outcome of one solve call."""

from __future__ import annotations

from dataclasses import dataclass

from backend.models.board import Direction


@dataclass(frozen=True)
class SolveResult:
    path: tuple[Direction, ...] | None
    visited_states: int
    processed_states: int
    max_depth: int
    elapsed: float  # seconds

    @property
    def solved(self) -> bool:
        return self.path is not None

    @property
    def path_length(self) -> int:
        """Number of moves, or ``-1`` when no path was found."""
        return -1 if self.path is None else len(self.path)

    @property
    def path_letters(self) -> str:
        return "".join(d.letter for d in self.path or ())

    @property
    def elapsed_ms(self) -> float:
        return self.elapsed * 1000.0
