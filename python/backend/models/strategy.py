"""Search strategy configuration."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from backend.models.board import Direction
from backend.models.errors import (
    ConfigurationError,
    InvalidHeuristicError,
    InvalidOrderError,
    StrategyMismatchError,
)
from backend.models.metrics import Heuristic

DEFAULT_MAX_DEPTH = 20
DEFAULT_ORDER: tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
)


class Algorithm(StrEnum):
    BFS = "bfs"
    DFS = "dfs"
    ASTAR = "astr"


def parse_order(text: str) -> tuple[Direction, ...]:
    """Parse a permutation of ``U``, ``D``, ``L``, ``R`` (any case)."""
    if len(text) != 4:
        raise InvalidOrderError(f"Order must have exactly 4 letters, got {text!r}.")
    try:
        order = tuple(Direction.from_letter(ch) for ch in text)
    except ValueError as exc:
        raise InvalidOrderError(f"Invalid order {text!r}: {exc}") from exc
    if len(set(order)) != 4:
        raise InvalidOrderError(f"Order must use each of U, D, L, R once, got {text!r}.")
    return order


def parse_heuristic(text: str) -> Heuristic:
    try:
        return Heuristic(text.lower())
    except ValueError as exc:
        raise InvalidHeuristicError(
            f"Unknown heuristic {text!r} (expected 'hamm' or 'manh')."
        ) from exc


@dataclass(frozen=True)
class Strategy:
    """Which search to run and how.

    BFS/DFS carry a move ``order``; A* carries a ``heuristic``.
    ``max_depth`` bounds DFS only.
    """

    algorithm: Algorithm
    order: tuple[Direction, ...] = DEFAULT_ORDER
    heuristic: Heuristic | None = None
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if self.algorithm is Algorithm.ASTAR and self.heuristic is None:
            raise StrategyMismatchError("A* needs a heuristic.")
        if self.algorithm is not Algorithm.ASTAR and self.heuristic is not None:
            raise StrategyMismatchError(
                f"{self.algorithm.value} takes a move order, not a heuristic."
            )
        if sorted(self.order) != sorted(DEFAULT_ORDER):
            raise InvalidOrderError("Order must be a permutation of the four directions.")
        if self.max_depth < 0:
            raise ConfigurationError(f"max_depth must be >= 0, got {self.max_depth}.")

    @classmethod
    def bfs(cls, order: tuple[Direction, ...] = DEFAULT_ORDER) -> Strategy:
        return cls(Algorithm.BFS, order=order)

    @classmethod
    def dfs(
        cls,
        order: tuple[Direction, ...] = DEFAULT_ORDER,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> Strategy:
        return cls(Algorithm.DFS, order=order, max_depth=max_depth)

    @classmethod
    def astar(cls, heuristic: Heuristic) -> Strategy:
        return cls(Algorithm.ASTAR, heuristic=heuristic)

    @classmethod
    def from_args(
        cls, algorithm: Algorithm, order: str, max_depth: int = DEFAULT_MAX_DEPTH
    ) -> Strategy:
        """Build a strategy from the command-line pair ``<algorithm> <order>``.

        Example::

            Strategy.from_args(Algorithm.BFS, "RDUL")
            Strategy.from_args(Algorithm.ASTAR, "manh")
        """
        if algorithm is Algorithm.ASTAR:
            if order and all(ch in "UDLR" for ch in order.upper()):
                raise StrategyMismatchError(
                    f"A* takes 'hamm' or 'manh', got move order {order!r}."
                )
            return cls.astar(parse_heuristic(order))
        if order.lower() in {h.value for h in Heuristic}:
            raise StrategyMismatchError(
                f"{algorithm.value} takes a move order, got heuristic {order!r}."
            )
        return cls(algorithm, order=parse_order(order), max_depth=max_depth)

    def describe(self) -> str:
        if self.heuristic is not None:
            return f"{self.algorithm.value} ({self.heuristic.value})"
        letters = "".join(d.letter for d in self.order)
        if self.algorithm is Algorithm.DFS:
            return f"{self.algorithm.value} ({letters}, depth ≤ {self.max_depth})"
        return f"{self.algorithm.value} ({letters})"
