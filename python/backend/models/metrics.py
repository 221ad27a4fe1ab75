"""Heuristic estimates of the distance from a grid to the goal.

Both metrics skip the blank, so each is a lower bound on the number of moves
left (admissible) and changes by at most one per move (consistent).
"""

from __future__ import annotations

from enum import StrEnum
from typing import Sequence


class Heuristic(StrEnum):
    HAMMING = "hamm"
    MANHATTAN = "manh"

    def evaluate(self, tiles: Sequence[int], width: int, height: int) -> int:
        if self is Heuristic.HAMMING:
            return hamming_metric(tiles)
        return manhattan_metric(tiles, width, height)


def correct_place(value: int, width: int, height: int) -> tuple[int, int]:
    """Return the goal ``(x, y)`` of *value* on a ``width``×``height`` grid."""
    if value == 0:
        return width - 1, height - 1
    y, x = divmod(value - 1, width)
    return x, y


def hamming_metric(tiles: Sequence[int]) -> int:
    """Number of non-blank tiles not on their goal cell."""
    return sum(1 for i, v in enumerate(tiles) if v != 0 and v != i + 1)


def manhattan_metric(tiles: Sequence[int], width: int, height: int) -> int:
    """Sum of grid distances of each non-blank tile from its goal cell."""
    score = 0
    for i, v in enumerate(tiles):
        if v == 0:
            continue
        y, x = divmod(i, width)
        gx, gy = correct_place(v, width, height)
        score += abs(x - gx) + abs(y - gy)
    return score
