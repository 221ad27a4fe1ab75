"""Visited-state registry shared by every search strategy."""

from __future__ import annotations

from backend.models.board import Board


class VisitedRegistry:
    """Deduplicates boards by tile content.

    For each distinct grid the registry keeps the instance with the shortest
    path seen so far.  ``upsert`` tells the caller whether the candidate
    should (re-)enter the frontier.
    """

    def __init__(self) -> None:
        self._boards: dict[tuple[int, ...], Board] = {}

    def __len__(self) -> int:
        return len(self._boards)

    def __contains__(self, board: object) -> bool:
        return isinstance(board, Board) and board.tiles in self._boards

    def get(self, board: Board) -> Board | None:
        return self._boards.get(board.tiles)

    def upsert(self, board: Board) -> bool:
        """Insert *board*, or replace the stored one if *board* is strictly shorter.

        Returns True when *board* was stored (new grid, or a shorter path to a
        known grid), False when it was discarded.
        """
        previous = self._boards.get(board.tiles)
        if previous is not None and previous.depth <= board.depth:
            return False
        self._boards[board.tiles] = board
        return True
