"""Move generation: turns one board into its successors."""

from __future__ import annotations

from typing import Iterable

from backend.models.board import Board, Direction
from backend.models.metrics import Heuristic


class MoveGenerator:
    """Stateless move generator; all methods are static."""

    @staticmethod
    def move(
        board: Board, direction: Direction, heuristic: Heuristic | None = None
    ) -> Board | None:
        """Slide the blank one cell in *direction*.

        Returns a new board with *direction* appended to its path, or ``None``
        if the blank would leave the grid.  *board* is left untouched.  With
        a *heuristic* the successor's rank is g + h, fixed at construction.
        """
        br, bc = board.blank_pos
        dr, dc = direction.offset
        tr, tc = br + dr, bc + dc

        if not (0 <= tr < board.height and 0 <= tc < board.width):
            return None

        bi = br * board.width + bc
        ti = tr * board.width + tc
        tiles = list(board.tiles)
        tiles[bi], tiles[ti] = tiles[ti], 0
        path = board.path + (direction,)

        rank = None
        if heuristic is not None:
            rank = len(path) + heuristic.evaluate(tiles, board.width, board.height)

        return Board(
            width=board.width,
            height=board.height,
            tiles=tuple(tiles),
            path=path,
            rank=rank,
        )

    @staticmethod
    def apply(board: Board, moves: Iterable[Direction]) -> Board:
        """Replay *moves* from *board*; raises ``ValueError`` on an illegal move."""
        for i, direction in enumerate(moves):
            nxt = MoveGenerator.move(board, direction)
            if nxt is None:
                raise ValueError(
                    f"Move {i} ({direction.value}) leaves the board at blank {board.blank_pos}."
                )
            board = nxt
        return board

    @staticmethod
    def neighbours(
        board: Board,
        order: Iterable[Direction],
        last_move: Direction | None = None,
        heuristic: Heuristic | None = None,
    ) -> list[Board]:
        """Return the legal successors of *board* in *order*.

        The direction undoing *last_move* is skipped.
        """
        out: list[Board] = []
        for direction in order:
            if last_move is not None and direction is last_move.opposite:
                continue
            nxt = MoveGenerator.move(board, direction, heuristic)
            if nxt is not None:
                out.append(nxt)
        return out
