"""Sliding puzzle solver: breadth-first, depth-first and A* search.

All three strategies share the move generator and the visited registry:

  - BFS pops the oldest board, DFS the newest (and stops expanding at the
    configured max depth).  Neither generates the move undoing the last one.
  - A* pops the lowest g + h rank; successors are ranked when created.
  - A board reached again along a strictly shorter path replaces the stored
    one and goes back into the frontier.

An empty frontier without a solved board is a normal "no path" result.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from collections import deque

from backend.engine.moves import MoveGenerator
from backend.engine.searchstate import SearchStats
from backend.engine.solver.registry import VisitedRegistry
from backend.models.board import Board, Direction
from backend.models.errors import StrategyMismatchError
from backend.models.metrics import Heuristic
from backend.models.result import SolveResult
from backend.models.strategy import Algorithm, Strategy

logger = logging.getLogger(__name__)

# A* does not restrict reversals, so the order only breaks ties.
_ASTAR_ORDER: tuple[Direction, ...] = (
    Direction.LEFT,
    Direction.UP,
    Direction.RIGHT,
    Direction.DOWN,
)


class Solver:
    """Stateless solver; all methods are static."""

    @staticmethod
    def solve(board: Board, strategy: Strategy) -> SolveResult:
        """Search for a path from *board* to the goal.

        Raises ``InvalidBoardError`` before searching if *board* is not a
        legal grid.  Returns a ``SolveResult`` whose ``path`` is ``None`` when
        the reachable space (or, for DFS, the depth bound) is exhausted.
        """
        board.validate()

        logger.info(
            "Solving %d×%d board with %s", board.width, board.height, strategy.describe()
        )
        if logger.isEnabledFor(logging.WARNING) and not Solver.is_solvable(board):
            logger.warning(
                "Board fails the parity test; the search will run to exhaustion."
            )

        # The start board is the root of the search, whatever it carries.
        start = Board(width=board.width, height=board.height, tiles=board.tiles)

        if strategy.algorithm is Algorithm.ASTAR:
            if strategy.heuristic is None:
                raise StrategyMismatchError("A* needs a heuristic.")
            result = Solver._solve_priority(start, strategy.heuristic)
        else:
            result = Solver._solve_basic(
                start,
                strategy.order,
                is_dfs=strategy.algorithm is Algorithm.DFS,
                max_depth=strategy.max_depth,
            )

        if result.solved:
            logger.info(
                "Found a %d-move path (visited %d, processed %d, max depth %d) in %.3f ms",
                result.path_length,
                result.visited_states,
                result.processed_states,
                result.max_depth,
                result.elapsed_ms,
            )
        else:
            logger.info(
                "No path found (visited %d, processed %d, max depth %d) in %.3f ms",
                result.visited_states,
                result.processed_states,
                result.max_depth,
                result.elapsed_ms,
            )
        return result

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state.

        Standard parity rule:
        - odd width:  the inversion count is even.
        - even width: inversions + blank row counted from the bottom (1-based)
          is odd.
        """
        tiles = [v for v in board.tiles if v != 0]
        if board.width == 1 or board.height == 1:
            # A single line only lets the blank shift along it.
            return tiles == sorted(tiles)

        parity = Solver._inversion_parity(tiles)
        if board.width % 2 == 1:
            return parity == 0
        blank_row_from_bottom = board.height - board.blank_pos[0]
        return (parity + blank_row_from_bottom) % 2 == 1

    @staticmethod
    def _inversion_parity(tiles: list[int]) -> int:
        """Parity of the inversion count of *tiles* (labels ``1..n``), in O(n).

        A permutation of n items with c cycles is a product of n - c
        transpositions, and every transposition flips the inversion parity.
        """
        seen = [False] * len(tiles)
        cycles = 0
        for start in range(len(tiles)):
            if seen[start]:
                continue
            cycles += 1
            i = start
            while not seen[i]:
                seen[i] = True
                i = tiles[i] - 1
        return (len(tiles) - cycles) % 2

    # -- strategies -----------------------------------------------------------

    @staticmethod
    def _solve_basic(
        start: Board, order: tuple[Direction, ...], is_dfs: bool, max_depth: int
    ) -> SolveResult:
        stats = SearchStats()
        queue: deque[Board] = deque([start])
        visited = VisitedRegistry()
        visited.upsert(start)

        # LIFO popping reverses the push order, so push the caller's first
        # direction last.
        if is_dfs:
            order = tuple(reversed(order))

        while queue:
            current = queue.pop() if is_dfs else queue.popleft()
            stats.record(current)

            if current.is_solved():
                return stats.result(current.path, len(visited))

            # Depth-limited boards count as processed but are not expanded.
            if is_dfs and current.depth >= max_depth:
                continue

            for neighbour in MoveGenerator.neighbours(current, order, current.last_move):
                if visited.upsert(neighbour):
                    queue.append(neighbour)

        return stats.result(None, len(visited))

    @staticmethod
    def _solve_priority(start: Board, heuristic: Heuristic) -> SolveResult:
        stats = SearchStats()
        counter = itertools.count()
        start = Board(
            width=start.width,
            height=start.height,
            tiles=start.tiles,
            rank=heuristic.evaluate(start.tiles, start.width, start.height),
        )
        # Ties on rank pop in insertion order.
        frontier: list[tuple[int, int, Board]] = [(start.rank, next(counter), start)]
        visited = VisitedRegistry()
        visited.upsert(start)

        while frontier:
            _, _, current = heapq.heappop(frontier)
            stats.record(current)

            if current.is_solved():
                return stats.result(current.path, len(visited))

            for neighbour in MoveGenerator.neighbours(
                current, _ASTAR_ORDER, heuristic=heuristic
            ):
                if visited.upsert(neighbour):
                    heapq.heappush(frontier, (neighbour.rank, next(counter), neighbour))

        return stats.result(None, len(visited))
