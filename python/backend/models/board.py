"""Board model for the sliding puzzle solver."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from backend.models.errors import InvalidBoardError
from backend.models.metrics import correct_place, hamming_metric, manhattan_metric


class Direction(StrEnum):
    """Direction the *blank* moves in."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @property
    def letter(self) -> str:
        return self.value[0].upper()

    @property
    def offset(self) -> tuple[int, int]:
        """(row, col) delta applied to the blank."""
        return _OFFSETS[self]

    @classmethod
    def from_letter(cls, letter: str) -> Direction:
        """Map a single ``U``/``D``/``L``/``R`` code (any case) to a direction."""
        for direction in cls:
            if direction.letter == letter.upper():
                return direction
        raise ValueError(f"Unknown direction code: {letter!r}")


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_OFFSETS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


@dataclass(frozen=True, eq=False)
class Board:
    """One puzzle state.

    Tiles are stored as a flat row-major tuple of ints; 0 is the blank.
    ``path`` records the moves that produced this board from the start and
    ``rank`` is the A* score fixed at construction (``None`` outside A*).

    Equality and hashing look at the tiles only: two boards reached along
    different paths are the same state.
    """

    width: int
    height: int
    tiles: tuple[int, ...]
    path: tuple[Direction, ...] = field(default=())
    rank: int | None = None

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, width: int, height: int, flat: list[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, 3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if len(flat) != width * height:
            raise InvalidBoardError(
                f"Expected {width * height} tiles for a {width}×{height} board, "
                f"got {len(flat)}."
            )
        return cls(width=width, height=height, tiles=tuple(flat))

    @classmethod
    def from_rows(cls, rows: list[list[int]]) -> Board:
        if not rows or any(len(row) != len(rows[0]) for row in rows):
            raise InvalidBoardError("Rows must be non-empty and of equal length.")
        flat = [v for row in rows for v in row]
        return cls.from_flat(len(rows[0]), len(rows), flat)

    @classmethod
    def solved(cls, width: int, height: int) -> Board:
        """Return the goal board (tiles ascending, blank bottom-right)."""
        size = width * height
        return cls(width=width, height=height, tiles=tuple(range(1, size)) + (0,))

    # -- invariants -----------------------------------------------------------

    def validate(self) -> None:
        """Raise ``InvalidBoardError`` unless the grid is a legal puzzle."""
        if self.width < 1 or self.height < 1:
            raise InvalidBoardError(
                f"Board dimensions must be positive, got {self.width}×{self.height}."
            )
        size = self.width * self.height
        if len(self.tiles) != size:
            raise InvalidBoardError(
                f"Expected {size} tiles for a {self.width}×{self.height} board, "
                f"got {len(self.tiles)}."
            )
        blanks = self.tiles.count(0)
        if blanks != 1:
            raise InvalidBoardError(f"Board must contain exactly one blank, found {blanks}.")
        if sorted(self.tiles) != list(range(size)):
            raise InvalidBoardError(
                f"Tiles must be the distinct labels 0..{size - 1}."
            )

    # -- queries --------------------------------------------------------------

    @property
    def blank_index(self) -> int:
        return self.tiles.index(0)

    @property
    def blank_pos(self) -> tuple[int, int]:
        """(row, col) of the blank."""
        return divmod(self.blank_index, self.width)

    @property
    def depth(self) -> int:
        return len(self.path)

    @property
    def last_move(self) -> Direction | None:
        return self.path[-1] if self.path else None

    def rows(self) -> list[list[int]]:
        w = self.width
        return [list(self.tiles[r * w : (r + 1) * w]) for r in range(self.height)]

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row * self.width + col]

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        # The blank is the cheapest discriminator.
        if self.tiles[-1] != 0:
            return False
        for i, v in enumerate(self.tiles[:-1]):
            if v != i + 1:
                return False
        return True

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        x, y = self.correct_place(self.get_tile(row, col))
        return row == y and col == x

    def correct_place(self, value: int) -> tuple[int, int]:
        """Goal (x, y) of *value*; the blank belongs in the last cell."""
        return correct_place(value, self.width, self.height)

    def hamming_metric(self) -> int:
        return hamming_metric(self.tiles)

    def manhattan_metric(self) -> int:
        return manhattan_metric(self.tiles, self.width, self.height)

    # -- identity -------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.tiles == other.tiles

    def __hash__(self) -> int:
        return hash(self.tiles)

    def __str__(self) -> str:
        cell = len(str(self.width * self.height - 1))
        return "\n".join(" ".join(f"{v:>{cell}}" for v in row) for row in self.rows())
