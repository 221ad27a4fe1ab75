"""Exceptions raised before a search starts."""

from __future__ import annotations

from pathlib import Path


class SolverError(Exception):
    """Base class for every error this package raises on purpose."""


# -- configuration ------------------------------------------------------------


class ConfigurationError(SolverError):
    """A strategy, order or heuristic argument is malformed."""


class InvalidOrderError(ConfigurationError):
    pass


class InvalidHeuristicError(ConfigurationError):
    pass


class StrategyMismatchError(ConfigurationError):
    """An order was given to A*, or a heuristic to BFS/DFS."""


# -- input file ---------------------------------------------------------------


class PuzzleFileError(SolverError):
    """The puzzle description could not be turned into a board."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{reason}: {path}")
        self.path = path
        self.reason = reason


class PuzzleFileNotFoundError(PuzzleFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path, "File not found")


class PuzzleFileEmptyError(PuzzleFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path, "File is empty")


class PuzzleFileCorruptError(PuzzleFileError):
    def __init__(self, path: Path, detail: str = "") -> None:
        reason = "File is corrupted" + (f" ({detail})" if detail else "")
        super().__init__(path, reason)
        self.detail = detail


# -- board invariants ---------------------------------------------------------


class InvalidBoardError(SolverError):
    """The grid breaks a structural invariant (e.g. has no blank)."""
