from backend.models.board import Board, Direction
from backend.models.metrics import Heuristic
from backend.models.result import SolveResult
from backend.models.strategy import Algorithm, Strategy

__all__ = ["Algorithm", "Board", "Direction", "Heuristic", "SolveResult", "Strategy"]
