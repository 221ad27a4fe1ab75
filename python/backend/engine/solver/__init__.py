from backend.engine.solver.registry import VisitedRegistry
from backend.engine.solver.solver import Solver

__all__ = ["Solver", "VisitedRegistry"]
