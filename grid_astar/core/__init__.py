"""core package."""

from .cell import Cell, Coord
from .grid import Grid
from .heuristics import ChebyshevHeuristic, Heuristic, ManhattanHeuristic, get_heuristic
from .solver import AStarSolver, SolveStatus

__all__ = [
    "AStarSolver",
    "Cell",
    "ChebyshevHeuristic",
    "Coord",
    "Grid",
    "Heuristic",
    "ManhattanHeuristic",
    "SolveStatus",
    "get_heuristic",
]
