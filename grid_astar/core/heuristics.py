"""Distance estimates used to rank open cells."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Type

from .cell import Cell


class Heuristic(ABC):
    """Strategy estimating the remaining cost between two cells."""

    name: str = ""

    @abstractmethod
    def estimate(self, a: Cell, b: Cell) -> int:
        """Return the estimated cost of travelling from ``a`` to ``b``."""
        raise NotImplementedError


class ChebyshevHeuristic(Heuristic):
    """Max of the axis distances.

    Admissible and consistent when a diagonal step costs the same as an
    orthogonal one.
    """

    name = "chebyshev"

    def estimate(self, a: Cell, b: Cell) -> int:
        return max(abs(a.x - b.x), abs(a.y - b.y))


class ManhattanHeuristic(Heuristic):
    """Sum of the axis distances.

    Only admissible for 4-neighbour movement; with diagonals it can
    overestimate and the returned path may not be the shortest.
    """

    name = "manhattan"

    def estimate(self, a: Cell, b: Cell) -> int:
        return abs(a.x - b.x) + abs(a.y - b.y)


_HEURISTICS: Dict[str, Type[Heuristic]] = {
    ChebyshevHeuristic.name: ChebyshevHeuristic,
    ManhattanHeuristic.name: ManhattanHeuristic,
}


def get_heuristic(name: str) -> Heuristic:
    """Return a new heuristic instance registered under ``name``."""

    try:
        return _HEURISTICS[name.lower()]()
    except KeyError:
        known = ", ".join(sorted(_HEURISTICS))
        raise ValueError(f"Unknown heuristic '{name}' (expected one of: {known})") from None


__all__ = ["Heuristic", "ChebyshevHeuristic", "ManhattanHeuristic", "get_heuristic"]
