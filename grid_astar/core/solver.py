"""Incremental A* search over a :class:`Grid`.

The solver is driven one iteration at a time through :meth:`AStarSolver.step`
so that callers can observe the open set, the closed set and the best path so
far between iterations.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional, Set, Tuple

from .cell import Cell, Coord
from .grid import Grid
from .heuristics import ChebyshevHeuristic, Heuristic


logger = logging.getLogger(__name__)

STEP_COST = 1


class SolveStatus(Enum):
    UNINITIALIZED = "uninitialized"
    RUNNING = "running"
    SOLVED = "solved"
    UNSOLVABLE = "unsolvable"


class AStarSolver:
    """A* with unit step cost and precomputed cell neighbours.

    The open set is a list kept in insertion order. When several cells share
    the lowest ``f`` the earliest one in that list is expanded, which makes
    the expansion order reproducible for a fixed wall layout.
    """

    def __init__(self, heuristic: Heuristic | None = None) -> None:
        self.heuristic: Heuristic = heuristic if heuristic is not None else ChebyshevHeuristic()
        self._grid: Grid | None = None
        self._end: Cell | None = None
        self._open: List[Cell] = []
        self._open_coords: Set[Coord] = set()
        self._closed: List[Cell] = []
        self._closed_coords: Set[Coord] = set()
        self._path: List[Cell] = []
        self._current: Cell | None = None
        self._status = SolveStatus.UNINITIALIZED
        self.steps_taken: int = 0

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------
    @property
    def open_set(self) -> Tuple[Cell, ...]:
        return tuple(self._open)

    @property
    def closed_set(self) -> Tuple[Cell, ...]:
        return tuple(self._closed)

    @property
    def current_path(self) -> Tuple[Cell, ...]:
        """Best path so far, most recently expanded cell first, start last."""
        return tuple(self._path)

    @property
    def current(self) -> Optional[Cell]:
        return self._current

    @property
    def end(self) -> Optional[Cell]:
        return self._end

    @property
    def status(self) -> SolveStatus:
        return self._status

    @property
    def is_finished(self) -> bool:
        return self._status in (SolveStatus.SOLVED, SolveStatus.UNSOLVABLE)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def initialize(self, grid: Grid, start: Cell, end: Cell) -> None:
        """Reset all search state and seed the open set with ``start``.

        Scores are cleared on every cell of ``grid``, not only the ones a
        previous search touched.
        """

        if start not in grid or end not in grid:
            raise ValueError("Start and end must be cells of the given grid")

        self._grid = grid
        self._end = end
        self._open.clear()
        self._open_coords.clear()
        self._closed.clear()
        self._closed_coords.clear()
        self._path.clear()
        self._current = None
        self.steps_taken = 0

        for cell in grid.cells():
            cell.reset_scores()

        start.g = 0
        start.h = self.heuristic.estimate(start, end)
        start.f = start.g + start.h
        self._add_open(start)
        self._status = SolveStatus.RUNNING
        logger.debug(
            "Initialized search from %s to %s on %dx%d grid",
            start.coord,
            end.coord,
            grid.columns,
            grid.rows,
        )

    def step(self) -> bool:
        """Run one A* iteration. Return ``True`` once the search has finished."""

        if self._status is SolveStatus.UNINITIALIZED:
            raise RuntimeError("initialize() must be called before step()")
        if self.is_finished:
            return True

        self.steps_taken += 1

        if not self._open:
            self._current = None
            self._status = SolveStatus.UNSOLVABLE
            logger.info("No solution found after %d steps", self.steps_taken)
            return True

        lowest = 0
        for i in range(1, len(self._open)):
            if self._open[i].f < self._open[lowest].f:
                lowest = i

        current = self._open[lowest]
        self._current = current

        if current is self._end:
            self._reconstruct_path(current)
            self._status = SolveStatus.SOLVED
            logger.info(
                "Solution found in %d steps, path length %d",
                self.steps_taken,
                len(self._path),
            )
            return True

        del self._open[lowest]
        self._open_coords.discard(current.coord)
        self._closed.append(current)
        self._closed_coords.add(current.coord)

        for neighbour in current.neighbours:
            if neighbour.coord in self._closed_coords or neighbour.is_wall:
                continue

            tentative_g = current.g + STEP_COST
            if neighbour.coord in self._open_coords:
                if tentative_g >= neighbour.g:
                    continue
            else:
                self._add_open(neighbour)

            neighbour.g = tentative_g
            neighbour.h = self.heuristic.estimate(neighbour, self._end)
            neighbour.f = neighbour.g + neighbour.h
            neighbour.parent = current.coord

        self._reconstruct_path(current)
        return False

    def run(self, max_steps: int | None = None) -> SolveStatus:
        """Step until the search finishes or ``max_steps`` iterations ran."""

        taken = 0
        while max_steps is None or taken < max_steps:
            taken += 1
            if self.step():
                break
        return self._status

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _add_open(self, cell: Cell) -> None:
        self._open.append(cell)
        self._open_coords.add(cell.coord)

    def _reconstruct_path(self, cell: Cell) -> None:
        assert self._grid is not None
        path = self._path
        path.clear()
        path.append(cell)
        while cell.parent is not None:
            cell = self._grid.get_cell(*cell.parent)
            path.append(cell)


__all__ = ["AStarSolver", "SolveStatus", "STEP_COST"]
