"""Batch solver steps per tick and notify observers after each batch."""

from __future__ import annotations

import logging
from typing import Callable, List

from .cell import Cell
from .grid import Grid
from .solver import AStarSolver


logger = logging.getLogger(__name__)

DEFAULT_STEPS_PER_TICK = 5

Listener = Callable[["SolverController"], None]


class SolverController:
    """Drive an :class:`AStarSolver` a few steps at a time.

    The controller does not own a clock; the caller decides when to invoke
    :meth:`tick`, typically once per :class:`TimeManager` tick.
    """

    def __init__(
        self,
        solver: AStarSolver,
        steps_per_tick: int = DEFAULT_STEPS_PER_TICK,
    ) -> None:
        self.solver = solver
        self.steps_per_tick = steps_per_tick
        self.running: bool = False
        self._listeners: List[Listener] = []

    @property
    def steps_per_tick(self) -> int:
        return self._steps_per_tick

    @steps_per_tick.setter
    def steps_per_tick(self, value: int) -> None:
        if value < 1:
            raise ValueError(f"steps_per_tick must be at least 1, got {value}")
        self._steps_per_tick = int(value)

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------
    def add_listener(self, callback: Listener) -> None:
        if callback not in self._listeners:
            self._listeners.append(callback)

    def remove_listener(self, callback: Listener) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _notify(self) -> None:
        for callback in list(self._listeners):
            callback(self)

    # ------------------------------------------------------------------
    # Control
    # ------------------------------------------------------------------
    def start(self) -> None:
        self.running = True

    def stop(self) -> None:
        self.running = False

    def reset(self, grid: Grid, start: Cell, end: Cell) -> None:
        """Re-initialize the solver and resume stepping."""

        self.solver.initialize(grid, start, end)
        self.running = True
        logger.debug("Controller reset; stepping %d per tick", self.steps_per_tick)
        self._notify()

    def tick(self, force: bool = False) -> bool:
        """Run one batch of steps and return ``True`` if the search is finished.

        Nothing is stepped while stopped unless ``force`` is set, which runs a
        single batch (used for manual single-stepping while paused).
        """

        if self.running or force:
            for _ in range(self.steps_per_tick):
                if self.solver.step():
                    self.stop()
                    break
        self._notify()
        return self.solver.is_finished


__all__ = ["SolverController", "DEFAULT_STEPS_PER_TICK"]
