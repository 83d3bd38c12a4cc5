"""Everything one running search needs, wired from a :class:`Config`."""

from __future__ import annotations

import logging

from .config import Config
from .core.controller import SolverController
from .core.heuristics import get_heuristic
from .core.solver import AStarSolver
from .core.time_manager import TimeManager
from .scenario import Scenario, build_scenario


logger = logging.getLogger(__name__)


class Session:
    """Hold the scenario, solver, controller and clock for one run."""

    def __init__(self, config: Config) -> None:
        self.config = config
        self.solver = AStarSolver(get_heuristic(config.run.heuristic))
        self.controller = SolverController(self.solver, config.run.steps_per_tick)
        self.time_manager = TimeManager(config.run.tick_rate)
        self.scenario: Scenario = self._build(config.grid.seed)
        self.controller.reset(self.scenario.grid, self.scenario.start, self.scenario.end)

    def _build(self, seed: int | None) -> Scenario:
        grid_cfg = self.config.grid
        scenario = build_scenario(
            grid_cfg.columns,
            grid_cfg.rows,
            seed=seed,
            wall_probability=grid_cfg.wall_probability,
        )
        logger.info(
            "Built %dx%d grid (seed=%s, heuristic=%s)",
            grid_cfg.columns,
            grid_cfg.rows,
            seed,
            self.solver.heuristic.name,
        )
        return scenario

    def regenerate(self, seed: int | None = None) -> None:
        """Roll a new board and restart the search on it."""

        self.scenario = self._build(seed)
        self.controller.reset(self.scenario.grid, self.scenario.start, self.scenario.end)

    def restart(self) -> None:
        """Restart the search on the current board."""

        self.controller.reset(self.scenario.grid, self.scenario.start, self.scenario.end)


__all__ = ["Session"]
