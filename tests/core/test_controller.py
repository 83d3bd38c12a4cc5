from grid_astar.core.controller import SolverController
from grid_astar.core.grid import Grid
from grid_astar.core.solver import AStarSolver, SolveStatus

import pytest


def _controller(steps_per_tick=5, width=10):
    grid = Grid.from_layout(["." * width])
    solver = AStarSolver()
    controller = SolverController(solver, steps_per_tick)
    controller.reset(grid, grid.get_cell(0, 0), grid.get_cell(width - 1, 0))
    return controller


def test_tick_runs_batch_of_steps():
    controller = _controller(steps_per_tick=3)
    assert controller.tick() is False
    assert controller.solver.steps_taken == 3


def test_tick_stops_when_solver_finishes():
    controller = _controller(steps_per_tick=5, width=4)
    assert controller.tick() is True
    assert controller.solver.status is SolveStatus.SOLVED
    assert controller.running is False
    # Corridor of 4 needs 4 steps; the batch ends early
    assert controller.solver.steps_taken == 4


def test_stopped_controller_does_not_step_unless_forced():
    controller = _controller(steps_per_tick=2)
    controller.stop()
    controller.tick()
    assert controller.solver.steps_taken == 0
    controller.tick(force=True)
    assert controller.solver.steps_taken == 2


def test_listeners_notified_each_tick():
    controller = _controller()
    seen = []
    controller.add_listener(lambda c: seen.append(c.solver.steps_taken))
    controller.tick()
    controller.tick()
    assert seen == [5, 10]
    controller.remove_listener(controller._listeners[0])
    controller.tick()
    assert len(seen) == 2


def test_invalid_batch_size_rejected():
    with pytest.raises(ValueError):
        SolverController(AStarSolver(), steps_per_tick=0)
