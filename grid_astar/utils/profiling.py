"""cProfile helpers for measuring solver step cost."""

from __future__ import annotations

import cProfile
import pstats
from pathlib import Path
from typing import Tuple

from ..core.grid import Grid
from ..core.solver import AStarSolver


def clone_search(solver: AStarSolver, grid: Grid, start: tuple[int, int]) -> AStarSolver:
    """Return a fresh solver on a copy of ``grid`` searching the same endpoints.

    The copy shares no cells with ``grid``, so stepping it leaves the
    live search untouched.
    """

    if solver.end is None:
        raise ValueError("Cannot clone a solver that was never initialized")
    copy = Grid.from_layout(grid.to_layout())
    clone = AStarSolver(solver.heuristic)
    clone.initialize(copy, copy.get_cell(*start), copy.get_cell(*solver.end.coord))
    return clone


def profile_steps(
    solver: AStarSolver,
    n: int,
    out_path: str | Path = "profile.prof",
) -> Tuple[int, pstats.Stats]:
    """Profile up to ``n`` calls of ``solver.step`` and dump stats to ``out_path``.

    Stops early once the search finishes. Returns the number of steps run
    together with the profiling statistics.
    """

    if n < 1:
        raise ValueError(f"Step count must be at least 1, got {n}")

    profiler = cProfile.Profile()
    ran = 0
    profiler.enable()
    while ran < n and not solver.is_finished:
        solver.step()
        ran += 1
    profiler.disable()
    profiler.dump_stats(str(Path(out_path)))
    return ran, pstats.Stats(profiler)


__all__ = ["clone_search", "profile_steps"]
