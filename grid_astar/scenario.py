"""Reference board setup: random walls, corner-to-corner search."""

from __future__ import annotations

from dataclasses import dataclass
from random import Random

from .core.cell import Cell
from .core.grid import DEFAULT_WALL_PROBABILITY, Grid


@dataclass
class Scenario:
    grid: Grid
    start: Cell
    end: Cell


def build_scenario(
    columns: int,
    rows: int,
    seed: int | None = None,
    wall_probability: float = DEFAULT_WALL_PROBABILITY,
) -> Scenario:
    """Create a random grid with start top-left and end bottom-right.

    Start and end are cleared of walls before neighbours are linked so that
    diagonals next to them are not blocked by walls that no longer exist.
    """

    grid = Grid(columns, rows, rng=Random(seed), wall_probability=wall_probability)
    start = grid.get_cell(0, 0)
    end = grid.get_cell(columns - 1, rows - 1)
    start.is_wall = False
    end.is_wall = False
    grid.add_neighbours()
    return Scenario(grid=grid, start=start, end=end)


__all__ = ["Scenario", "build_scenario"]
