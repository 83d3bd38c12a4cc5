import pytest

from grid_astar.core.cell import Cell
from grid_astar.core.heuristics import (
    ChebyshevHeuristic,
    Heuristic,
    ManhattanHeuristic,
    get_heuristic,
)


def test_chebyshev_is_max_axis_distance():
    h = ChebyshevHeuristic()
    assert h.estimate(Cell(0, 0), Cell(2, 2)) == 2
    assert h.estimate(Cell(1, 0), Cell(2, 2)) == 2
    assert h.estimate(Cell(5, 1), Cell(0, 3)) == 5
    assert h.estimate(Cell(4, 4), Cell(4, 4)) == 0


def test_manhattan_is_sum_of_axis_distances():
    assert ManhattanHeuristic().estimate(Cell(5, 1), Cell(0, 3)) == 7


def test_get_heuristic_by_name():
    assert isinstance(get_heuristic("chebyshev"), ChebyshevHeuristic)
    assert isinstance(get_heuristic("Manhattan"), ManhattanHeuristic)
    with pytest.raises(ValueError):
        get_heuristic("euclid")


def test_heuristic_is_abstract():
    with pytest.raises(TypeError):
        Heuristic()  # type: ignore[abstract]
