from grid_astar.scenario import build_scenario


def test_start_and_end_are_opposite_free_corners():
    scenario = build_scenario(6, 4, seed=1, wall_probability=1.0)
    assert scenario.start.coord == (0, 0)
    assert scenario.end.coord == (5, 3)
    assert not scenario.start.is_wall
    assert not scenario.end.is_wall


def test_neighbours_linked_after_endpoint_override():
    scenario = build_scenario(2, 2, seed=0, wall_probability=1.0)
    # Everything but the corners is a wall, so the diagonal between them is blocked
    assert [n.coord for n in scenario.start.neighbours] == [(1, 0), (0, 1)]


def test_same_seed_same_board():
    a = build_scenario(20, 20, seed=9)
    b = build_scenario(20, 20, seed=9)
    assert a.grid.to_layout() == b.grid.to_layout()
