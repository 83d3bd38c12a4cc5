import time
import pytest

from grid_astar.core.time_manager import TimeManager


def test_sleep_increments_counter():
    tm = TimeManager(tick_rate=50.0)
    start = time.perf_counter()
    tm.sleep_until_next_tick()
    elapsed = time.perf_counter() - start

    assert tm.tick_counter == 1
    # Expect roughly 20ms sleep; allow generous tolerance
    assert elapsed == pytest.approx(0.02, abs=0.015)


def test_reference_pacing_interval():
    assert TimeManager(10.0).interval == pytest.approx(0.1)


def test_non_positive_rate_rejected():
    with pytest.raises(ValueError):
        TimeManager(0)
