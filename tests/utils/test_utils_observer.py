from grid_astar.core.time_manager import TimeManager
from grid_astar.utils import observer


def test_average_fps():
    observer._tick_durations.clear()
    assert observer.average_fps() is None
    assert observer.format_fps() == "FPS: --"
    observer._tick_durations.extend([0.1, 0.1])
    assert observer.average_fps() == 10.0
    assert observer.format_fps().startswith("10.0 FPS")


def test_install_tick_observer_records_durations():
    observer._tick_durations.clear()
    tm = TimeManager(tick_rate=1000.0)
    observer.install_tick_observer(tm)
    observer.install_tick_observer(tm)  # second install is a no-op
    tm.sleep_until_next_tick()
    tm.sleep_until_next_tick()
    assert len(observer._tick_durations) == 2
    assert tm.tick_counter == 2


def test_toggle_live_fps(capsys):
    observer._tick_durations.clear()
    assert observer.toggle_live_fps() is True
    try:
        observer.record_tick(0.5)
        assert "FPS" in capsys.readouterr().out
    finally:
        observer.toggle_live_fps()
