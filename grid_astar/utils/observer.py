"""Runtime observability helpers."""

from __future__ import annotations

import logging
import time
from collections import deque
from typing import Any, Deque


logger = logging.getLogger(__name__)

# Rolling history of the last 1000 tick durations in seconds
_TICK_HISTORY_LEN = 1000
_tick_durations: Deque[float] = deque(maxlen=_TICK_HISTORY_LEN)

# Whether to log FPS every tick when recording durations
_live_fps: bool = False


def record_tick(duration: float) -> None:
    """Append a tick ``duration`` in seconds to the rolling history."""

    _tick_durations.append(duration)
    if _live_fps:
        print_fps()


def average_fps() -> float | None:
    """Return the mean ticks per second, or ``None`` with no history."""

    if not _tick_durations:
        return None
    avg = sum(_tick_durations) / len(_tick_durations)
    return 1.0 / avg if avg > 0 else float("inf")


def format_fps() -> str:
    fps = average_fps()
    if fps is None:
        return "FPS: --"
    avg_ms = sum(_tick_durations) / len(_tick_durations) * 1000
    msg = f"{fps:.1f} FPS (avg {avg_ms:.1f} ms)"
    if _tick_durations[-1] > 0.1:
        msg += " - tick over budget"
    return msg


def print_fps() -> None:
    """Print average FPS and tick time based on recorded durations."""

    print(format_fps())


def toggle_live_fps() -> bool:
    """Toggle live FPS printing. Returns ``True`` if enabled after toggle."""

    global _live_fps
    _live_fps = not _live_fps
    return _live_fps


def install_tick_observer(tm: Any) -> None:
    """Wrap ``tm.sleep_until_next_tick`` to record tick durations."""

    if tm is None or hasattr(tm, "_observer_wrapped"):
        return

    original = tm.sleep_until_next_tick
    last = time.perf_counter()

    def wrapper() -> None:
        nonlocal last
        original()
        now = time.perf_counter()
        record_tick(now - last)
        last = now

    tm.sleep_until_next_tick = wrapper  # type: ignore[assignment]
    setattr(tm, "_observer_wrapped", True)
    logger.debug("Tick observer installed on %r", tm)


__all__ = [
    "record_tick",
    "average_fps",
    "format_fps",
    "print_fps",
    "toggle_live_fps",
    "install_tick_observer",
    "_tick_durations",
]
