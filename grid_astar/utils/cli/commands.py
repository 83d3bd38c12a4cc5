"""Implementations of console commands."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict, List
import logging

from ..observer import format_fps, toggle_live_fps
from ..profiling import clone_search, profile_steps


logger = logging.getLogger(__name__)

DEFAULT_PROFILE_PATH = Path("profile.prof")

HELP_TEXT = (
    "/pause, /resume, /step, /reset [seed], /restart, /speed <steps_per_tick>, "
    "/status, /fps, /profile <steps> [out], /quit"
)


def pause(state: Dict[str, Any]) -> None:
    state["paused"] = True
    logger.info("Search paused.")


def resume(state: Dict[str, Any]) -> None:
    state["paused"] = False
    logger.info("Search resumed.")


def step(state: Dict[str, Any]) -> None:
    if state.get("paused", False):
        state["step"] = True
        logger.info("Stepping one tick.")
    else:
        logger.info("Search is not paused. Use /pause first.")


def quit_app(state: Dict[str, Any]) -> None:
    state["running"] = False


def reset(session: Any, seed: int | None = None) -> None:
    session.regenerate(seed)
    logger.info("New board generated (seed=%s).", seed)


def restart(session: Any) -> None:
    session.restart()
    logger.info("Search restarted on the current board.")


def speed(session: Any, steps_per_tick: int) -> None:
    session.controller.steps_per_tick = steps_per_tick
    logger.info("Running %d steps per tick.", steps_per_tick)


def status(session: Any) -> str:
    solver = session.solver
    current = solver.current.coord if solver.current is not None else None
    text = (
        f"status={solver.status.value} steps={solver.steps_taken} "
        f"open={len(solver.open_set)} closed={len(solver.closed_set)} "
        f"path={len(solver.current_path)} current={current}"
    )
    print(text)
    return text


def fps() -> None:
    enabled = toggle_live_fps()
    logger.info("Live FPS %s. %s", "enabled" if enabled else "disabled", format_fps())


def profile(session: Any, steps: int, out_path: str | Path = DEFAULT_PROFILE_PATH) -> int:
    """Profile up to ``steps`` iterations of a fresh search on a copy of the board."""

    scenario = session.scenario
    clone = clone_search(session.solver, scenario.grid, scenario.start.coord)
    ran, stats = profile_steps(clone, steps, out_path)
    logger.info("Profiled %d steps to %s", ran, out_path)
    stats.sort_stats("cumulative").print_stats(10)
    return ran


def _int_arg(args: List[str], index: int) -> int | None:
    if len(args) <= index:
        return None
    return int(args[index])


def execute(command: str, args: List[str], session: Any, state: Dict[str, Any]) -> None:
    """Dispatch ``command`` with ``args``; bad arguments are logged, not raised."""

    handlers: Dict[str, Callable[[], Any]] = {
        "pause": lambda: pause(state),
        "resume": lambda: resume(state),
        "step": lambda: step(state),
        "quit": lambda: quit_app(state),
        "exit": lambda: quit_app(state),
        "reset": lambda: reset(session, _int_arg(args, 0)),
        "restart": lambda: restart(session),
        "speed": lambda: speed(session, int(args[0])),
        "status": lambda: status(session),
        "fps": fps,
        "profile": lambda: profile(
            session, int(args[0]), args[1] if len(args) > 1 else DEFAULT_PROFILE_PATH
        ),
        "help": lambda: print(HELP_TEXT),
    }
    handler = handlers.get(command)
    if handler is None:
        logger.warning("Unknown command '/%s'. Try /help.", command)
        return
    try:
        handler()
    except (IndexError, ValueError) as exc:
        logger.error("Invalid arguments for /%s %s: %s", command, " ".join(args), exc)


__all__ = [
    "execute",
    "pause",
    "resume",
    "step",
    "quit_app",
    "reset",
    "restart",
    "speed",
    "status",
    "fps",
    "profile",
]
