"""Bootstrap and tick loop for the A* grid visualiser."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict
import logging
import os

from dotenv import load_dotenv
import pygame

from .config import CONFIG_PATH, Config, LoggingConfig, load_config
from .core.solver import SolveStatus
from .gui import input as gui_input
from .gui.renderer import Renderer
from .gui.window import Window
from .session import Session
from .utils import observer
from .utils.cli import commands
from .utils.cli.command_parser import poll_command, start_cli_thread, stop_cli_thread
from .utils.cli.terminal_view import TerminalView


logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "GRID_ASTAR_CONFIG"
SEED_ENV_VAR = "GRID_ASTAR_SEED"


def configure_logging(cfg: LoggingConfig) -> None:
    numeric_level = getattr(logging, cfg.global_level, logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True,
    )
    for module_name, level_str in cfg.module_levels.items():
        module_numeric_level = getattr(logging, str(level_str).upper(), None)
        if isinstance(module_numeric_level, int):
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


def bootstrap(config_path: str | Path | None = None) -> Session:
    """Load ``.env`` and the config file, then build a ready-to-step session."""

    env_path = Path(".env")
    if env_path.exists(): load_dotenv(env_path)

    if config_path is None:
        config_path = os.getenv(CONFIG_ENV_VAR) or CONFIG_PATH
    cfg: Config = load_config(Path(config_path))

    seed_override = os.getenv(SEED_ENV_VAR)
    if seed_override:
        try:
            cfg.grid.seed = int(seed_override)
        except ValueError:
            logger.warning("Ignoring non-integer %s=%r", SEED_ENV_VAR, seed_override)

    configure_logging(cfg.logging)
    return Session(cfg)


def run_loop(
    session: Session,
    renderer: Any = None,
    view: TerminalView | None = None,
    max_ticks: int | None = None,
    state: Dict[str, Any] | None = None,
) -> SolveStatus:
    """Tick the controller until quit, finish (headless) or ``max_ticks``.

    With a renderer the window stays open after the search finishes so the
    result can be inspected; headless runs return as soon as it finishes.
    """

    if state is None:
        state = {"paused": False, "step": False, "running": True}
    tm = session.time_manager
    controller = session.controller
    ticks = 0

    while state.get("running", True):
        if renderer is not None:
            gui_input.handle_events(session, renderer, state)
            if not state.get("running", True):
                break

        cmd = poll_command()
        if cmd:
            commands.execute(cmd.name, cmd.args, session, state)
            if not state.get("running", True):
                break

        if state.get("paused", False):
            controller.stop()
        elif not controller.running and not session.solver.is_finished:
            controller.start()

        controller.tick(force=bool(state.get("step")))
        state["step"] = False

        grid = session.scenario.grid
        if renderer is not None:
            renderer.update(grid, session.solver)
            renderer.window.refresh()
        if view is not None:
            view.render(grid, session.solver, session.scenario.start.coord)

        ticks += 1
        if max_ticks is not None and ticks >= max_ticks:
            break
        if renderer is None and session.solver.is_finished:
            break
        tm.sleep_until_next_tick()

    return session.solver.status


def main() -> None:
    session = bootstrap()
    observer.install_tick_observer(session.time_manager)
    cfg = session.config

    renderer = None
    view = None
    if cfg.gui.enabled:
        pygame.init()
        renderer = Renderer(Window(cfg.gui.window_size), padding=cfg.gui.padding)
    else:
        view = TerminalView()

    cli_thread = start_cli_thread()
    logger.info("Searching from %s to %s. Type /help for commands.",
                session.scenario.start.coord, session.scenario.end.coord)
    try:
        status = run_loop(session, renderer=renderer, view=view)
        logger.info("Finished with status %s", status.value)
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt caught. Shutting down...")
    finally:
        stop_cli_thread()
        if cli_thread.is_alive():
            cli_thread.join(timeout=0.1)
        if pygame.get_init():
            pygame.quit()


if __name__ == "__main__":
    main()
