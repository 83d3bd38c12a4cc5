import io
import logging
from pathlib import Path

import pytest

from grid_astar import main as main_mod
from grid_astar.core.solver import SolveStatus
from grid_astar.utils.cli.terminal_view import TerminalView


def _write_config(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(text)
    return path


@pytest.fixture
def quiet_session(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(main_mod.SEED_ENV_VAR, raising=False)
    path = _write_config(
        tmp_path,
        "grid:\n  columns: 12\n  rows: 12\n  wall_probability: 0.0\n"
        "run:\n  steps_per_tick: 4\n  tick_rate: 1000\n"
        "gui:\n  enabled: false\n",
    )
    session = main_mod.bootstrap(path)
    session.time_manager.sleep_until_next_tick = lambda: None  # type: ignore[assignment]
    return session


def test_bootstrap_reads_config(quiet_session):
    assert quiet_session.scenario.grid.columns == 12
    assert quiet_session.controller.steps_per_tick == 4


def test_seed_env_overrides_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = _write_config(tmp_path, "grid:\n  columns: 15\n  rows: 15\n  seed: 1\n")
    monkeypatch.setenv(main_mod.SEED_ENV_VAR, "77")
    assert main_mod.bootstrap(path).config.grid.seed == 77
    monkeypatch.setenv(main_mod.SEED_ENV_VAR, "abc")
    assert main_mod.bootstrap(path).config.grid.seed == 1


def test_config_path_from_env(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = _write_config(tmp_path, "grid:\n  columns: 5\n  rows: 7\n")
    monkeypatch.setenv(main_mod.CONFIG_ENV_VAR, str(path))
    session = main_mod.bootstrap()
    assert (session.scenario.grid.columns, session.scenario.grid.rows) == (5, 7)


def test_headless_loop_runs_to_solution(quiet_session):
    out = io.StringIO()
    status = main_mod.run_loop(quiet_session, view=TerminalView(stream=out, colour=False))
    assert status is SolveStatus.SOLVED
    # Open 12x12 board: 11 diagonal expansions plus the goal selection
    assert quiet_session.solver.steps_taken == 12
    assert quiet_session.time_manager.tick_counter == 0
    assert out.getvalue().rstrip().endswith("path=12")


def test_paused_loop_only_steps_on_request(quiet_session):
    state = {"paused": True, "step": False, "running": True}
    main_mod.run_loop(quiet_session, max_ticks=3, state=state)
    assert quiet_session.solver.steps_taken == 0

    state["step"] = True
    main_mod.run_loop(quiet_session, max_ticks=1, state=state)
    assert quiet_session.solver.steps_taken == 4
    assert state["step"] is False


def test_module_levels_applied():
    cfg = main_mod.LoggingConfig(
        global_level="INFO",
        module_levels={"grid_astar.core.solver": "warning", "grid_astar.session": "LOUD"},
    )
    main_mod.configure_logging(cfg)
    assert logging.getLogger("grid_astar.core.solver").level == logging.WARNING
    assert logging.getLogger("grid_astar.session").level == logging.NOTSET
    logging.getLogger("grid_astar.core.solver").setLevel(logging.NOTSET)
