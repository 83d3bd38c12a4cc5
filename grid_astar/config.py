"""Simple configuration loader for grid_astar."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"

_TRUE_WORDS = {"true", "yes", "on", "1"}
_FALSE_WORDS = {"false", "no", "off", "0"}


@dataclass
class GridConfig:
    """Board dimensions and wall generation."""

    columns: int = 80
    rows: int = 80
    wall_probability: float = 0.3
    seed: Optional[int] = None


@dataclass
class RunConfig:
    """Solver pacing."""

    heuristic: str = "chebyshev"
    tick_rate: float = 10.0
    steps_per_tick: int = 5


@dataclass
class GuiConfig:
    """Display options."""

    enabled: bool = True
    window_size: tuple[int, int] = (1000, 800)
    padding: int = 20


@dataclass
class LoggingConfig:
    """Root log level plus optional per-module overrides."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    grid: GridConfig = field(default_factory=GridConfig)
    run: RunConfig = field(default_factory=RunConfig)
    gui: GuiConfig = field(default_factory=GuiConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _parse_bool(value: Any, key: str) -> bool:
    """Accept YAML booleans and their quoted spellings."""

    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_WORDS:
            return True
        if lowered in _FALSE_WORDS:
            return False
    raise ValueError(f"{key} must be a boolean, got {value!r}")


def _parse_size(value: Any, key: str) -> tuple[int, int]:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ValueError(f"{key} must be a [width, height] pair, got {value!r}")
    width, height = int(value[0]), int(value[1])
    if width <= 0 or height <= 0:
        raise ValueError(f"{key} must be positive, got {width}x{height}")
    return width, height


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    grid_data = data.get("grid") or {}
    seed = grid_data.get("seed")
    grid = GridConfig(
        columns=int(grid_data.get("columns", 80)),
        rows=int(grid_data.get("rows", 80)),
        wall_probability=float(grid_data.get("wall_probability", 0.3)),
        seed=int(seed) if seed is not None else None,
    )
    if grid.columns <= 0 or grid.rows <= 0:
        raise ValueError(f"grid.columns and grid.rows must be positive, got {grid.columns}x{grid.rows}")
    if not 0.0 <= grid.wall_probability <= 1.0:
        raise ValueError(f"grid.wall_probability must be within [0, 1], got {grid.wall_probability}")

    run_data = data.get("run") or {}
    run = RunConfig(
        heuristic=str(run_data.get("heuristic", "chebyshev")),
        tick_rate=float(run_data.get("tick_rate", 10)),
        steps_per_tick=int(run_data.get("steps_per_tick", 5)),
    )
    if run.tick_rate <= 0:
        raise ValueError(f"run.tick_rate must be positive, got {run.tick_rate}")
    if run.steps_per_tick < 1:
        raise ValueError(f"run.steps_per_tick must be at least 1, got {run.steps_per_tick}")

    gui_data = data.get("gui") or {}
    gui = GuiConfig(
        enabled=_parse_bool(gui_data.get("enabled", True), "gui.enabled"),
        window_size=_parse_size(gui_data.get("window_size", [1000, 800]), "gui.window_size"),
        padding=int(gui_data.get("padding", 20)),
    )
    if gui.padding < 0:
        raise ValueError(f"gui.padding must not be negative, got {gui.padding}")

    logging_data = data.get("logging") or {}
    log_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels=dict(logging_data.get("module_levels") or {}),
    )

    return Config(grid=grid, run=run, gui=gui, logging=log_cfg)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    if path.is_file():
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    else:
        raw = {}
    return _parse_config(raw)


__all__ = [
    "CONFIG_PATH",
    "Config",
    "GridConfig",
    "RunConfig",
    "GuiConfig",
    "LoggingConfig",
    "load_config",
]
