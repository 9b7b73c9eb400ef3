"""Simple configuration loader for grid_astar."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from .core.errors import InvalidConfiguration


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"

HEURISTICS = ("octile", "manhattan_scaled", "manhattan")


@dataclass
class SearchConfig:
    """Cost model and search limits."""

    straight_cost: int = 10
    diagonal_cost: int = 14
    heuristic: str = "octile"
    allow_corner_cutting: bool = True
    max_expansions: Optional[int] = None

    def validate(self) -> None:
        if self.straight_cost <= 0 or self.diagonal_cost <= 0:
            raise InvalidConfiguration("step costs must be positive")
        if not self.straight_cost <= self.diagonal_cost <= 2 * self.straight_cost:
            raise InvalidConfiguration(
                "diagonal_cost must lie between straight_cost and twice straight_cost"
            )
        if self.heuristic not in HEURISTICS:
            raise InvalidConfiguration(f"unknown heuristic {self.heuristic!r}")
        if self.max_expansions is not None and self.max_expansions <= 0:
            raise InvalidConfiguration("max_expansions must be positive")


@dataclass
class ScenarioConfig:
    """Grid used by the command line demo."""

    width: int = 3
    height: int = 3
    start: Tuple[int, int] = (2, 0)
    goal: Tuple[int, int] = (0, 2)
    blocked: List[Tuple[int, int]] = field(default_factory=lambda: [(1, 1)])


@dataclass
class LoggingConfig:
    """Logging levels applied by :mod:`grid_astar.main`."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    search: SearchConfig
    scenario: ScenarioConfig
    logging: LoggingConfig


def _coord(value: Any, default: Tuple[int, int]) -> Tuple[int, int]:
    if value is None:
        return default
    try:
        row, col = value
        return (int(row), int(col))
    except (TypeError, ValueError):
        raise InvalidConfiguration(f"expected a [row, col] pair, got {value!r}") from None


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    search_data = data.get("search", {}) or {}
    max_exp = search_data.get("max_expansions")
    search = SearchConfig(
        straight_cost=int(search_data.get("straight_cost", 10)),
        diagonal_cost=int(search_data.get("diagonal_cost", 14)),
        heuristic=str(search_data.get("heuristic", "octile")),
        allow_corner_cutting=bool(search_data.get("allow_corner_cutting", True)),
        max_expansions=int(max_exp) if max_exp is not None else None,
    )
    search.validate()

    scenario_data = data.get("scenario", {}) or {}
    blocked_raw = scenario_data.get("blocked")
    scenario = ScenarioConfig(
        width=int(scenario_data.get("width", 3)),
        height=int(scenario_data.get("height", 3)),
        start=_coord(scenario_data.get("start"), (2, 0)),
        goal=_coord(scenario_data.get("goal"), (0, 2)),
        blocked=(
            [_coord(b, (0, 0)) for b in blocked_raw]
            if blocked_raw is not None
            else [(1, 1)]
        ),
    )

    logging_data = data.get("logging", {}) or {}
    log_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels=dict(logging_data.get("module_levels") or {}),
    )

    return Config(search=search, scenario=scenario, logging=log_cfg)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    path = Path(path)
    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "HEURISTICS",
    "LoggingConfig",
    "ScenarioConfig",
    "SearchConfig",
    "load_config",
]
