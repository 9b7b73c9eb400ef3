# grid_astar/main.py
"""Scenario bootstrap, demo run and interactive command loop."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional, TextIO

from .config import CONFIG, CONFIG_PATH, Config, load_config
from .search.astar import GridPathfinder
from .utils.cli.command_parser import read_commands
from .utils.cli.commands import HELP_TEXT, execute


log_level_str = CONFIG.logging.global_level
numeric_level = getattr(logging, log_level_str, logging.INFO)
logging.basicConfig(
    level=numeric_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    force=True
)
logger = logging.getLogger(__name__)

# Apply per-module levels if defined
if CONFIG.logging.module_levels:
    for module_name, level_str in CONFIG.logging.module_levels.items():
        module_numeric_level = getattr(logging, str(level_str).upper(), None)
        if module_numeric_level is not None:
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


def bootstrap(config_path: str | Path = CONFIG_PATH, cfg: Optional[Config] = None) -> GridPathfinder:
    """Build a :class:`GridPathfinder` for the configured scenario."""

    cfg = cfg or load_config(Path(config_path))
    scenario = cfg.scenario
    pf = GridPathfinder(
        scenario.width,
        scenario.height,
        scenario.start,
        scenario.goal,
        scenario.blocked,
        config=cfg.search,
    )
    logger.info(
        "[Bootstrap] %sx%s grid, start %s, goal %s, heuristic %s",
        scenario.width,
        scenario.height,
        scenario.start,
        scenario.goal,
        cfg.search.heuristic,
    )
    return pf


def run_demo(pf: GridPathfinder) -> Dict[str, Any]:
    """Print the grid, search it, then print closed cells, scores and path."""

    state: Dict[str, Any] = {"running": True}
    for command in ("grid", "search", "closed", "scores", "path"):
        execute(command, [], pf, state)
    return state


def repl(pf: GridPathfinder, stream: Optional[TextIO] = None) -> Dict[str, Any]:
    """Execute ``/commands`` from ``stream`` (stdin by default) until ``/quit``."""

    state: Dict[str, Any] = {"running": True}
    logger.info(HELP_TEXT)
    for cmd in read_commands(stream or sys.stdin):
        execute(cmd.name, cmd.args, pf, state)
        if not state["running"]:
            break
    return state


def main() -> None:
    pf = bootstrap()
    run_demo(pf)


def interactive() -> None:
    repl(bootstrap())


if __name__ == "__main__":
    main()
