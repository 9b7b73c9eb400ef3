"""Implementations of the interactive driver commands."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List

from ...core.errors import PathfindingError
from ...search.astar import GridPathfinder
from .terminal_view import get_view

logger = logging.getLogger(__name__)


HELP_TEXT = (
    "Commands: /grid /heuristics /search /closed /scores /path "
    "/block <row> <col> /help /quit"
)


def grid(pf: GridPathfinder) -> None:
    view = get_view()
    view.show(view.render_layout(pf))


def heuristics(pf: GridPathfinder) -> None:
    view = get_view()
    view.show(view.render_heuristics(pf))


def search(pf: GridPathfinder, state: Dict[str, Any]) -> None:
    state["result"] = pf.search()


def closed(pf: GridPathfinder) -> None:
    view = get_view()
    view.show(view.render_closed(pf))


def scores(pf: GridPathfinder) -> None:
    view = get_view()
    view.show(view.render_scores(pf))


def path(pf: GridPathfinder, state: Dict[str, Any]) -> None:
    view = get_view()
    view.show(view.render_path(pf, state.get("result")))


def block(pf: GridPathfinder, args: List[str], state: Dict[str, Any]) -> None:
    if len(args) != 2:
        logger.info("Usage: /block <row> <col>")
        return
    try:
        coord = (int(args[0]), int(args[1]))
    except ValueError:
        logger.info("Usage: /block <row> <col>")
        return
    pf.add_block(coord)
    state.pop("result", None)
    logger.info("Blocked cell %s; run /search again.", coord)


def help_command() -> None:
    logger.info(HELP_TEXT)


def quit_command(state: Dict[str, Any]) -> None:
    state["running"] = False


def execute(command: str, args: List[str], pf: GridPathfinder, state: Dict[str, Any]) -> None:
    """Dispatch ``command`` against ``pf``. Errors are logged, not raised."""

    handlers: Dict[str, Callable[[], None]] = {
        "grid": lambda: grid(pf),
        "heuristics": lambda: heuristics(pf),
        "search": lambda: search(pf, state),
        "closed": lambda: closed(pf),
        "scores": lambda: scores(pf),
        "path": lambda: path(pf, state),
        "block": lambda: block(pf, args, state),
        "help": help_command,
        "quit": lambda: quit_command(state),
    }
    handler = handlers.get(command)
    if handler is None:
        logger.info("Unknown command: /%s. %s", command, HELP_TEXT)
        return
    try:
        handler()
    except PathfindingError as exc:
        logger.error("/%s failed: %s", command, exc)


__all__ = [
    "HELP_TEXT",
    "block",
    "closed",
    "execute",
    "grid",
    "heuristics",
    "path",
    "scores",
    "search",
]
