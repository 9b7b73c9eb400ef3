"""Exceptions raised by the pathfinding core."""

from __future__ import annotations


class PathfindingError(Exception):
    """Base class for all grid_astar errors."""


class InvalidConfiguration(PathfindingError, ValueError):
    """Grid dimensions, coordinates or cost settings are unusable."""


class PathNotFound(PathfindingError):
    """A path was requested but the goal was never reached."""

    def __init__(self, start: tuple[int, int], goal: tuple[int, int]) -> None:
        self.start = start
        self.goal = goal
        super().__init__(f"no path from {start} to {goal}")


class SearchLimitExceeded(PathfindingError):
    """The search expanded more cells than ``max_expansions`` allows."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(f"search exceeded {limit} expansions")


__all__ = [
    "InvalidConfiguration",
    "PathNotFound",
    "PathfindingError",
    "SearchLimitExceeded",
]
