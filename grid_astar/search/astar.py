"""A* search over an 8-connected grid with blocked cells."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from heapq import heappop, heappush
from typing import Iterable, List, Optional, Tuple

from ..config import SearchConfig
from ..core.cell import INFINITY, Cell, Coord
from ..core.errors import InvalidConfiguration, PathNotFound, SearchLimitExceeded
from ..core.grid import Grid

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    """Outcome of :meth:`GridPathfinder.search`.

    ``goal_cell`` is only set when the goal was reached; ``start`` and
    ``goal`` are always available for reporting a missing path.
    """

    found: bool
    start: Coord
    goal: Coord
    goal_cell: Optional[Cell] = None
    expansions: int = 0

    @property
    def cost(self) -> float:
        return self.goal_cell.total_cost if self.goal_cell is not None else INFINITY

    def __bool__(self) -> bool:
        return self.found


class GridPathfinder:
    """Find a minimum-cost route between two cells of a :class:`Grid`.

    The frontier is a heap of ``(priority, row, col)`` entries. Improved cells
    are pushed again rather than updated in place; outdated entries are
    dropped when popped because their cell is already visited. Equal
    priorities therefore come out in ascending ``(row, col)`` order.
    """

    def __init__(
        self,
        width: int,
        height: int,
        start: Coord,
        goal: Coord,
        blocked: Iterable[Coord] = (),
        config: Optional[SearchConfig] = None,
    ) -> None:
        blocked = list(blocked)
        self.grid = Grid(width, height, goal, blocked, config)
        self.config = self.grid.config
        self.start = self.grid.check_coord(start, "start")
        self.goal = self.grid.check_coord(goal, "goal")
        for label, coord in (("start", self.start), ("goal", self.goal)):
            if self.grid.is_blocked(coord):
                raise InvalidConfiguration(f"{label} {coord} is a blocked cell")

        self.grid[self.start].total_cost = 0
        self._frontier: List[Tuple[float, int, int]] = []
        self.last_result: Optional[SearchResult] = None
        logger.debug(
            "Grid %sx%s, start %s, goal %s, %d blocked, heuristic %s",
            width,
            height,
            self.start,
            self.goal,
            self.grid.counts()["blocked"],
            self.config.heuristic,
        )

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------
    def add_block(self, coord: Coord) -> None:
        """Block ``coord`` before the next search."""

        coord = self.grid.check_coord(coord, "blocked cell")
        if coord in (self.start, self.goal):
            raise InvalidConfiguration(f"cannot block start or goal cell {coord}")
        self.grid.block(coord)
        self.grid.reset()
        self.grid[self.start].total_cost = 0
        self.last_result = None

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------
    def _relax(self, current: Cell, neighbour: Cell, step_cost: int) -> None:
        candidate = current.total_cost + step_cost
        if candidate >= neighbour.total_cost:
            return
        neighbour.total_cost = candidate
        neighbour.parent = current.coord
        heappush(
            self._frontier,
            (candidate + neighbour.heuristic_cost, neighbour.row, neighbour.col),
        )
        logger.debug("relax %s via %s: cost %s", neighbour, current, candidate)

    def search(self) -> SearchResult:
        """Run A* from start to goal and return a :class:`SearchResult`.

        Each call starts from a clean grid, so repeated calls on the same
        instance give the same answer.
        """

        self.grid.reset()
        start_cell = self.grid[self.start]
        start_cell.total_cost = 0
        self._frontier = [(start_cell.heuristic_cost, self.start[0], self.start[1])]

        limit = self.config.max_expansions
        expansions = 0
        result = SearchResult(found=False, start=self.start, goal=self.goal)

        while self._frontier:
            _, row, col = heappop(self._frontier)
            current = self.grid.cells[row][col]
            if current.visited:
                logger.debug("skip stale frontier entry %s", current)
                continue

            if limit is not None and expansions >= limit:
                logger.warning("Search stopped after %d expansions", expansions)
                raise SearchLimitExceeded(limit)

            current.visited = True
            expansions += 1
            if current.coord == self.goal:
                result = SearchResult(
                    found=True,
                    start=self.start,
                    goal=self.goal,
                    goal_cell=current,
                    expansions=expansions,
                )
                break

            for neighbour, step_cost in self.grid.neighbours(current.coord):
                if not neighbour.visited:
                    self._relax(current, neighbour, step_cost)
        else:
            result.expansions = expansions

        self._frontier = []
        self.last_result = result
        if result.found:
            logger.info(
                "Path %s -> %s found, cost %s, %d cells expanded",
                self.start,
                self.goal,
                result.cost,
                expansions,
            )
        else:
            logger.info(
                "No path %s -> %s, %d cells expanded", self.start, self.goal, expansions
            )
        return result

    # ------------------------------------------------------------------
    # Path reconstruction
    # ------------------------------------------------------------------
    def reconstruct_path(self) -> List[Cell]:
        """Return the cells from start to goal and flag them as the solution.

        Raises :class:`PathNotFound` if the goal was never reached.
        """

        goal_cell = self.grid[self.goal]
        if not goal_cell.visited:
            raise PathNotFound(self.start, self.goal)

        path: List[Cell] = []
        current: Optional[Cell] = goal_cell
        while current is not None:
            current.solution = True
            path.append(current)
            current = self.grid[current.parent] if current.parent is not None else None
        path.reverse()
        return path

    def path_coords(self) -> List[Coord]:
        return [cell.coord for cell in self.reconstruct_path()]

    # ------------------------------------------------------------------
    # Result grids
    # ------------------------------------------------------------------
    def heuristic_grid(self) -> List[List[int]]:
        return self.grid.snapshot("heuristic_cost")

    def visited_grid(self) -> List[List[bool]]:
        return self.grid.snapshot("visited")

    def cost_grid(self) -> List[List[Optional[float]]]:
        """Final ``total_cost`` per cell, ``None`` for blocked cells.

        Cells the search never reached hold :data:`INFINITY`.
        """

        return [
            [None if cell.blocked else cell.total_cost for cell in row]
            for row in self.grid.cells
        ]

    def layout_grid(self) -> List[List[str]]:
        """Cell kinds: ``start``, ``goal``, ``blocked`` or ``open``."""

        rows: List[List[str]] = []
        for row in self.grid.cells:
            kinds: List[str] = []
            for cell in row:
                if cell.coord == self.start:
                    kinds.append("start")
                elif cell.coord == self.goal:
                    kinds.append("goal")
                elif cell.blocked:
                    kinds.append("blocked")
                else:
                    kinds.append("open")
            rows.append(kinds)
        return rows


def find_path(
    width: int,
    height: int,
    start: Coord,
    goal: Coord,
    blocked: Iterable[Coord] = (),
    config: Optional[SearchConfig] = None,
) -> List[Coord]:
    """Return the path from ``start`` to ``goal`` or an empty list."""

    pathfinder = GridPathfinder(width, height, start, goal, blocked, config)
    if not pathfinder.search():
        return []
    return pathfinder.path_coords()


__all__ = ["GridPathfinder", "SearchResult", "find_path"]
