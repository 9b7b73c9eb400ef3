"""Rectangular grid of :class:`Cell` records and its cost model."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from ..config import SearchConfig
from .cell import Cell, Coord
from .errors import InvalidConfiguration


# Step costs of the original cost model.
V_H_COST = 10
DIAGONAL_COST = 14

# Offsets in expansion order: top row, left, right, bottom row.
_NEIGHBOUR_OFFSETS = (
    (-1, 0),
    (-1, -1),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, 0),
    (1, -1),
    (1, 1),
)

Heuristic = Callable[[int, int], int]


def octile(dr: int, dc: int, straight: int = V_H_COST, diagonal: int = DIAGONAL_COST) -> int:
    """Exact cost of crossing an empty 8-connected grid by ``dr`` x ``dc``."""

    return straight * max(dr, dc) + (diagonal - straight) * min(dr, dc)


def manhattan(dr: int, dc: int) -> int:
    return dr + dc


def _heuristic_for(config: SearchConfig) -> Heuristic:
    straight, diagonal = config.straight_cost, config.diagonal_cost
    if config.heuristic == "octile":
        return lambda dr, dc: octile(dr, dc, straight, diagonal)
    if config.heuristic == "manhattan_scaled":
        return lambda dr, dc: straight * manhattan(dr, dc)
    if config.heuristic == "manhattan":
        return manhattan
    raise InvalidConfiguration(f"unknown heuristic {config.heuristic!r}")


class Grid:
    """Fixed ``width`` x ``height`` collection of cells indexed ``[row][col]``.

    ``width`` is the number of rows and ``height`` the number of columns.
    Blocked squares stay in the grid as cells flagged ``blocked``.
    """

    def __init__(
        self,
        width: int,
        height: int,
        goal: Coord,
        blocked: Iterable[Coord] = (),
        config: Optional[SearchConfig] = None,
    ) -> None:
        if not _positive_int(width) or not _positive_int(height):
            raise InvalidConfiguration(
                f"grid dimensions must be positive integers, got {width}x{height}"
            )
        self.width = width
        self.height = height
        self.config = config or SearchConfig()
        self.config.validate()

        goal = self.check_coord(goal, "goal")
        heuristic = _heuristic_for(self.config)
        self.cells: List[List[Cell]] = [
            [
                Cell(r, c, heuristic_cost=heuristic(abs(r - goal[0]), abs(c - goal[1])))
                for c in range(height)
            ]
            for r in range(width)
        ]
        for coord in blocked:
            self.block(coord)

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------
    def in_bounds(self, coord: Coord) -> bool:
        row, col = coord
        return 0 <= row < self.width and 0 <= col < self.height

    def check_coord(self, coord: Coord, label: str) -> Coord:
        """Return ``coord`` as an int tuple or raise if it is off the grid."""

        try:
            row, col = coord
        except (TypeError, ValueError):
            raise InvalidConfiguration(f"{label} must be a (row, col) pair, got {coord!r}") from None
        if not (_int(row) and _int(col)) or not self.in_bounds((row, col)):
            raise InvalidConfiguration(
                f"{label} {coord!r} is outside the {self.width}x{self.height} grid"
            )
        return (row, col)

    def __getitem__(self, coord: Coord) -> Cell:
        row, col = coord
        return self.cells[row][col]

    def __iter__(self) -> Iterator[Cell]:
        for row in self.cells:
            yield from row

    def block(self, coord: Coord) -> None:
        """Mark ``coord`` impassable."""

        row, col = self.check_coord(coord, "blocked cell")
        self.cells[row][col].blocked = True

    def is_blocked(self, coord: Coord) -> bool:
        return self[coord].blocked

    def reset(self) -> None:
        for cell in self:
            cell.reset()

    # ------------------------------------------------------------------
    # Neighbourhood
    # ------------------------------------------------------------------
    def neighbours(self, coord: Coord) -> Iterator[Tuple[Cell, int]]:
        """Yield ``(cell, step_cost)`` for passable cells around ``coord``.

        Diagonal moves may squeeze between two blocked orthogonal cells
        unless ``allow_corner_cutting`` is turned off.
        """

        row, col = coord
        for dr, dc in _NEIGHBOUR_OFFSETS:
            nxt = (row + dr, col + dc)
            if not self.in_bounds(nxt):
                continue
            cell = self.cells[nxt[0]][nxt[1]]
            if cell.blocked:
                continue
            if dr and dc:
                if not self.config.allow_corner_cutting and (
                    self.cells[row + dr][col].blocked or self.cells[row][col + dc].blocked
                ):
                    continue
                yield cell, self.config.diagonal_cost
            else:
                yield cell, self.config.straight_cost

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------
    def snapshot(self, attr: str) -> List[list]:
        return [[getattr(cell, attr) for cell in row] for row in self.cells]

    def counts(self) -> Dict[str, int]:
        blocked = sum(1 for cell in self if cell.blocked)
        return {"cells": self.width * self.height, "blocked": blocked}


def _int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _positive_int(value: object) -> bool:
    return _int(value) and value > 0  # type: ignore[operator]


__all__ = ["DIAGONAL_COST", "Grid", "V_H_COST", "manhattan", "octile"]
