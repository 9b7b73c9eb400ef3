"""Cell record stored in the search grid."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple


Coord = Tuple[int, int]

# Cost of a cell the search has not reached.
INFINITY = math.inf


@dataclass
class Cell:
    """One grid square.

    ``parent`` holds the coordinate of the predecessor on the best known path,
    not the predecessor itself, so cells never reference each other.
    """

    row: int
    col: int
    heuristic_cost: int = 0
    total_cost: float = INFINITY
    parent: Optional[Coord] = None
    blocked: bool = False
    visited: bool = False
    solution: bool = False

    @property
    def coord(self) -> Coord:
        return (self.row, self.col)

    def reset(self) -> None:
        """Forget everything a previous search wrote into this cell."""

        self.total_cost = INFINITY
        self.parent = None
        self.visited = False
        self.solution = False

    def __str__(self) -> str:
        return f"({self.row},{self.col})"


__all__ = ["Cell", "Coord", "INFINITY"]
