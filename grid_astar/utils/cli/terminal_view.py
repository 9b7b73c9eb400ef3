"""ASCII renderer for pathfinder grids."""

from __future__ import annotations

import sys
from typing import Any, Callable, List, Optional, Sequence, TextIO

from ...core.cell import INFINITY
from ...search.astar import GridPathfinder, SearchResult


# Basic ANSI colour codes used when ``colour`` is enabled
_COLOURS = {
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "cyan": "\x1b[36m",
    "reset": "\x1b[0m",
}

_GLYPH_COLOURS = {
    "SC": "cyan",
    "EC": "cyan",
    "BC": "red",
    "X": "green",
}

LEGEND = "0: Open Cell BC: Blocked Cell EC: End Cell SC: Start Cell"


class TerminalView:
    """Formats the pathfinder's result grids as fixed-width text."""

    def __init__(self, colour: bool = False, out: Optional[TextIO] = None) -> None:
        self.colour = colour
        self.out = out

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def render_layout(self, pf: GridPathfinder) -> str:
        glyphs = {"start": "SC", "goal": "EC", "blocked": "BC", "open": "0"}
        rows = [[glyphs[kind] for kind in row] for row in pf.layout_grid()]
        return self._block("grid: ", rows, footer=LEGEND + "\n")

    def render_heuristics(self, pf: GridPathfinder) -> str:
        return self._block("heuristicCosts:", _map(pf.heuristic_grid(), str))

    def render_closed(self, pf: GridPathfinder) -> str:
        return self._block(
            "closedCells:", _map(pf.visited_grid(), lambda v: "T" if v else "F")
        )

    def render_scores(self, pf: GridPathfinder) -> str:
        return self._block("scores:", _map(pf.cost_grid(), _score))

    def render_path(self, pf: GridPathfinder, result: Optional[SearchResult] = None) -> str:
        """Render the solution path and the grid marked with it.

        ``result`` defaults to the pathfinder's last search.
        """

        result = result if result is not None else pf.last_result
        if result is None or not result.found:
            (si, sj), (ei, ej) = pf.start, pf.goal
            return f"path from ({si},{sj}) to ({ei},{ej}) NOT found :o(\n"

        path = pf.reconstruct_path()
        header = "path: " + " -> ".join(str(cell) for cell in path) + "\n\ngrid:"
        rows: List[List[str]] = []
        for layout_row, cell_row in zip(pf.layout_grid(), pf.grid.cells):
            row: List[str] = []
            for kind, cell in zip(layout_row, cell_row):
                if kind == "start":
                    row.append("SC")
                elif kind == "goal":
                    row.append("EC")
                elif kind == "blocked":
                    row.append("BC")
                else:
                    row.append("X" if cell.solution else "0")
            rows.append(row)
        return self._block(header, rows)

    def show(self, text: str) -> None:
        out = self.out or sys.stdout
        out.write(text)
        out.flush()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _cell(self, glyph: str) -> str:
        text = f"{glyph:<3} "
        colour = _GLYPH_COLOURS.get(glyph)
        if self.colour and colour:
            return f"{_COLOURS[colour]}{text}{_COLOURS['reset']}"
        return text

    def _block(self, header: str, rows: Sequence[Sequence[str]], footer: str = "") -> str:
        lines = [header]
        for row in rows:
            lines.append("".join(self._cell(glyph) for glyph in row))
        return "\n".join(lines) + "\n" + footer + "\n"


# ----------------------------------------------------------------------
# Helper functions
# ----------------------------------------------------------------------


def _map(grid: Sequence[Sequence[Any]], fn: Callable[[Any], str]) -> List[List[str]]:
    return [[fn(value) for value in row] for row in grid]


def _score(value: Optional[float]) -> str:
    if value is None:
        return "BC"
    if value == INFINITY:
        return "-"
    return str(int(value))


_view = TerminalView()


def get_view() -> TerminalView:
    """Return the shared :class:`TerminalView` instance."""

    return _view


__all__ = ["LEGEND", "TerminalView", "get_view"]
