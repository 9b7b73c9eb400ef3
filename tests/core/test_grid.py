import pytest

from grid_astar.config import SearchConfig
from grid_astar.core.cell import INFINITY, Cell
from grid_astar.core.errors import InvalidConfiguration
from grid_astar.core.grid import DIAGONAL_COST, V_H_COST, Grid, octile


def test_cell_defaults_and_reset():
    cell = Cell(1, 2, heuristic_cost=7)
    assert cell.coord == (1, 2)
    assert cell.total_cost == INFINITY
    assert cell.parent is None
    assert str(cell) == "(1,2)"

    cell.total_cost = 10
    cell.parent = (0, 2)
    cell.visited = True
    cell.solution = True
    cell.reset()
    assert (cell.total_cost, cell.parent, cell.visited, cell.solution) == (
        INFINITY,
        None,
        False,
        False,
    )
    assert cell.heuristic_cost == 7


def test_default_costs():
    assert V_H_COST == 10
    assert DIAGONAL_COST == 14
    assert octile(3, 1) == 34
    assert octile(2, 2) == 28


def test_octile_heuristic_grid():
    grid = Grid(3, 3, (0, 2))
    assert grid.snapshot("heuristic_cost") == [
        [20, 10, 0],
        [24, 14, 10],
        [28, 24, 20],
    ]


def test_unscaled_manhattan_matches_original_values():
    grid = Grid(3, 3, (0, 2), config=SearchConfig(heuristic="manhattan"))
    assert grid.snapshot("heuristic_cost") == [[2, 1, 0], [3, 2, 1], [4, 3, 2]]


def test_scaled_manhattan():
    grid = Grid(2, 2, (0, 0), config=SearchConfig(heuristic="manhattan_scaled"))
    assert grid.snapshot("heuristic_cost") == [[0, 10], [10, 20]]


def test_width_counts_rows_and_height_counts_columns():
    grid = Grid(2, 5, (1, 4))
    assert len(grid.cells) == 2
    assert all(len(row) == 5 for row in grid.cells)
    assert grid.in_bounds((1, 4))
    assert not grid.in_bounds((4, 1))


def test_blocked_cells_stay_in_grid():
    grid = Grid(3, 3, (0, 0), [(1, 1), (1, 1)])
    assert grid.is_blocked((1, 1))
    assert grid.counts() == {"cells": 9, "blocked": 1}
    assert len(list(grid)) == 9


@pytest.mark.parametrize("width,height", [(0, 3), (3, 0), (-1, 2), (True, 3), (2.5, 3)])
def test_bad_dimensions(width, height):
    with pytest.raises(InvalidConfiguration):
        Grid(width, height, (0, 0))


@pytest.mark.parametrize("coord", [(3, 0), (0, 3), (-1, 0), (0,), "ab", None])
def test_out_of_bounds_coordinates_rejected(coord):
    grid = Grid(3, 3, (0, 0))
    with pytest.raises(InvalidConfiguration):
        grid.block(coord)


def test_neighbours_of_corner_and_centre():
    grid = Grid(3, 3, (0, 0))
    corner = {(c.coord, cost) for c, cost in grid.neighbours((0, 0))}
    assert corner == {((0, 1), 10), ((1, 0), 10), ((1, 1), 14)}
    assert len(list(grid.neighbours((1, 1)))) == 8


def test_neighbours_skip_blocked_cells():
    grid = Grid(3, 3, (0, 0), [(0, 1), (1, 0)])
    assert [(c.coord, cost) for c, cost in grid.neighbours((0, 0))] == [((1, 1), 14)]


def test_corner_cutting_can_be_disabled():
    cfg = SearchConfig(allow_corner_cutting=False)
    grid = Grid(3, 3, (0, 0), [(0, 1)], config=cfg)
    coords = {c.coord for c, _ in grid.neighbours((0, 0))}
    assert coords == {(1, 0)}


def test_invalid_search_config():
    with pytest.raises(InvalidConfiguration):
        Grid(3, 3, (0, 0), config=SearchConfig(heuristic="euclid"))
    with pytest.raises(InvalidConfiguration):
        Grid(3, 3, (0, 0), config=SearchConfig(diagonal_cost=25))
    with pytest.raises(InvalidConfiguration):
        Grid(3, 3, (0, 0), config=SearchConfig(straight_cost=0))
