# tests/conftest.py
import pytest

from grid_astar.search.astar import GridPathfinder


@pytest.fixture
def small_scenario():
    """3x3 grid with the centre blocked, routed from bottom-left to top-right."""
    return GridPathfinder(3, 3, (2, 0), (0, 2), [(1, 1)])
