"""Shared fixtures for labyrinth tests."""

import pytest

from labyrinth.domain.grid import Grid
from labyrinth.domain.types import CellState, Position


def _grid_from_rows(rows):
    """Build a grid from strings where '#' is filled and '.' is empty."""
    height = len(rows)
    width = len(rows[0])
    grid = Grid(width, height)
    for ver, row in enumerate(rows):
        assert len(row) == width
        for hor, char in enumerate(row):
            if char == ".":
                grid.set_cell(Position(hor, ver), CellState.EMPTY)
    return grid


@pytest.fixture
def make_grid():
    return _grid_from_rows


@pytest.fixture
def corridor_grid():
    return _grid_from_rows([
        "#####",
        "....#",
        "###.#",
        "###..",
        "#####",
    ])


@pytest.fixture
def branching_grid():
    # Searching down from (1, 1) first hits the dead end at (1, 2)
    return _grid_from_rows([
        "#######",
        ".....##",
        "#.##.##",
        "####...",
        "#######",
    ])
