"""Neighbor generation for maze carving and path search."""

from typing import AbstractSet, List, Tuple

from .grid import Grid
from .types import CellState, Position

# Carving order: left, right, down (ver - 1), up (ver + 1)
CARVING_DIRECTIONS: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

# Search order: up (ver + 1), down (ver - 1), left, right
SEARCH_DIRECTIONS: Tuple[Tuple[int, int], ...] = ((0, 1), (0, -1), (-1, 0), (1, 0))


def is_inside_interior(pos: Position, width: int, height: int) -> bool:
    """Check if pos lies off the outer border of a width x height grid."""
    return 1 <= pos.hor <= width - 2 and 1 <= pos.ver <= height - 2


def is_self_adjacent(candidate: Position, current: Position,
                     visited: AbstractSet[Position]) -> bool:
    """
    Check whether stepping to candidate would touch the walk's own history.

    A candidate is self-adjacent when one of its four neighbors, other than
    the cell the walker is moving from, has already been visited. The
    candidate itself may be in the history.
    """
    for dh, dv in CARVING_DIRECTIONS:
        adjacent = candidate.neighbor(dh, dv)
        if adjacent == current:
            continue
        if adjacent in visited:
            return True
    return False


def get_carving_candidates(grid: Grid, current: Position,
                           visited: AbstractSet[Position]) -> List[Position]:
    """Interior neighbors of current that keep the carved walk one cell thick."""
    candidates = []
    for dh, dv in CARVING_DIRECTIONS:
        candidate = current.neighbor(dh, dv)
        if not is_inside_interior(candidate, grid.width, grid.height):
            continue
        if is_self_adjacent(candidate, current, visited):
            continue
        candidates.append(candidate)
    return candidates


def get_search_candidates(grid: Grid, current: Position,
                          blacklist: AbstractSet[Position]) -> List[Position]:
    """Empty, non-blacklisted neighbors of current, in search order."""
    candidates = []
    for dh, dv in SEARCH_DIRECTIONS:
        candidate = current.neighbor(dh, dv)
        if not grid.is_valid_position(candidate):
            continue
        if grid.get_cell(candidate) != CellState.EMPTY:
            continue
        if candidate in blacklist:
            continue
        candidates.append(candidate)
    return candidates


def are_adjacent(a: Position, b: Position) -> bool:
    """Whether a and b differ by exactly one step along one axis."""
    return abs(a.hor - b.hor) + abs(a.ver - b.ver) == 1
