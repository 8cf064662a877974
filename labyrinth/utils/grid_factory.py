"""Grid factory for creating pre-carved maze grids."""

import numbers
from typing import Dict, Tuple

from ..domain.grid import Grid
from ..domain.types import CellState, Position

# Smallest dimension that leaves room for both openings and an interior
MIN_DIMENSION = 5

# Named sizes: (width, height)
PRESETS: Dict[str, Tuple[int, int]] = {
    "compact": (50, 10),
    "wide": (135, 18),
}


def validate_dimensions(width: int, height: int) -> None:
    """
    Reject grid dimensions that cannot hold the two openings and an interior.

    Raises:
        ValueError: If width or height is not an integer or is below MIN_DIMENSION
    """
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise ValueError(f"Grid {name} must be an integer, got {value!r}")
    if width < MIN_DIMENSION or height < MIN_DIMENSION:
        raise ValueError(
            f"Grid dimensions must be at least {MIN_DIMENSION}x{MIN_DIMENSION}, "
            f"got {width}x{height}"
        )


def interior_cell_count(width: int, height: int) -> int:
    """Cell count used as the denominator of the coverage percentage."""
    return width * height - 2 * (width + height)


def opening_positions(width: int, height: int) -> Tuple[Position, ...]:
    """The four cells pre-carved before any walk begins."""
    return (
        Position(0, 1),
        Position(1, 1),
        Position(width - 1, height - 2),
        Position(width - 2, height - 2),
    )


def create_maze_grid(width: int, height: int) -> Grid:
    """
    Create a grid with every cell filled except the entry and exit openings.

    Args:
        width: Grid width (at least MIN_DIMENSION)
        height: Grid height (at least MIN_DIMENSION)

    Returns:
        New Grid instance

    Raises:
        ValueError: If the dimensions are too small
    """
    validate_dimensions(width, height)

    width, height = int(width), int(height)
    grid = Grid(width, height)
    for pos in opening_positions(width, height):
        grid.set_cell(pos, CellState.EMPTY)
    return grid


def get_preset(name: str) -> Tuple[int, int]:
    """Look up a named grid size."""
    try:
        return PRESETS[name]
    except KeyError:
        raise ValueError(
            f"Unknown preset: {name} (expected one of {', '.join(sorted(PRESETS))})"
        ) from None
