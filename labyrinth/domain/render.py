"""Text rendering of maze grids."""

from typing import List

from .grid import Grid
from .types import CellState, DEFAULT_GLYPHS, GlyphSet


def render_rows(grid: Grid, glyphs: GlyphSet = DEFAULT_GLYPHS) -> List[str]:
    """Render each grid row as a string, one glyph per cell."""
    lookup = {state: glyphs.for_state(state) for state in CellState}
    return ["".join(lookup[state] for state in row) for row in grid.rows()]


def render_grid(grid: Grid, glyphs: GlyphSet = DEFAULT_GLYPHS) -> str:
    """Render the grid as newline-separated rows."""
    return "\n".join(render_rows(grid, glyphs))
