"""Fixed-size cell buffer for the maze."""

from typing import Iterator, List, Optional

import numpy as np

from .types import CellState, Position


class Grid:
    """
    Rectangular buffer of cell states.

    Cells are stored in a numpy array indexed ``[row, column]`` while the
    public API speaks in ``Position(hor, ver)`` terms. Two openings are part
    of every grid: the entry at the left edge of row 1 and the exit at the
    right edge of row ``height - 2``.
    """

    def __init__(self, width: int, height: int, cells: Optional[np.ndarray] = None):
        if cells is None:
            cells = np.full((height, width), CellState.FILLED, dtype=np.int8)
        elif cells.shape != (height, width):
            raise ValueError(
                f"Cell buffer shape {cells.shape} does not match {width}x{height}"
            )
        self._width = width
        self._height = height
        self._cells = cells

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def entry(self) -> Position:
        """The outer cell of the entry opening."""
        return Position(0, 1)

    @property
    def exit(self) -> Position:
        """The outer cell of the exit opening."""
        return Position(self._width - 1, self._height - 2)

    def is_valid_position(self, pos: Position) -> bool:
        """Check if position is within grid bounds."""
        return 0 <= pos.hor < self._width and 0 <= pos.ver < self._height

    def get_cell(self, pos: Position) -> CellState:
        """Read the state at pos. Out-of-range positions raise IndexError."""
        if not self.is_valid_position(pos):
            raise IndexError(f"Position {pos} is outside a {self._width}x{self._height} grid")
        return CellState(int(self._cells[pos.ver, pos.hor]))

    def set_cell(self, pos: Position, state: CellState):
        """Write the state at pos. Out-of-range positions raise IndexError."""
        if not self.is_valid_position(pos):
            raise IndexError(f"Position {pos} is outside a {self._width}x{self._height} grid")
        self._cells[pos.ver, pos.hor] = state

    def count(self, state: CellState) -> int:
        """Number of cells currently in the given state."""
        return int(np.count_nonzero(self._cells == state))

    def rows(self) -> Iterator[List[CellState]]:
        """Iterate over rows from top to bottom."""
        for row in self._cells:
            yield [CellState(int(value)) for value in row]

    def copy(self) -> "Grid":
        """Return an independent deep copy."""
        return Grid(self._width, self._height, self._cells.copy())

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (self._width == other._width and self._height == other._height
                and bool(np.array_equal(self._cells, other._cells)))

    def __repr__(self) -> str:
        return f"Grid(width={self._width}, height={self._height})"
