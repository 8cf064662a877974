"""Grid tile graphics items for maze visualization."""

from PySide6.QtWidgets import QGraphicsRectItem
from PySide6.QtGui import QBrush, QPen, QColor
from PySide6.QtCore import Qt

from ..domain.types import CellState


class CellTile(QGraphicsRectItem):
    """Graphics item representing a single maze cell."""

    # Color scheme for different cell states
    COLORS = {
        CellState.FILLED: QColor(64, 64, 64),     # Dark gray
        CellState.EMPTY: QColor(240, 240, 240),   # Light gray
        CellState.PATH: QColor(255, 215, 0),      # Gold
    }

    def __init__(self, x: int, y: int, size: float, state: CellState):
        super().__init__(0, 0, size, size)
        self.grid_x = x
        self.grid_y = y
        self.state = state

        self.setPos(x * size, y * size)
        self.update_appearance()

    def set_state(self, state: CellState):
        self.state = state
        self.update_appearance()

    def update_appearance(self):
        """Update the tile appearance based on cell state."""
        self.setBrush(QBrush(self.COLORS.get(self.state, self.COLORS[CellState.EMPTY])))
        if self.state == CellState.FILLED:
            self.setPen(QPen(Qt.black, 1))
        else:
            self.setPen(QPen(Qt.gray, 0.5))
