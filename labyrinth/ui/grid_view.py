"""Graphics view showing a maze grid."""

from typing import Dict, Optional, Tuple

from PySide6.QtWidgets import QGraphicsView, QGraphicsScene
from PySide6.QtGui import QPainter
from PySide6.QtCore import Qt

from ..domain.grid import Grid
from .tiles import CellTile


class MazeView(QGraphicsView):
    """Graphics view for displaying a maze and its path overlay."""

    def __init__(self, tile_size: float = 14.0):
        super().__init__()
        self.scene = QGraphicsScene()
        self.setScene(self.scene)

        self.tiles: Dict[Tuple[int, int], CellTile] = {}
        self.tile_size = tile_size
        self._grid: Optional[Grid] = None

        self.setRenderHint(QPainter.Antialiasing)

    def show_grid(self, grid: Grid):
        """Draw grid, reusing tiles when the dimensions are unchanged."""
        if (self._grid is None or self._grid.width != grid.width
                or self._grid.height != grid.height):
            self._rebuild(grid)
        else:
            for y, row in enumerate(grid.rows()):
                for x, state in enumerate(row):
                    self.tiles[(x, y)].set_state(state)
        self._grid = grid

    def _rebuild(self, grid: Grid):
        self.scene.clear()
        self.tiles.clear()
        self.scene.setSceneRect(0, 0, grid.width * self.tile_size,
                                grid.height * self.tile_size)
        for y, row in enumerate(grid.rows()):
            for x, state in enumerate(row):
                tile = CellTile(x, y, self.tile_size, state)
                self.scene.addItem(tile)
                self.tiles[(x, y)] = tile

    def wheelEvent(self, event):
        """Handle mouse wheel for zooming."""
        zoom_factor = 1.15
        if event.angleDelta().y() > 0:
            self.scale(zoom_factor, zoom_factor)
        else:
            self.scale(1 / zoom_factor, 1 / zoom_factor)

    def fit_in_view(self):
        """Fit the entire grid in the view."""
        if self.scene.items():
            self.fitInView(self.scene.itemsBoundingRect(), Qt.KeepAspectRatio)
