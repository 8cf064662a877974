"""Main window for the labyrinth viewer."""

from PySide6.QtWidgets import (
    QMainWindow, QVBoxLayout, QHBoxLayout, QWidget, QPushButton,
    QLabel, QCheckBox, QStatusBar,
)

from ..app.controller import LabyrinthController
from ..app.fsm import RunState
from .grid_view import MazeView


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, controller: LabyrinthController):
        super().__init__()
        self.controller = controller

        config = controller.config
        self.setWindowTitle(f"Labyrinth {config.width}x{config.height}")
        self.setMinimumSize(800, 400)

        self._create_ui()
        self.controller.on_state_enter(RunState.ERROR, self._on_error_entered)
        self.new_maze_btn.clicked.connect(self._on_new_maze)
        self.show_path_check.toggled.connect(lambda checked: self._refresh())

        self._on_new_maze()

    def _create_ui(self):
        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        main_layout = QVBoxLayout(central_widget)

        controls = QHBoxLayout()
        self.new_maze_btn = QPushButton("New Maze")
        self.show_path_check = QCheckBox("Show path")
        self.show_path_check.setChecked(True)
        self.stats_label = QLabel("")
        controls.addWidget(self.new_maze_btn)
        controls.addWidget(self.show_path_check)
        controls.addStretch(1)
        controls.addWidget(self.stats_label)
        main_layout.addLayout(controls)

        self.maze_view = MazeView()
        main_layout.addWidget(self.maze_view, 1)

        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)

    def _on_new_maze(self):
        try:
            self.controller.run()
        except (ValueError, RuntimeError) as e:
            self.status_bar.showMessage(f"Error: {e}")
            return
        self._refresh()
        self.maze_view.fit_in_view()

    def _refresh(self):
        run = self.controller.last_run
        if run is None:
            return
        if self.show_path_check.isChecked():
            self.maze_view.show_grid(run.pathfinding.grid)
        else:
            self.maze_view.show_grid(run.generation.grid)

        result = run.pathfinding
        self.stats_label.setText(
            f"Path: {len(result.path)} cells | Restarts: {result.restarts} | "
            f"Coverage: {run.generation.coverage:.1f}%"
        )
        self.status_bar.showMessage(self.controller.state_description)

    def _on_error_entered(self, context):
        self.status_bar.showMessage("Maze generation failed")
