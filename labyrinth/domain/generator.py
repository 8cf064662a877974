"""Random-walk maze generation."""

import logging
from typing import Optional, Set

from .grid import Grid
from .neighbors import get_carving_candidates
from .types import CellState, GenerationResult, GenerationStalled, MazeConfig, Position
from .walker import Walker
from ..utils.grid_factory import create_maze_grid, interior_cell_count
from ..utils.rng import SeededRNG, ensure_rng

logger = logging.getLogger(__name__)


class MazeGenerator:
    """
    Carves a maze with a self-avoiding random walk.

    The main walker starts next to the entry and carves until the share of
    carved cells exceeds the coverage threshold. A second walker then starts
    next to the exit and walks until it steps onto a cell the main walker
    visited, which connects the exit to the main body.
    """

    def __init__(self, width: int, height: int, coverage_percent: float = 55.0,
                 rng: Optional[SeededRNG] = None):
        if not (0.0 < coverage_percent < 100.0):
            raise ValueError(
                f"Coverage percent must be between 0 and 100, got {coverage_percent}"
            )
        self._grid = create_maze_grid(width, height)
        self._coverage_percent = coverage_percent
        self._rng = ensure_rng(rng)
        self._total_cells = interior_cell_count(self._grid.width, self._grid.height)

        self._carved = 0
        self._steps = 0
        # History cells whose every candidate is already in the walk's history
        self._exhausted: Set[Position] = set()
        self._generated = False
        self._main_walker = Walker(Position(1, 1))
        self._passage_walker = Walker(Position(self._grid.width - 2, self._grid.height - 2))

    @classmethod
    def from_config(cls, config: MazeConfig, rng: Optional[SeededRNG] = None) -> "MazeGenerator":
        return cls(config.width, config.height, config.coverage_percent, rng)

    @property
    def carved_cells(self) -> int:
        return self._carved

    @property
    def coverage(self) -> float:
        """Carved cells as a percentage of the interior."""
        return self._carved / self._total_cells * 100

    @property
    def steps(self) -> int:
        return self._steps

    @property
    def main_walker(self) -> Walker:
        return self._main_walker

    @property
    def passage_walker(self) -> Walker:
        return self._passage_walker

    def is_coverage_met(self) -> bool:
        return self.coverage > self._coverage_percent

    def generate(self) -> GenerationResult:
        """
        Run both carving phases.

        Returns:
            GenerationResult holding a copy of the finished grid

        Raises:
            RuntimeError: If the maze was already generated
            GenerationStalled: If the walk cannot reach the coverage threshold
        """
        if self._generated:
            raise RuntimeError("Maze has already been generated")

        self._carve_main_body()
        self._carve_passage()
        self._generated = True

        logger.info("Generated %dx%d maze: %d cells carved (%.1f%%) in %d steps",
                    self._grid.width, self._grid.height, self._carved,
                    self.coverage, self._steps)
        return GenerationResult(
            grid=self.get_grid(),
            carved_cells=self._carved,
            coverage=self.coverage,
            main_history=self._main_walker.history,
            passage_history=self._passage_walker.history,
            steps=self._steps,
        )

    def get_grid(self) -> Grid:
        """Return an independent copy of the grid."""
        return self._grid.copy()

    def _carve_main_body(self):
        while True:
            self._next_step(self._main_walker)
            if self.is_coverage_met():
                break
        logger.debug("Main body carved: %d cells, coverage %.1f%%",
                     self._carved, self.coverage)

    def _carve_passage(self):
        self._exhausted.clear()
        while True:
            self._next_step(self._passage_walker)
            if self._main_walker.has_visited(self._passage_walker.position):
                break
        logger.debug("Passage joined main body at %s after %d cells",
                     self._passage_walker.position, len(self._passage_walker))

    def _next_step(self, walker: Walker):
        self._steps += 1
        step = self._choose_step(walker)
        walker.move_to(step)
        if self._grid.get_cell(step) == CellState.FILLED:
            self._grid.set_cell(step, CellState.EMPTY)
            self._carved += 1

    def _choose_step(self, walker: Walker) -> Position:
        candidates = get_carving_candidates(self._grid, walker.position, walker.visited)
        if walker.has_visited(walker.position) and all(walker.has_visited(c) for c in candidates):
            self._mark_exhausted(walker)
        if candidates:
            return self._rng.choice(candidates)
        if not walker.visited:
            raise GenerationStalled(f"Walker at {walker.position} has nowhere to go")
        # Locally stuck: jump back to a random cell of the walk
        return self._rng.choice(walker.history)

    def _mark_exhausted(self, walker: Walker):
        # Candidates only shrink as the history grows, so an exhausted cell
        # stays exhausted. Once every history cell is, no new cell is reachable.
        self._exhausted.add(walker.position)
        if len(self._exhausted) == len(walker):
            raise GenerationStalled(
                f"Carving stalled after {self._steps} steps at "
                f"{self.coverage:.1f}% coverage: no cell of the walk can grow"
            )
