"""Application controller running one generate-then-solve cycle."""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from ..domain.generator import MazeGenerator
from ..domain.pathfinder import PathFinder
from ..domain.render import render_grid
from ..domain.types import (
    GenerationResult, GenerationStalled, MazeConfig, NoPathError, PathfindingResult,
)
from ..utils.rng import SeededRNG, ensure_rng
from .fsm import RunState, RunStateMachine

logger = logging.getLogger(__name__)


@dataclass
class LabyrinthRun:
    """A finished maze together with the path found through it."""
    generation: GenerationResult
    pathfinding: PathfindingResult
    attempts: int = 1


class LabyrinthController:
    """
    Controller that generates a maze, hands a copy to the path search and
    keeps track of the run phase.

    A maze whose every route gets blacklisted, or whose carving stalls, is
    thrown away and regenerated with the same random source, up to
    ``max_attempts`` times.
    """

    def __init__(self, config: Optional[MazeConfig] = None,
                 rng: Optional[SeededRNG] = None, max_attempts: int = 5):
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")
        self._config = config if config is not None else MazeConfig()
        self._rng = ensure_rng(rng)
        self._max_attempts = max_attempts
        self._state_machine = RunStateMachine()
        self._last_run: Optional[LabyrinthRun] = None

    @property
    def config(self) -> MazeConfig:
        return self._config

    @property
    def current_state(self) -> RunState:
        return self._state_machine.current_state

    @property
    def state_description(self) -> str:
        return self._state_machine.get_state_description()

    @property
    def last_run(self) -> Optional[LabyrinthRun]:
        return self._last_run

    def on_state_enter(self, state: RunState, callback: Callable[[Optional[dict]], None]):
        """Register a callback fired when the run enters state."""
        self._state_machine.on_state_enter(state, callback)

    def reset(self):
        self._state_machine.reset()
        self._last_run = None

    def run(self) -> LabyrinthRun:
        """
        Generate a maze and find a path through it.

        Raises:
            ValueError: If the configured dimensions are invalid
            GenerationStalled, NoPathError: If every attempt failed
            SearchBudgetExceeded: If the search step budget runs out
        """
        if self._state_machine.is_finished():
            self._state_machine.reset()
        self._state_machine.transition_to(RunState.GENERATING)

        last_error: Optional[RuntimeError] = None
        for attempt in range(1, self._max_attempts + 1):
            try:
                generation = MazeGenerator.from_config(self._config, self._rng).generate()
            except GenerationStalled as e:
                logger.warning("Attempt %d: %s; regenerating", attempt, e)
                last_error = e
                continue
            except ValueError:
                self._state_machine.transition_to(RunState.ERROR)
                raise

            self._state_machine.transition_to(RunState.SOLVING, {"attempt": attempt})
            try:
                result = PathFinder.from_config(generation.grid, self._config, self._rng).find_path()
            except NoPathError as e:
                logger.warning("Attempt %d: %s; regenerating", attempt, e)
                last_error = e
                self._state_machine.transition_to(RunState.GENERATING)
                continue
            except RuntimeError:
                self._state_machine.transition_to(RunState.ERROR)
                raise

            self._last_run = LabyrinthRun(generation, result, attempt)
            self._state_machine.transition_to(RunState.COMPLETE, {"run": self._last_run})
            return self._last_run

        self._state_machine.transition_to(RunState.ERROR)
        raise last_error

    def render_maze(self) -> str:
        """Render the last generated maze."""
        return render_grid(self._require_run().generation.grid, self._config.glyphs)

    def render_path(self) -> str:
        """Render the last maze with the path overlay."""
        return render_grid(self._require_run().pathfinding.grid, self._config.glyphs)

    def _require_run(self) -> LabyrinthRun:
        if self._last_run is None:
            raise RuntimeError("No completed run to render")
        return self._last_run
