"""Finite State Machine for the generate-then-solve cycle."""

import logging
from enum import Enum
from typing import Callable, Dict, List, Optional, Set

logger = logging.getLogger(__name__)


class RunState(Enum):
    """Phases of one labyrinth run."""
    IDLE = "idle"
    GENERATING = "generating"
    SOLVING = "solving"
    COMPLETE = "complete"
    ERROR = "error"


class RunStateMachine:
    """
    Finite State Machine for labyrinth run phases.

    State Transitions:
    IDLE -> GENERATING (when a run starts)
    GENERATING -> SOLVING (when the maze is finished)
    GENERATING -> ERROR (when carving stalls)
    SOLVING -> GENERATING (when the maze has no path and is regenerated)
    SOLVING -> COMPLETE (when the exit is reached)
    SOLVING -> ERROR (when the search fails)
    COMPLETE -> IDLE, ERROR -> IDLE (on reset)
    """

    def __init__(self):
        self._current_state = RunState.IDLE
        self._listeners: Dict[RunState, List[Callable[[Optional[dict]], None]]] = {}
        self._valid_transitions = self._build_transition_map()

    def _build_transition_map(self) -> Dict[RunState, Set[RunState]]:
        return {
            RunState.IDLE: {RunState.GENERATING},
            RunState.GENERATING: {RunState.SOLVING, RunState.ERROR},
            RunState.SOLVING: {RunState.GENERATING, RunState.COMPLETE, RunState.ERROR},
            RunState.COMPLETE: {RunState.IDLE},
            RunState.ERROR: {RunState.IDLE},
        }

    @property
    def current_state(self) -> RunState:
        return self._current_state

    def can_transition_to(self, target_state: RunState) -> bool:
        return target_state in self._valid_transitions[self._current_state]

    def transition_to(self, target_state: RunState, context: Optional[dict] = None) -> bool:
        """
        Move to target_state and notify its listeners.

        Returns False, leaving the state unchanged, when the move is not in
        the transition map.
        """
        if not self.can_transition_to(target_state):
            logger.debug("Refused transition %s -> %s",
                         self._current_state.value, target_state.value)
            return False

        logger.debug("Run phase %s -> %s", self._current_state.value, target_state.value)
        self._current_state = target_state
        for listener in self._listeners.get(target_state, []):
            listener(context)
        return True

    def on_state_enter(self, state: RunState, callback: Callable[[Optional[dict]], None]):
        """Add a listener called with the transition context on entering state."""
        self._listeners.setdefault(state, []).append(callback)

    def reset(self):
        """Return to IDLE without notifying listeners."""
        self._current_state = RunState.IDLE

    def is_finished(self) -> bool:
        """Check if the run has finished (complete or error)."""
        return self._current_state in (RunState.COMPLETE, RunState.ERROR)

    def get_state_description(self) -> str:
        """Get a human-readable description of the current state."""
        descriptions = {
            RunState.IDLE: "Ready to start",
            RunState.GENERATING: "Carving maze",
            RunState.SOLVING: "Searching for a path",
            RunState.COMPLETE: "Path found",
            RunState.ERROR: "Error occurred",
        }
        return descriptions.get(self._current_state, "Unknown state")
