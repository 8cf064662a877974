"""Walkers that carry a position and the history of visited cells."""

from typing import Dict, List, Optional, Set, Tuple

from .types import Position


class Walker:
    """
    A position plus an insertion-ordered set of visited positions.

    The starting position is not part of the history; only cells the walker
    steps onto are recorded.
    """

    def __init__(self, start: Position):
        self.position = start
        self._visited: Dict[Position, None] = {}

    @property
    def visited(self) -> Dict[Position, None]:
        """Visited positions; a dict keeps insertion order and O(1) lookups."""
        return self._visited

    @property
    def history(self) -> Tuple[Position, ...]:
        return tuple(self._visited)

    def has_visited(self, pos: Position) -> bool:
        return pos in self._visited

    def move_to(self, pos: Position):
        """Step onto pos and record it."""
        self.position = pos
        self._visited[pos] = None

    def __len__(self) -> int:
        return len(self._visited)


class SearchWalker(Walker):
    """
    Path-search walker.

    Besides the history it keeps the ordered list of moves taken, the
    candidate lists seen at each crossroad and a blacklist that is shared
    with every walker that replaces it after a restart.
    """

    def __init__(self, start: Position, blacklist: Optional[Set[Position]] = None):
        super().__init__(start)
        self.moves: List[Position] = []
        self.crossroads: List[List[Position]] = []
        self.blacklist: Set[Position] = blacklist if blacklist is not None else set()

    def move_to(self, pos: Position):
        super().move_to(pos)
        self.moves.append(pos)

    def record_crossroad(self, candidates: List[Position]):
        self.crossroads.append(list(candidates))

    @property
    def last_crossroad(self) -> Optional[List[Position]]:
        return self.crossroads[-1] if self.crossroads else None
