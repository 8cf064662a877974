"""Seeded random number generator for reproducible mazes."""

import random
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


class SeededRNG:
    """
    Seeded random number generator for reproducible results.

    Each instance owns its own ``random.Random`` so that the maze generator
    and the path search never share hidden process-wide state.
    """

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)
        self._seed = seed

    @property
    def seed(self) -> Optional[int]:
        """Get the current seed."""
        return self._seed

    def choice(self, seq: Sequence[T]) -> T:
        """Choose a random element from a non-empty sequence."""
        return self._rng.choice(seq)

    def __repr__(self) -> str:
        return f"SeededRNG(seed={self._seed!r})"


def ensure_rng(rng: Optional[SeededRNG]) -> SeededRNG:
    """Return rng, or a fresh unseeded generator when rng is None."""
    return rng if rng is not None else SeededRNG()
