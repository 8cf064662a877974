"""Core type definitions for maze generation and path search."""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING, Optional, Tuple, Literal, FrozenSet, List

if TYPE_CHECKING:
    from .grid import Grid


class CellState(IntEnum):
    """State of a single grid cell."""
    FILLED = 0
    EMPTY = 1
    PATH = 2


# How the path search picks a branch at a crossroad
CrossroadPolicy = Literal["first", "random"]


@dataclass(frozen=True)
class Position:
    """A cell coordinate: hor is the column, ver is the row."""
    hor: int
    ver: int

    def neighbor(self, dh: int, dv: int) -> "Position":
        """Return the position offset by (dh, dv)."""
        return Position(self.hor + dh, self.ver + dv)


@dataclass(frozen=True)
class GlyphSet:
    """Characters used to render each cell state."""
    filled: str = "⿳"
    empty: str = "ㆍ"
    path: str = "❌"

    def for_state(self, state: CellState) -> str:
        if state == CellState.FILLED:
            return self.filled
        if state == CellState.PATH:
            return self.path
        return self.empty


DEFAULT_GLYPHS = GlyphSet()
ASCII_GLYPHS = GlyphSet(filled="#", empty=".", path="x")


@dataclass
class MazeConfig:
    """Configuration for one generate-then-solve cycle."""
    width: int = 50
    height: int = 10
    coverage_percent: float = 55.0  # Carving stops once coverage exceeds this
    crossroad_policy: CrossroadPolicy = "first"
    max_search_steps: Optional[int] = None  # None means unbounded
    glyphs: GlyphSet = DEFAULT_GLYPHS

    def __post_init__(self):
        """Validate values that do not depend on the grid."""
        if not (0.0 < self.coverage_percent < 100.0):
            raise ValueError(
                f"Coverage percent must be between 0 and 100, got {self.coverage_percent}"
            )
        if self.crossroad_policy not in ("first", "random"):
            raise ValueError(f"Unknown crossroad policy: {self.crossroad_policy}")
        if self.max_search_steps is not None and self.max_search_steps <= 0:
            raise ValueError(
                f"Search step budget must be positive, got {self.max_search_steps}"
            )


@dataclass
class GenerationResult:
    """Result of maze generation."""
    grid: "Grid"
    carved_cells: int
    coverage: float
    main_history: Tuple[Position, ...] = ()
    passage_history: Tuple[Position, ...] = ()
    steps: int = 0

    @property
    def junction(self) -> Optional[Position]:
        """The passage position where the two walks met."""
        return self.passage_history[-1] if self.passage_history else None


@dataclass
class PathfindingResult:
    """Result of a path search."""
    path: List[Position] = field(default_factory=list)
    restarts: int = 0
    steps: int = 0
    blacklist: FrozenSet[Position] = frozenset()
    blacklist_sizes: List[int] = field(default_factory=list)
    grid: Optional["Grid"] = None
    found: bool = False

    @property
    def success(self) -> bool:
        """Whether a route to the exit was found."""
        return self.found and len(self.path) > 0


class NoPathError(RuntimeError):
    """Raised when the blacklist has cut off every route to the exit."""


class SearchBudgetExceeded(RuntimeError):
    """Raised when path search exceeds its configured step budget."""


class GenerationStalled(RuntimeError):
    """Raised when carving cannot reach the coverage threshold."""
