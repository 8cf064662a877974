"""Tests for the backtracking path search."""

import pytest

from labyrinth.domain.generator import MazeGenerator
from labyrinth.domain.neighbors import are_adjacent
from labyrinth.domain.pathfinder import PathFinder, SearchState
from labyrinth.domain.types import (
    CellState, MazeConfig, NoPathError, Position, SearchBudgetExceeded,
)
from labyrinth.utils.rng import SeededRNG

BRANCHING_PATH = [
    Position(0, 1), Position(1, 1), Position(2, 1), Position(3, 1), Position(4, 1),
    Position(4, 2), Position(4, 3), Position(5, 3), Position(6, 3),
]


class TestCorridor:
    def test_follows_single_route(self, corridor_grid):
        result = PathFinder(corridor_grid).find_path()
        assert result.success
        assert result.path == [
            Position(0, 1), Position(1, 1), Position(2, 1), Position(3, 1),
            Position(3, 2), Position(3, 3), Position(4, 3),
        ]
        assert result.restarts == 0
        assert result.blacklist == frozenset()
        assert result.steps == 6

    def test_marks_path_on_private_copy(self, corridor_grid):
        result = PathFinder(corridor_grid).find_path()
        assert corridor_grid.count(CellState.PATH) == 0
        assert result.grid.count(CellState.PATH) == len(result.path)
        assert result.grid.count(CellState.EMPTY) == 0


class TestBacktracking:
    def test_first_policy_backtracks_once(self, branching_grid):
        result = PathFinder(branching_grid, policy="first").find_path()
        assert result.path == BRANCHING_PATH
        assert result.restarts == 1
        assert result.blacklist == frozenset({Position(1, 2)})
        assert result.blacklist_sizes == [1]
        # Two moves into the dead end, then the full route
        assert result.steps == 2 + len(BRANCHING_PATH) - 1

    def test_dead_end_cells_are_not_marked(self, branching_grid):
        result = PathFinder(branching_grid).find_path()
        assert result.grid.get_cell(Position(1, 2)) == CellState.EMPTY

    def test_step_by_step_states(self, branching_grid):
        finder = PathFinder(branching_grid)
        assert finder.state == SearchState.SEARCHING

        assert finder.step() == SearchState.SEARCHING   # onto (1, 1)
        assert finder.step() == SearchState.SEARCHING   # crossroad, onto (1, 2)
        assert finder.walker.crossroads == [[Position(1, 2), Position(2, 1)]]
        assert finder.step() == SearchState.BACKTRACKING
        assert finder.step() == SearchState.SEARCHING

        assert finder.restarts == 1
        assert finder.walker.position == Position(0, 1)
        assert finder.walker.moves == []
        assert finder.get_grid().get_cell(Position(1, 1)) == CellState.EMPTY
        assert finder.get_grid().get_cell(Position(0, 1)) == CellState.PATH

    @pytest.mark.parametrize("seed", range(6))
    def test_random_policy_finds_same_route(self, branching_grid, seed):
        result = PathFinder(branching_grid, policy="random", rng=SeededRNG(seed)).find_path()
        assert result.path == BRANCHING_PATH
        assert result.restarts in (0, 1)
        assert result.blacklist <= {Position(1, 2)}

    def test_done_is_terminal(self, corridor_grid):
        finder = PathFinder(corridor_grid)
        finder.find_path()
        assert finder.state == SearchState.DONE
        assert finder.step() == SearchState.DONE


class TestFailures:
    def test_dead_end_without_crossroad(self, make_grid):
        grid = make_grid([
            "#####",
            "...##",
            "#####",
            "####.",
            "#####",
        ])
        with pytest.raises(NoPathError):
            PathFinder(grid).find_path()

    def test_every_branch_blacklisted(self, make_grid):
        grid = make_grid([
            "#######",
            "...####",
            "#.#####",
            "######.",
            "#######",
        ])
        finder = PathFinder(grid)
        with pytest.raises(NoPathError):
            finder.find_path()
        assert finder.restarts == 1
        assert finder.blacklist == frozenset({Position(1, 2)})

    def test_step_budget(self, branching_grid):
        with pytest.raises(SearchBudgetExceeded):
            PathFinder(branching_grid, max_steps=5).find_path()

    def test_budget_large_enough(self, branching_grid):
        assert PathFinder(branching_grid, max_steps=10).find_path().success

    def test_rejects_unknown_policy(self, corridor_grid):
        with pytest.raises(ValueError, match="policy"):
            PathFinder(corridor_grid, policy="shortest")

    def test_rejects_non_positive_budget(self, corridor_grid):
        with pytest.raises(ValueError, match="budget"):
            PathFinder(corridor_grid, max_steps=0)


def test_input_grid_is_not_mutated(branching_grid):
    before = branching_grid.copy()
    PathFinder(branching_grid).find_path()
    assert branching_grid == before


def test_from_config(branching_grid):
    config = MazeConfig(width=7, height=5, crossroad_policy="random", max_search_steps=100)
    result = PathFinder.from_config(branching_grid, config, SeededRNG(1)).find_path()
    assert result.path[-1] == Position(6, 3)


@pytest.mark.parametrize("policy", ["first", "random"])
@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_generated_maze_route(policy, seed):
    rng = SeededRNG(seed)
    maze = MazeGenerator(30, 10, rng=rng).generate().grid
    finder = PathFinder(maze, policy=policy, rng=rng)
    try:
        result = finder.find_path()
    except NoPathError:
        pytest.skip("maze loop cut off every route")

    assert result.path[0] == maze.entry
    assert result.path[-1] == maze.exit
    assert len(set(result.path)) == len(result.path)
    for a, b in zip(result.path, result.path[1:]):
        assert are_adjacent(a, b)
    for pos in result.path:
        assert maze.get_cell(pos) == CellState.EMPTY
    assert result.blacklist_sizes == list(range(1, result.restarts + 1))
    assert not result.blacklist & set(result.path)
