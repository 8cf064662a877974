"""Tests for walker history bookkeeping."""

from labyrinth.domain.types import Position
from labyrinth.domain.walker import SearchWalker, Walker


def test_start_is_not_in_history():
    walker = Walker(Position(1, 1))
    assert walker.history == ()
    assert not walker.has_visited(Position(1, 1))


def test_history_keeps_first_insertion_order():
    walker = Walker(Position(1, 1))
    for pos in (Position(2, 1), Position(3, 1), Position(2, 1)):
        walker.move_to(pos)
    assert walker.position == Position(2, 1)
    assert walker.history == (Position(2, 1), Position(3, 1))
    assert len(walker) == 2


def test_search_walkers_share_blacklist():
    blacklist = set()
    first = SearchWalker(Position(0, 1), blacklist)
    first.blacklist.add(Position(1, 2))
    second = SearchWalker(Position(0, 1), blacklist)
    assert Position(1, 2) in second.blacklist
    assert second.moves == []
    assert second.last_crossroad is None


def test_search_walker_records_moves_and_crossroads():
    walker = SearchWalker(Position(0, 1))
    walker.move_to(Position(1, 1))
    walker.record_crossroad([Position(1, 2), Position(2, 1)])
    walker.move_to(Position(1, 2))
    assert walker.moves == [Position(1, 1), Position(1, 2)]
    assert walker.last_crossroad == [Position(1, 2), Position(2, 1)]
