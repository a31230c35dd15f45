# tests/search/test_frontier.py
from aoc_search.search.frontier import Frontier


class Unorderable:
    """States never get compared, even on equal priorities."""

    def __lt__(self, other):
        raise AssertionError("states must not be compared")


def test_pops_in_non_decreasing_priority():
    f = Frontier()
    for i, j in zip(reversed(range(5)), range(5, 10)):
        f.insert(f"s{i}", i, i)
        f.insert(f"s{j}", j, j)
    assert len(f) == 10
    got = []
    while (e := f.pop_min()) is not None:
        got.append(e.priority)
    assert got == list(range(10))
    assert f.pop_min() is None
    assert not f


def test_equal_priorities_pop_fifo_without_comparing_states():
    f = Frontier()
    a, b, c = Unorderable(), Unorderable(), Unorderable()
    f.insert(a, 3, 1)
    f.insert(b, 3, 2)
    f.insert(c, 1, 0)
    assert f.pop_min().state is c
    assert f.pop_min().state is a
    assert f.pop_min().state is b


def test_duplicates_are_kept_for_lazy_deletion():
    f = Frontier()
    f.insert("x", 10, 10)
    f.insert("x", 4, 4)
    assert len(f) == 2
    first = f.pop_min()
    assert (first.state, first.cost) == ("x", 4)
    second = f.pop_min()
    assert (second.state, second.cost) == ("x", 10)


def test_peek_does_not_remove():
    f = Frontier()
    assert f.peek() is None
    f.insert("a", 2, 0)
    f.insert("b", 1, 0)
    assert f.peek().state == "b"
    assert len(f) == 2
