# search/state.py
from collections.abc import Callable, Sequence
from typing import Protocol, TypeVar, runtime_checkable

from aoc_search.search.distance import Distance


@runtime_checkable
class SearchState(Protocol):
    """
    Responsibilities:
      • Immutable value describing one configuration of the problem.
      • Equal states hash equal (used as keys of the best-cost table).
      • neighbors() returns every (step_cost, next_state) one transition away.
        Finite, unordered, deterministic. A dead end returns [].
    """

    def neighbors(self) -> Sequence[tuple[Distance, "SearchState"]]: ...


S = TypeVar("S", bound=SearchState)

Heuristic = Callable[[S], Distance]
GoalTest = Callable[[S], bool]


def neighbors_of(state: SearchState) -> list[tuple[Distance, SearchState]]:
    fn = getattr(state, "neighbors", None)
    if fn is None:
        raise TypeError(f"{type(state).__name__} does not provide neighbors()")
    return list(fn())
