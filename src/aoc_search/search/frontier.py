# search/frontier.py

import heapq
from typing import Generic, NamedTuple, TypeVar

from aoc_search.search.distance import Distance

T = TypeVar("T")


class FrontierEntry(NamedTuple, Generic[T]):
    priority: Distance  # f = g + h
    seq: int
    cost: Distance  # g at insertion time
    state: T


class Frontier(Generic[T]):
    """
    Min-priority queue keyed by f = g + h.

    Equal priorities pop in insertion order (seq), so states never get compared.
    Re-inserting a state leaves the older entry in place; the driver drops it
    at pop time if its cost is no longer the best known (lazy deletion).
    """

    def __init__(self):
        self._q: list[FrontierEntry[T]] = []
        self._seq = 0

    def __len__(self) -> int:
        return len(self._q)

    def __bool__(self) -> bool:
        return bool(self._q)

    def insert(self, state: T, priority: Distance, cost: Distance) -> None:
        self._seq += 1
        heapq.heappush(self._q, FrontierEntry(priority, self._seq, cost, state))

    def pop_min(self) -> FrontierEntry[T] | None:
        if not self._q:
            return None
        return heapq.heappop(self._q)

    def peek(self) -> FrontierEntry[T] | None:
        return self._q[0] if self._q else None
