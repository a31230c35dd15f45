# search/astar.py

import time
from collections.abc import Hashable
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

from aoc_search.search.distance import ZERO, Distance
from aoc_search.search.frontier import Frontier
from aoc_search.search.hooks import NoopHooks, SearchHooks
from aoc_search.search.state import GoalTest, Heuristic, neighbors_of

S = TypeVar("S", bound=Hashable)


class Outcome(Enum):
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass
class SearchResult(Generic[S]):
    outcome: Outcome
    cost: Distance | None = None
    goal: S | None = None
    path: list[S] = field(default_factory=list)  # start .. goal, empty on failure
    expanded: int = 0
    stale: int = 0
    discovered: int = 0

    @property
    def found(self) -> bool:
        return self.outcome is Outcome.SUCCEEDED


class AStar(Generic[S]):
    """
    A* over an implicit state graph.

    `heuristic` must never overestimate the remaining cost; an inadmissible
    one yields a too-high answer and is not detected here. Edge costs must be
    non-negative.

    Without `is_goal`, a state is a goal when its heuristic value equals `zero`.

    Every `search` call owns its frontier, table and result, so one instance
    can serve several threads at once.
    """

    def __init__(
        self,
        heuristic: Heuristic,
        is_goal: GoalTest | None = None,
        *,
        hooks: SearchHooks | None = None,
        zero: Distance = ZERO,
    ):
        self.heuristic = heuristic
        self.zero = zero
        self.is_goal = is_goal or (lambda s: self.heuristic(s) == self.zero)
        self._hooks = hooks or NoopHooks()

    def search(self, start: S) -> SearchResult[S]:
        t0 = time.perf_counter()

        best: dict[S, Distance] = {start: self.zero}
        parent: dict[S, S | None] = {start: None}
        frontier: Frontier[S] = Frontier()
        h0 = self.heuristic(start)
        frontier.insert(start, self.zero + h0, self.zero)
        self._hooks.run_start(start=start, h0=h0, qsize=len(frontier))

        result: SearchResult[S] = SearchResult(Outcome.RUNNING)
        expanded = stale = 0
        while result.outcome is Outcome.RUNNING:
            entry = frontier.pop_min()
            if entry is None:
                result.outcome = Outcome.FAILED
                continue
            current, g = entry.state, entry.cost
            if best[current] < g:
                stale += 1
                self._hooks.stale(current, cost=g, best=best[current])
                continue
            if self.is_goal(current):
                result.outcome = Outcome.SUCCEEDED
                result.cost, result.goal = g, current
                result.path = self._reconstruct(parent, current)
                continue

            expanded += 1
            self._hooks.expand(
                current, g=g, f=entry.priority, qsize=len(frontier), expanded=expanded
            )
            for step, nxt in neighbors_of(current):
                g2 = g + step
                old = best.get(nxt)
                if old is None or g2 < old:
                    best[nxt] = g2
                    parent[nxt] = current
                    frontier.insert(nxt, g2 + self.heuristic(nxt), g2)
                    self._hooks.relax(nxt, old=old, new=g2, qsize=len(frontier))

        result.expanded, result.stale, result.discovered = expanded, stale, len(best)
        self._hooks.run_end(
            outcome=result.outcome.value,
            cost=result.cost,
            expanded=expanded,
            stale=stale,
            discovered=len(best),
            wall_ms=(time.perf_counter() - t0) * 1000,
        )
        return result

    @staticmethod
    def _reconstruct(parent: dict[S, S | None], goal: S) -> list[S]:
        path = []
        cur: S | None = goal
        while cur is not None:
            path.append(cur)
            cur = parent[cur]
        path.reverse()
        return path


def shortest_distance(
    start: S,
    heuristic: Heuristic,
    is_goal: GoalTest | None = None,
    *,
    hooks: SearchHooks | None = None,
) -> Distance | None:
    """Minimal total cost from `start` to a goal, or None if no goal is reachable."""
    return AStar(heuristic, is_goal, hooks=hooks).search(start).cost
