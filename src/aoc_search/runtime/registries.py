# runtime/registries.py
from collections.abc import Callable
from typing import Any

from aoc_search.config.models import (
    AmphipodHeuristicModel,
    HeuristicUnion,
    ZeroHeuristicModel,
)
from aoc_search.puzzles import amphipod
from aoc_search.search.distance import ZERO
from aoc_search.search.hooks import SearchHooks
from aoc_search.search.state import Heuristic

HeuristicFactory = Callable[[HeuristicUnion], Heuristic]
# (text, part, deps) -> answer
PuzzleSolver = Callable[[str, int, dict[str, Any]], Any]

Answers = dict[int, Any]

_heuristic_registry: dict[str, HeuristicFactory] = {}
_puzzle_registry: dict[tuple[int, int], PuzzleSolver] = {}


class UnknownPuzzleError(KeyError):
    def __init__(self, year: int, day: int):
        super().__init__((year, day))
        self.year, self.day = year, day

    def __str__(self) -> str:
        return f"no solver registered for year {self.year} day {self.day}"


# ------------------- Heuristic registries ---------------------------


def register_heuristic(kind: str):
    def deco(fn: HeuristicFactory):
        _heuristic_registry[kind] = fn
        return fn

    return deco


def make_heuristic(cfg: HeuristicUnion) -> Heuristic:
    try:
        factory = _heuristic_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown heuristic kind {cfg.kind!r}") from None
    return factory(cfg)


@register_heuristic("zero")
def _make_zero(cfg: ZeroHeuristicModel):
    return lambda _state: ZERO


@register_heuristic("amphipod")
def _make_amphipod(cfg: AmphipodHeuristicModel):
    return amphipod.amphipod_heuristic


# ------------------- Puzzle registries ---------------------------


def register_puzzle(year: int, day: int):
    def deco(fn: PuzzleSolver):
        _puzzle_registry[(year, day)] = fn
        return fn

    return deco


def available_puzzles() -> list[tuple[int, int]]:
    return sorted(_puzzle_registry)


def solve_puzzle(
    year: int,
    day: int,
    text: str,
    parts=(1, 2),
    *,
    heuristic: Heuristic | None = None,
    hooks: SearchHooks | None = None,
) -> Answers:
    try:
        solver = _puzzle_registry[(year, day)]
    except KeyError:
        raise UnknownPuzzleError(year, day) from None
    deps = {"heuristic": heuristic, "hooks": hooks}
    return {part: solver(text, part, deps) for part in parts}


@register_puzzle(2021, 23)
def _solve_amphipod(text: str, part: int, deps: dict[str, Any]) -> int:
    return amphipod.solve(text, part, heuristic=deps.get("heuristic"), hooks=deps.get("hooks"))
