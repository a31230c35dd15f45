# puzzles/amphipod.py
"""
Amphipod burrow (2021 day 23).

Four rooms hang below an 11-cell hallway; room r opens onto hallway column
ENTRANCES[r]. Each room slot tuple is ordered front (next to the hallway) to
back. A move is one amphipod walking from where it stands to where it stops:
  • hallway -> its home room, only if that room holds no foreign kind
  • room -> a hallway cell that is not an entrance
  • room -> its home room directly
Nothing may walk through another amphipod.
"""
from __future__ import annotations

import re
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from aoc_search.puzzles.errors import NoPathError, PuzzleInputError
from aoc_search.search.astar import AStar
from aoc_search.search.hooks import SearchHooks
from aoc_search.search.state import Heuristic

ENTRANCES = (2, 4, 6, 8)
HALLWAY_LEN = 11
UNFOLD_ROWS = ("DCBA", "DBAC")

_HALL_LINE = re.compile(r"^#([.A-D]{11})#$")
_ROOM_LINE = re.compile(r"^\s*#{1,3}([.A-D])#([.A-D])#([.A-D])#([.A-D])#{1,3}$")


class Amphipod(Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"

    @property
    def home(self) -> int:
        return "ABCD".index(self.value)

    @property
    def energy(self) -> int:
        return 10**self.home


Slot = Amphipod | None


def _slot(ch: str) -> Slot:
    return None if ch == "." else Amphipod(ch)


def _char(s: Slot) -> str:
    return "." if s is None else s.value


@dataclass(frozen=True)
class Burrow:
    rooms: tuple[tuple[Slot, ...], ...]
    hallway: tuple[Slot, ...] = (None,) * HALLWAY_LEN

    # ------------------ construction ------------------------

    @classmethod
    def from_rows(cls, rows: Sequence[str], hallway: str = "." * HALLWAY_LEN) -> Burrow:
        """rows run front to back, one character per room."""
        return cls(
            rooms=tuple(tuple(_slot(row[r]) for row in rows) for r in range(len(ENTRANCES))),
            hallway=tuple(_slot(c) for c in hallway),
        )

    @classmethod
    def parse(cls, text: str) -> Burrow:
        lines = [ln.rstrip() for ln in text.splitlines() if ln.strip()]
        if len(lines) < 4:
            raise PuzzleInputError(f"burrow needs at least 4 lines, got {len(lines)}")
        if lines[0].strip() != "#" * (HALLWAY_LEN + 2) or lines[-1].strip() != "#########":
            raise PuzzleInputError("burrow is not walled in")
        hall = _HALL_LINE.match(lines[1].strip())
        if hall is None:
            raise PuzzleInputError(f"bad hallway line {lines[1]!r}")
        rows = []
        for ln in lines[2:-1]:
            m = _ROOM_LINE.match(ln)
            if m is None:
                raise PuzzleInputError(f"bad room line {ln!r}")
            rows.append("".join(m.groups()))
        burrow = cls.from_rows(rows, hall.group(1))

        counts = Counter(s for s in burrow._occupants() if s is not None)
        for kind in Amphipod:
            if counts[kind] != burrow.depth:
                raise PuzzleInputError(
                    f"expected {burrow.depth} amphipods of kind {kind.value}, got {counts[kind]}"
                )
        for e in ENTRANCES:
            if burrow.hallway[e] is not None:
                raise PuzzleInputError(f"amphipod standing on entrance column {e}")
        for r, room in enumerate(burrow.rooms):
            front = burrow._front(r)
            if front is not None and None in room[front:]:
                raise PuzzleInputError(f"room {r} has an empty slot behind an amphipod")
        return burrow

    def unfold(self) -> Burrow:
        """Insert the two folded rows between the front and back of each room."""
        if self.depth != 2:
            raise PuzzleInputError(f"only a 2-deep burrow unfolds, this one is {self.depth} deep")
        rooms = tuple(
            (room[0], _slot(UNFOLD_ROWS[0][r]), _slot(UNFOLD_ROWS[1][r]), room[1])
            for r, room in enumerate(self.rooms)
        )
        return Burrow(rooms=rooms, hallway=self.hallway)

    # ------------------ queries ------------------------

    @property
    def depth(self) -> int:
        return len(self.rooms[0])

    def _occupants(self):
        yield from self.hallway
        for room in self.rooms:
            yield from room

    def is_sorted(self) -> bool:
        return all(s is None for s in self.hallway) and all(
            s is not None and s.home == r for r, room in enumerate(self.rooms) for s in room
        )

    def settled_count(self, r: int) -> int:
        """Amphipods at the back of room r that already belong there."""
        n = 0
        for s in reversed(self.rooms[r]):
            if s is None or s.home != r:
                break
            n += 1
        return n

    def _only_natives(self, r: int) -> bool:
        return all(s is None or s.home == r for s in self.rooms[r])

    def _front(self, r: int) -> int | None:
        for i, s in enumerate(self.rooms[r]):
            if s is not None:
                return i
        return None

    def _deepest_free(self, r: int) -> int:
        room = self.rooms[r]
        return max(i for i, s in enumerate(room) if s is None)

    def _hall_clear(self, lo: int, hi: int) -> bool:
        if lo > hi:
            lo, hi = hi, lo
        return all(self.hallway[x] is None for x in range(lo, hi + 1))

    def _stops_from(self, e: int):
        for step in (-1, 1):
            x = e + step
            while 0 <= x < HALLWAY_LEN and self.hallway[x] is None:
                if x not in ENTRANCES:
                    yield x
                x += step

    # ------------------ transitions ------------------------

    def _with(self, *, hall: dict[int, Slot] | None = None, slots=None) -> Burrow:
        hallway = list(self.hallway)
        for i, v in (hall or {}).items():
            hallway[i] = v
        rooms = [list(room) for room in self.rooms]
        for (r, i), v in (slots or {}).items():
            rooms[r][i] = v
        return Burrow(rooms=tuple(tuple(room) for room in rooms), hallway=tuple(hallway))

    def neighbors(self) -> list[tuple[int, Burrow]]:
        out: list[tuple[int, Burrow]] = []

        # hallway -> home room
        for i, a in enumerate(self.hallway):
            if a is None or not self._only_natives(a.home):
                continue
            e = ENTRANCES[a.home]
            if not self._hall_clear(i + (1 if e > i else -1), e):
                continue
            slot = self._deepest_free(a.home)
            steps = abs(i - e) + slot + 1
            out.append(
                (steps * a.energy, self._with(hall={i: None}, slots={(a.home, slot): a}))
            )

        # room -> home room, room -> hallway
        for r in range(len(self.rooms)):
            if self._only_natives(r):
                continue
            top = self._front(r)
            a = self.rooms[r][top]
            e = ENTRANCES[r]
            h = a.home
            if h != r and self._only_natives(h) and self._hall_clear(e, ENTRANCES[h]):
                slot = self._deepest_free(h)
                steps = top + 1 + abs(e - ENTRANCES[h]) + slot + 1
                out.append(
                    (steps * a.energy, self._with(slots={(r, top): None, (h, slot): a}))
                )
            for x in self._stops_from(e):
                steps = top + 1 + abs(x - e)
                out.append((steps * a.energy, self._with(hall={x: a}, slots={(r, top): None})))
        return out

    def __str__(self) -> str:
        lines = [
            "#" * (HALLWAY_LEN + 2),
            "#" + "".join(_char(s) for s in self.hallway) + "#",
        ]
        for i in range(self.depth):
            cells = "#".join(_char(room[i]) for room in self.rooms)
            lines.append(f"###{cells}###" if i == 0 else f"  #{cells}#")
        lines.append("  #########")
        return "\n".join(lines)


def amphipod_heuristic(b: Burrow) -> int:
    """
    Lower bound on the remaining energy: each unsettled amphipod walks at
    least to its room entrance and one step in, and the k amphipods still due
    in a room fill its k front slots, adding 0 + 1 + ... + (k-1) steps.
    """
    total = 0
    for i, a in enumerate(b.hallway):
        if a is not None:
            total += (abs(i - ENTRANCES[a.home]) + 1) * a.energy
    for r, room in enumerate(b.rooms):
        settled_from = b.depth - b.settled_count(r)
        for s, a in enumerate(room[:settled_from]):
            if a is None:
                continue
            if a.home == r:
                # blocks a foreign amphipod: out, one step aside, back, in
                steps = s + 1 + 2 + 1
            else:
                steps = s + 1 + abs(ENTRANCES[r] - ENTRANCES[a.home]) + 1
            total += steps * a.energy
    for kind in Amphipod:
        due = b.depth - b.settled_count(kind.home)
        total += due * (due - 1) // 2 * kind.energy
    return total


def solve(
    text: str,
    part: int = 1,
    *,
    heuristic: Heuristic | None = None,
    hooks: SearchHooks | None = None,
) -> int:
    """Least energy to sort the burrow; part 2 unfolds it first."""
    burrow = Burrow.parse(text)
    if part == 2:
        burrow = burrow.unfold()
    elif part != 1:
        raise ValueError(f"part must be 1 or 2, got {part}")
    result = AStar(heuristic or amphipod_heuristic, Burrow.is_sorted, hooks=hooks).search(burrow)
    if not result.found:
        raise NoPathError("couldn't find a path to the sorted burrow")
    return result.cost
