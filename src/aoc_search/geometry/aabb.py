# geometry/aabb.py
from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

_RANGES = re.compile(
    r"^\s*x=(-?\d+)\.\.(-?\d+),\s*y=(-?\d+)\.\.(-?\d+),\s*z=(-?\d+)\.\.(-?\d+)\s*$"
)


@dataclass(frozen=True)
class Aabb:
    """Axis-aligned box of integer points; every bound is inclusive."""

    min_x: int
    max_x: int
    min_y: int
    max_y: int
    min_z: int
    max_z: int

    @classmethod
    def parse_ranges(cls, s: str) -> Aabb:
        """Parse 'x=a..b,y=c..d,z=e..f'."""
        m = _RANGES.match(s)
        if m is None:
            raise ValueError(f"not a box: {s!r}")
        return cls(*(int(g) for g in m.groups()))

    @property
    def is_empty(self) -> bool:
        return self.max_x < self.min_x or self.max_y < self.min_y or self.max_z < self.min_z

    @property
    def size(self) -> int:
        if self.is_empty:
            return 0
        return (
            (self.max_x - self.min_x + 1)
            * (self.max_y - self.min_y + 1)
            * (self.max_z - self.min_z + 1)
        )

    def intersects(self, other: Aabb) -> bool:
        return not self.intersection(other).is_empty

    def intersection(self, other: Aabb) -> Aabb:
        return Aabb(
            max(self.min_x, other.min_x),
            min(self.max_x, other.max_x),
            max(self.min_y, other.min_y),
            min(self.max_y, other.max_y),
            max(self.min_z, other.min_z),
            min(self.max_z, other.max_z),
        )

    def difference(self, other: Aabb) -> AabbSet:
        """
        Points of self not in other, as at most six disjoint fragments:
        slabs below/above other on x, then on y within the x overlap, then on z
        within the x and y overlap.
        """
        if self.is_empty:
            return AabbSet()
        if not self.intersects(other):
            return AabbSet._disjoint([self])
        core = self.intersection(other)
        pieces = [
            Aabb(self.min_x, other.min_x - 1, self.min_y, self.max_y, self.min_z, self.max_z),
            Aabb(other.max_x + 1, self.max_x, self.min_y, self.max_y, self.min_z, self.max_z),
            Aabb(core.min_x, core.max_x, self.min_y, other.min_y - 1, self.min_z, self.max_z),
            Aabb(core.min_x, core.max_x, other.max_y + 1, self.max_y, self.min_z, self.max_z),
            Aabb(core.min_x, core.max_x, core.min_y, core.max_y, self.min_z, other.min_z - 1),
            Aabb(core.min_x, core.max_x, core.min_y, core.max_y, other.max_z + 1, self.max_z),
        ]
        return AabbSet._disjoint(p for p in pieces if not p.is_empty)


class AabbSet:
    """A union of points stored as pairwise-disjoint boxes."""

    def __init__(self):
        self._pieces: list[Aabb] = []

    @classmethod
    def _disjoint(cls, pieces: Iterable[Aabb]) -> AabbSet:
        out = cls()
        out._pieces = list(pieces)
        return out

    @classmethod
    def from_boxes(cls, boxes: Iterable[Aabb]) -> AabbSet:
        out = cls()
        for b in boxes:
            out.insert(b)
        return out

    @property
    def size(self) -> int:
        return sum(p.size for p in self._pieces)

    def __iter__(self) -> Iterator[Aabb]:
        return iter(list(self._pieces))

    def __len__(self) -> int:
        return len(self._pieces)

    def __bool__(self) -> bool:
        return bool(self._pieces)

    def __repr__(self) -> str:
        return f"AabbSet({self._pieces!r})"

    def insert(self, box: Aabb) -> None:
        """Add the points of box; only the parts not already covered are stored."""
        fresh = [box] if not box.is_empty else []
        for piece in self._pieces:
            if not fresh:
                return
            fresh = [frag for f in fresh for frag in f.difference(piece)]
        self._pieces.extend(fresh)

    def remove(self, box: Aabb) -> None:
        self._pieces = [frag for p in self._pieces for frag in p.difference(box)]
