# tests/geometry/test_aabb.py
import numpy as np
import pytest

from aoc_search.geometry.aabb import Aabb, AabbSet


@pytest.fixture
def cube6() -> Aabb:
    return Aabb(0, 5, 0, 5, 0, 5)


def _pairwise_disjoint(boxes) -> bool:
    boxes = list(boxes)
    return all(
        not a.intersects(b) for i, a in enumerate(boxes) for b in boxes[i + 1 :]
    )


def test_size_and_empty():
    assert Aabb(0, 0, 0, 0, 0, 0).size == 1
    assert Aabb(1, 0, 0, 5, 0, 5).is_empty
    assert Aabb(1, 0, 0, 5, 0, 5).size == 0


def test_parse_ranges():
    assert Aabb.parse_ranges("x=-20..26,y=-36..17,z=-47..7") == Aabb(-20, 26, -36, 17, -47, 7)
    with pytest.raises(ValueError):
        Aabb.parse_ranges("x=1..2,y=3..4")


def test_intersects_touching_edges_counts():
    a = Aabb(0, 5, 0, 5, 0, 5)
    assert a.intersects(Aabb(5, 9, 5, 9, 5, 9))
    assert not a.intersects(Aabb(6, 9, 0, 5, 0, 5))


def test_except_inner(cube6):
    diff = cube6.difference(Aabb(1, 4, 1, 4, 1, 4))
    assert diff.size == 152
    assert len(diff) == 6
    assert _pairwise_disjoint(diff)


def test_except_inner_max_x_equal(cube6):
    diff = cube6.difference(Aabb(1, 5, 1, 4, 1, 4))
    assert diff.size == 136
    assert len(diff) == 5


def _inner_with(axis: int, lo: int, hi: int) -> Aabb:
    bounds = [1, 4] * 3
    bounds[2 * axis : 2 * axis + 2] = [lo, hi]
    return Aabb(*bounds)


@pytest.mark.parametrize("axis", [0, 1, 2], ids=["x", "y", "z"])
@pytest.mark.parametrize(
    "lo, hi, expected",
    [
        (1, 5, 136),  # max equal
        (1, 6, 136),  # max greater
        (0, 4, 136),  # min equal
        (-1, 4, 136),  # min less
        (-1, 6, 120),  # outer on this axis
    ],
)
def test_except_face_cases(cube6, axis, lo, hi, expected):
    diff = cube6.difference(_inner_with(axis, lo, hi))
    assert diff.size == expected
    assert _pairwise_disjoint(diff)


def test_except_disjoint_returns_self(cube6):
    other = Aabb(10, 12, 10, 12, 10, 12)
    assert list(cube6.difference(other)) == [cube6]


def test_except_covering_box_is_empty(cube6):
    diff = cube6.difference(Aabb(-1, 6, -1, 6, -1, 6))
    assert diff.size == 0
    assert not diff


def test_set_insert_counts_overlap_once():
    s = AabbSet()
    s.insert(Aabb(-20, 26, -36, 17, -47, 7))
    assert s.size == 139_590
    # new volume: { x: 27..=33 } slab, { y: 18..=23 } slab, { z: 8..=28 } slab
    s.insert(Aabb(-20, 33, -21, 23, -26, 28))
    assert s.size == 139_590 + 17_325 + 15_510 + 38_493
    assert _pairwise_disjoint(s)


def test_set_insert_contained_box_is_noop(cube6):
    s = AabbSet.from_boxes([cube6])
    s.insert(Aabb(1, 2, 1, 2, 1, 2))
    assert s.size == 216
    assert len(s) == 1


def test_set_remove(cube6):
    s = AabbSet.from_boxes([cube6, Aabb(10, 11, 10, 11, 10, 11)])
    s.remove(Aabb(1, 4, 1, 4, 1, 4))
    assert s.size == 152 + 8
    s.remove(Aabb(-100, 100, -100, 100, -100, 100))
    assert s.size == 0
    assert len(s) == 0


def test_set_matches_point_count():
    boxes = [
        Aabb(0, 3, 0, 3, 0, 3),
        Aabb(2, 5, 2, 5, 2, 5),
        Aabb(-1, 1, 2, 6, 0, 0),
    ]
    s = AabbSet.from_boxes(boxes)
    s.remove(Aabb(1, 2, 1, 2, 1, 2))
    points = set()
    for b in boxes:
        for x in range(b.min_x, b.max_x + 1):
            for y in range(b.min_y, b.max_y + 1):
                for z in range(b.min_z, b.max_z + 1):
                    points.add((x, y, z))
    points -= {(x, y, z) for x in (1, 2) for y in (1, 2) for z in (1, 2)}
    assert s.size == len(points)
    assert _pairwise_disjoint(s)


def _points(box: Aabb) -> set:
    return {
        (x, y, z)
        for x in range(box.min_x, box.max_x + 1)
        for y in range(box.min_y, box.max_y + 1)
        for z in range(box.min_z, box.max_z + 1)
    }


def _random_box(rng: np.random.Generator) -> Aabb:
    bounds = []
    for _ in range(3):
        lo, hi = sorted(int(v) for v in rng.integers(-3, 4, size=2))
        bounds += [lo, hi]
    return Aabb(*bounds)


@pytest.mark.parametrize("seed", range(10))
def test_difference_matches_point_sets(seed):
    rng = np.random.default_rng(seed)
    for _ in range(50):
        a, b = _random_box(rng), _random_box(rng)
        diff = a.difference(b)
        assert _pairwise_disjoint(diff)
        covered = set().union(*(_points(f) for f in diff))
        assert covered == _points(a) - _points(b)
        assert diff.size == len(covered)
