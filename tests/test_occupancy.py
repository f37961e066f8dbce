from __future__ import annotations

from snake_cube.core.occupancy import OccupancyMap


def test_has_set_overwrite():
    occ = OccupancyMap()
    p = (1, 2, 0)
    assert not occ.has(p)
    occ.set(p, True)
    assert occ.has(p)
    occ.set(p, False)
    assert not occ.has(p)
    assert len(occ) == 1
    assert occ.occupied_count() == 0


def test_construct_from_entries():
    occ = OccupancyMap([((0, 0, 0), True), ((1, 0, 0), False)])
    assert occ.has((0, 0, 0))
    assert not occ.has((1, 0, 0))
    assert sorted(occ.entries()) == [((0, 0, 0), True), ((1, 0, 0), False)]


def test_copy_is_independent_both_ways():
    base = OccupancyMap()
    base.set((0, 0, 0), True)

    left = base.copy()
    right = base.copy()
    left.set((1, 0, 0), True)
    right.set((0, 1, 0), True)
    base.set((0, 0, 1), True)

    assert left.has((1, 0, 0)) and not right.has((1, 0, 0)) and not base.has((1, 0, 0))
    assert right.has((0, 1, 0)) and not left.has((0, 1, 0)) and not base.has((0, 1, 0))
    assert not left.has((0, 0, 1)) and not right.has((0, 0, 1))
    assert left.cells is not base.cells


def test_copy_equal_contents():
    occ = OccupancyMap([((x, 0, 0), True) for x in range(3)])
    clone = occ.copy()
    assert clone == occ
    assert clone.occupied_count() == 3
