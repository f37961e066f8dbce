from __future__ import annotations

from collections.abc import Sequence

from snake_cube.core.lattice import DIRECTIONS, Direction, Position, add, in_bounds, neg


def segment_direction(a: Position, b: Position) -> tuple[Direction, int]:
    """Return (unit direction, length) of the straight segment a -> b."""
    delta = (b[0] - a[0], b[1] - a[1], b[2] - a[2])
    nonzero = [c for c in delta if c != 0]
    if len(nonzero) != 1:
        raise AssertionError(f"segment {a} -> {b} is not axis-aligned")
    length = abs(nonzero[0])
    d = (delta[0] // length, delta[1] // length, delta[2] // length)
    if d not in DIRECTIONS:
        raise AssertionError(f"segment {a} -> {b} has no unit direction")
    return d, length


def covered_cells(path: Sequence[Position]) -> list[Position]:
    """All cells visited by the chain: the start plus every step of every segment."""
    if not path:
        return []
    cells = [tuple(path[0])]
    for a, b in zip(path, path[1:]):
        d, length = segment_direction(a, b)
        cur = tuple(a)
        for _ in range(length):
            cur = add(cur, d)  # type: ignore[arg-type]
            cells.append(cur)
    return cells  # type: ignore[return-value]


def audit_solution(
    shape: Sequence[int],
    path: Sequence[Position],
    n: int,
    *,
    start: Position | None = None,
) -> None:
    """Raise AssertionError unless ``path`` is a complete embedding of ``shape`` in an n-cube."""
    if len(path) != len(shape) + 1:
        raise AssertionError(f"path length {len(path)} != len(shape) + 1 = {len(shape) + 1}")
    if start is not None and tuple(path[0]) != tuple(start):
        raise AssertionError(f"path starts at {path[0]}, expected {start}")

    prev: Direction | None = None
    for i, (a, b) in enumerate(zip(path, path[1:])):
        d, length = segment_direction(a, b)
        if length != shape[i]:
            raise AssertionError(f"segment {i} has length {length}, expected {shape[i]}")
        if prev is not None and (d == prev or d == neg(prev)):
            raise AssertionError(f"segments {i - 1} and {i} are collinear")
        prev = d

    cells = covered_cells(path)
    for c in cells:
        if not in_bounds(c, n):
            raise AssertionError(f"cell {c} outside [0, {n})")
    if len(set(cells)) != len(cells):
        raise AssertionError("chain overlaps itself")
    if len(cells) != n**3:
        raise AssertionError(f"chain covers {len(cells)} cells, expected {n**3}")
