from __future__ import annotations

import itertools
from collections.abc import Sequence

Position = tuple[int, int, int]
Direction = tuple[int, int, int]


class InvalidConfigurationError(ValueError):
    """Shape cannot describe a chain filling an N x N x N cube with N >= 2."""


def generate_unit_directions() -> tuple[Direction, ...]:
    """Generate the 6 axis-aligned unit vectors in lexicographic order over {-1,0,1}^3."""
    dirs = [v for v in itertools.product((-1, 0, 1), repeat=3) if sum(c * c for c in v) == 1]
    if len(dirs) != 6:
        raise AssertionError(f"expected 6 unit directions, got {len(dirs)}")
    return tuple(dirs)  # type: ignore[return-value]


DIRECTIONS: tuple[Direction, ...] = generate_unit_directions()


def add(a: Position, b: Position) -> Position:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def scale(v: Direction, k: int) -> Position:
    return (v[0] * k, v[1] * k, v[2] * k)


def neg(v: Direction) -> Direction:
    return (-v[0], -v[1], -v[2])


def in_bounds(p: Position, n: int) -> bool:
    return all(0 <= c < n for c in p)


def turn_directions(d: Direction) -> list[Direction]:
    """Directions allowed after a hinge: neither ``d`` nor its negation, in table order."""
    back = neg(d)
    return [v for v in DIRECTIONS if v != d and v != back]


def integer_cbrt(value: int) -> int | None:
    """Exact integer cube root of ``value``, or None when it is not a perfect cube."""
    if value < 0:
        return None
    lo, hi = 0, 1
    while hi**3 < value:
        hi *= 2
    # binary search in [lo, hi]
    while lo <= hi:
        mid = (lo + hi) // 2
        cube = mid**3
        if cube == value:
            return mid
        if cube < value:
            lo = mid + 1
        else:
            hi = mid - 1
    return None


def cube_size(shape: Sequence[int]) -> int | None:
    return integer_cbrt(1 + sum(shape))


def validate_shape(shape: Sequence[int]) -> int:
    """Check the shape is a solvable configuration and return the cube size N.

    Raises InvalidConfigurationError when the shape is empty, contains a
    non-positive or non-integer length, or when 1 + sum(shape) is not a
    perfect cube N**3 with N >= 2.
    """
    if len(shape) == 0:
        raise InvalidConfigurationError("shape must contain at least one segment")
    for i, length in enumerate(shape):
        if isinstance(length, bool) or not isinstance(length, int):
            raise InvalidConfigurationError(f"segment {i} is not an integer: {length!r}")
        if length < 1:
            raise InvalidConfigurationError(f"segment {i} must be >= 1, got {length}")

    total = 1 + sum(shape)
    n = integer_cbrt(total)
    if n is None:
        raise InvalidConfigurationError(f"1 + sum(shape) = {total} is not a perfect cube")
    if n < 2:
        raise InvalidConfigurationError(f"cube size must be >= 2, got {n}")
    return n
