from __future__ import annotations

import pytest

from snake_cube.core.lattice import (
    DIRECTIONS,
    InvalidConfigurationError,
    cube_size,
    integer_cbrt,
    neg,
    turn_directions,
    validate_shape,
)

SNAKE_3 = [2, 1, 1, 2, 1, 2, 1, 1, 2, 2, 1, 1, 1, 2, 2, 2, 2]


def test_directions_fixed_order():
    assert DIRECTIONS == (
        (-1, 0, 0),
        (0, -1, 0),
        (0, 0, -1),
        (0, 0, 1),
        (0, 1, 0),
        (1, 0, 0),
    )
    for d in DIRECTIONS:
        assert neg(d) in DIRECTIONS


@pytest.mark.parametrize("d", DIRECTIONS)
def test_turn_directions_exclude_collinear(d):
    turns = turn_directions(d)
    assert len(turns) == 4
    assert d not in turns
    assert neg(d) not in turns
    # table order preserved
    assert turns == sorted(turns, key=DIRECTIONS.index)


def test_turn_directions_after_plus_x():
    assert turn_directions((1, 0, 0)) == [(0, -1, 0), (0, 0, -1), (0, 0, 1), (0, 1, 0)]


@pytest.mark.parametrize(
    "value,expected",
    [(0, 0), (1, 1), (8, 2), (27, 3), (64, 4), (26, None), (28, None), (2, None), (10**18, 10**6), (-8, None)],
)
def test_integer_cbrt(value, expected):
    assert integer_cbrt(value) == expected


def test_cube_size():
    assert cube_size(SNAKE_3) == 3
    assert cube_size([7]) == 2
    assert cube_size([1]) is None
    assert cube_size([1] * 8) is None


def test_validate_shape_accepts_classic_snake():
    assert validate_shape(SNAKE_3) == 3
    assert validate_shape([1] * 7) == 2


@pytest.mark.parametrize(
    "shape",
    [
        [1],  # 2 is not a cube
        [1] * 8,  # 9 is not a cube
        [],
        [0, 7],
        [-1, 8],
        [3.5, 3.5],
        [True] * 7,
    ],
)
def test_validate_shape_rejects(shape):
    with pytest.raises(InvalidConfigurationError):
        validate_shape(shape)


def test_invalid_configuration_is_value_error():
    with pytest.raises(ValueError):
        validate_shape([1])
