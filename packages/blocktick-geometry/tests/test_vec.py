"""Tests for 3D vector helpers."""
from __future__ import annotations

import math

import pytest

from blocktick_geometry import vec


class TestArithmetic:
    def test_add_sub(self) -> None:
        assert vec.add((1.0, 2.0, 3.0), (4.0, 5.0, 6.0)) == (5.0, 7.0, 9.0)
        assert vec.sub((5.0, 3.0, 1.0), (1.0, 2.0, 1.0)) == (4.0, 1.0, 0.0)

    def test_mismatched_dimensions_raises(self) -> None:
        with pytest.raises(ValueError):
            vec.add((1.0, 2.0), (3.0, 4.0, 5.0))

    def test_cross_of_axes(self) -> None:
        assert vec.cross((1.0, 0.0, 0.0), (0.0, 1.0, 0.0)) == (0.0, 0.0, 1.0)

    def test_dot(self) -> None:
        assert vec.dot((1.0, 2.0, 3.0), (4.0, 5.0, 6.0)) == 32.0


class TestDistance:
    def test_euclidean(self) -> None:
        assert vec.distance((0.0, 0.0, 0.0), (1.0, 2.0, 2.0)) == 3.0

    def test_symmetric(self) -> None:
        a, b = (1.0, -2.0, 0.5), (4.0, 2.0, 0.5)
        assert vec.distance(a, b) == vec.distance(b, a) == 5.0

    def test_accepts_integer_cells(self) -> None:
        assert vec.distance((0, 0, 0), (0, 0, 2)) == 2.0


class TestDirection:
    def test_unit_length(self) -> None:
        d = vec.direction((1.0, 1.0, 1.0), (4.0, 5.0, 1.0))
        assert math.isclose(vec.magnitude(d), 1.0)
        assert math.isclose(d[0], 0.6)
        assert math.isclose(d[1], 0.8)

    def test_coincident_points_give_zero(self) -> None:
        assert vec.direction((2.0, 2.0, 2.0), (2.0, 2.0, 2.0)) == (0.0, 0.0, 0.0)


class TestAngleBetween:
    def test_parallel_is_exactly_zero(self) -> None:
        assert vec.angle_between((0.0, 0.0, 5.0), (0.0, 0.0, 1.0)) == 0.0

    def test_perpendicular(self) -> None:
        assert math.isclose(vec.angle_between((1.0, 0.0, 0.0), (0.0, 1.0, 0.0)), math.pi / 2)

    def test_opposite(self) -> None:
        assert math.isclose(vec.angle_between((1.0, 0.0, 0.0), (-2.0, 0.0, 0.0)), math.pi)

    def test_zero_vector(self) -> None:
        assert vec.angle_between((0.0, 0.0, 0.0), (1.0, 0.0, 0.0)) == 0.0


class TestBlockCoord:
    def test_cells_are_centered_on_integers(self) -> None:
        assert vec.block_coord((0.4, -0.4, 2.49)) == (0, 0, 2)
        assert vec.block_coord((0.5, -0.6, 2.51)) == (1, -1, 3)

    def test_integer_input_unchanged(self) -> None:
        assert vec.block_coord((3, -2, 7)) == (3, -2, 7)
