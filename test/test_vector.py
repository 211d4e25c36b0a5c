################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for fixed-length vectors."""

from __future__ import annotations

import math

import numpy as np
import pytest

from oasis_math.errors import DimensionError
from oasis_math.errors import EmptyError
from oasis_math.errors import MathError
from oasis_math.errors import NonFiniteValueError
from oasis_math.matrix import Matrix
from oasis_math.vector import Vector


def test_default_is_single_zero() -> None:
    """A vector built without values holds one zero."""
    vector: Vector = Vector()
    assert len(vector) == 1
    assert vector.values == [0.0]


def test_values_setter_crops() -> None:
    """Assigned values are cropped to the current size."""
    vector: Vector = Vector([1, 2])
    vector.values = [5, 6, 7]
    assert vector.values == [5.0, 6.0]
    vector.values = [9]
    assert vector.values == [9.0, 6.0]


def test_values_setter_is_atomic() -> None:
    """A rejected assignment leaves every component untouched."""
    vector: Vector = Vector([1, 2, 3])
    with pytest.raises(NonFiniteValueError):
        vector.values = [9, 9, float("inf")]
    assert vector.values == [1.0, 2.0, 3.0]


def test_accessors_and_growth() -> None:
    """at, index_of, reset and add_a_value behave as documented."""
    vector: Vector = Vector([1, 2, 3])
    assert vector.at(2) == 3.0
    assert vector.index_of(2) == 1
    assert vector.index_of(7) == -1
    with pytest.raises(IndexError):
        vector.at(3)
    assert vector.add_a_value() is None
    assert vector.values == [1.0, 2.0, 3.0, 0.0]
    vector.reset()
    assert vector.values == [0.0, 0.0, 0.0, 0.0]


def test_equality_is_exact() -> None:
    """Vectors compare equal only on identical components."""
    assert Vector([1, 2]) == Vector([1.0, 2.0])
    assert not Vector([1, 2]).equals(Vector([1, 2, 0]))
    assert not Vector([1, 2]).equals(Vector([1, 2.000001]))


def test_componentwise_arithmetic() -> None:
    """add, subtract, multiply and divide work per component."""
    a: Vector = Vector([4, 6, 8])
    b: Vector = Vector([2, 0, 4])
    assert a.add(b).values == [6.0, 6.0, 12.0]
    assert a.subtract(b).values == [2.0, 6.0, 4.0]
    assert a.multiply(b).values == [8.0, 0.0, 32.0]
    # Zero divisors pass the component through
    assert a.divide(b).values == [2.0, 6.0, 2.0]
    assert a.negate().values == [-4.0, -6.0, -8.0]
    assert a.scale(0.5).values == [2.0, 3.0, 4.0]


def test_arithmetic_dimension_errors() -> None:
    """Length mismatches raise DimensionError."""
    a: Vector = Vector([1, 2, 3])
    b: Vector = Vector([1, 2])
    for operation in (a.add, a.subtract, a.multiply, a.divide, a.dot):
        with pytest.raises(DimensionError, match="Dimension error"):
            operation(b)
    with pytest.raises(DimensionError):
        a.angle_from(b)
    with pytest.raises(DimensionError):
        a.distance_from(b)


def test_norm_and_normalize() -> None:
    """Norms and unit vectors."""
    vector: Vector = Vector([3, 4])
    assert vector.norm() == 5.0
    assert vector.squared_norm() == 25.0
    assert vector.normalize().values == [0.6, 0.8]
    with pytest.raises(MathError):
        Vector([0, 0]).normalize()


def test_dot_and_cross() -> None:
    """Dot and cross products."""
    x_axis: Vector = Vector([1, 0, 0])
    y_axis: Vector = Vector([0, 1, 0])
    assert x_axis.dot(y_axis) == 0.0
    assert x_axis.cross(y_axis).equals(Vector([0, 0, 1]))
    with pytest.raises(DimensionError):
        Vector([1, 0]).cross(Vector([0, 1]))


def test_angles_and_distance() -> None:
    """angle_from, distance_from and get_360_angle."""
    assert math.isclose(Vector([1, 0]).angle_from(Vector([0, 1])), math.pi / 2.0)
    assert math.isclose(Vector([2, 2]).angle_from(Vector([1, 1])), 0.0, abs_tol=1e-7)
    assert Vector([0, 0]).distance_from(Vector([3, 4])) == 5.0

    x_axis: Vector = Vector([1, 0, 0])
    y_axis: Vector = Vector([0, 1, 0])
    assert math.isclose(Vector.get_360_angle(x_axis, y_axis), math.pi / 2.0)
    assert math.isclose(Vector.get_360_angle(y_axis, x_axis), -math.pi / 2.0)
    with pytest.raises(DimensionError):
        Vector.get_360_angle(Vector([1, 0]), Vector([0, 1]))


def test_mix() -> None:
    """mix interpolates linearly."""
    start: Vector = Vector([0, 0])
    end: Vector = Vector([10, 20])
    assert start.mix(end, 0.5).values == [5.0, 10.0]
    assert start.mix(end, 0.0).equals(start)


def test_multiply_matrix() -> None:
    """Row vector times matrix."""
    matrix: Matrix = Matrix(2, 3, [[1, 2, 3], [4, 5, 6]])
    result: Vector = Vector([1, 2]).multiply_matrix(matrix)
    assert result.values == [9.0, 12.0, 15.0]
    with pytest.raises(DimensionError, match="Dimension error"):
        Vector([1, 2, 3]).multiply_matrix(matrix)


def test_multiply_matrix_matches_transpose_product() -> None:
    """v * M equals M^T * v."""
    matrix: Matrix = Matrix(3, 2, [[1, -2], [0.5, 4], [3, 1]])
    vector: Vector = Vector([2, -1, 0.5])
    assert vector.multiply_matrix(matrix).equals(
        matrix.transpose().multiply_vector(vector)
    )


def test_extrema_and_round() -> None:
    """min, max and round, including the empty case."""
    vector: Vector = Vector([1.5, -1.5, 2.4])
    assert vector.max() == 2.4
    assert vector.min() == -1.5
    assert vector.round().values == [2.0, -1.0, 2.0]
    empty: Vector = Vector([])
    with pytest.raises(EmptyError):
        empty.max()
    with pytest.raises(EmptyError):
        empty.min()
    with pytest.raises(EmptyError):
        empty.round()


def test_string_and_numpy() -> None:
    """Rendering and numpy conversion."""
    vector: Vector = Vector([1, 2.5])
    assert str(vector) == "[1, 2.5]"
    assert np.array_equal(vector.to_numpy(), np.array([1.0, 2.5]))
    assert Vector.from_numpy(np.array([3.0, 4.0])).values == [3.0, 4.0]
