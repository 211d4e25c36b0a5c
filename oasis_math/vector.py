################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Fixed-length float vectors."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING
from typing import Any
from typing import Callable
from typing import Iterator
from typing import List
from typing import Optional
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from .errors import DimensionError
from .errors import EmptyError
from .errors import MathError
from .validation import as_vector_array
from .validation import format_number
from .validation import overlay_row
from .validation import require_finite
from .validation import round_half_up


if TYPE_CHECKING:
    from .matrix import Matrix


class Vector:
    """Fixed-length vector of floats.

    Arithmetic returns new vectors. Only reset(), add_a_value() and the
    values setter change the receiver.
    """

    def __init__(self, values: Optional[Sequence[float]] = None) -> None:
        size: int = len(values) if values is not None else 1
        self._values: List[float] = [0.0 for _ in range(size)]
        if values is not None:
            self.values = values

    @staticmethod
    def from_numpy(array: Any) -> Vector:
        """Create a vector from a 1D array-like."""
        return Vector(as_vector_array(array, "array").tolist())

    @property
    def rows(self) -> int:
        """Number of components."""
        return len(self._values)

    @property
    def values(self) -> List[float]:
        """Return a copy of the components."""
        return list(self._values)

    @values.setter
    def values(self, new_values: Sequence[float]) -> None:
        # Extra inputs are cropped, missing ones keep their current value
        overlay_row(self._values, new_values, "values")

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[float]:
        return iter(list(self._values))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Vector({self._values!r})"

    def __str__(self) -> str:
        return "[" + ", ".join(format_number(val) for val in self._values) + "]"

    def at(self, row: int) -> float:
        """Return the component at the given position."""
        if row < 0 or row >= len(self._values):
            raise IndexError(f"Row {row} out of range for vector of size {self.rows}")
        return self._values[row]

    def index_of(self, value: float) -> int:
        """Return the position of the first matching component, or -1."""
        for index, current in enumerate(self._values):
            if current == value:
                return index
        return -1

    def reset(self) -> None:
        """Set all components to 0 in place."""
        for index in range(len(self._values)):
            self._values[index] = 0.0

    def add_a_value(self) -> None:
        """Append a zero component in place."""
        self._values.append(0.0)

    def equals(self, vector: Vector) -> bool:
        """Check exact componentwise equality."""
        return self.rows == vector.rows and all(
            val == vector.at(i) for i, val in enumerate(self._values)
        )

    def negate(self) -> Vector:
        """Return the vector with every sign flipped."""
        return self._map(lambda val, i: -val)

    def norm(self) -> float:
        """Return the Euclidean length."""
        return math.sqrt(self.squared_norm())

    def squared_norm(self) -> float:
        """Return the squared Euclidean length."""
        return self.dot(self)

    def add(self, vector: Vector) -> Vector:
        """Componentwise sum."""
        self._require_same_size(vector, "add")
        return self._map(lambda val, i: val + vector.at(i))

    def subtract(self, vector: Vector) -> Vector:
        """Componentwise difference."""
        self._require_same_size(vector, "subtract")
        return self._map(lambda val, i: val - vector.at(i))

    def multiply(self, vector: Vector) -> Vector:
        """Componentwise product."""
        self._require_same_size(vector, "multiply")
        return self._map(lambda val, i: val * vector.at(i))

    def divide(self, vector: Vector) -> Vector:
        """Componentwise quotient.

        Components whose divisor is zero are passed through unchanged.
        """
        self._require_same_size(vector, "divide")

        def _divide(val: float, i: int) -> float:
            divisor: float = vector.at(i)
            if divisor == 0.0:
                return val
            return val / divisor

        return self._map(_divide)

    def multiply_matrix(self, matrix: Matrix) -> Vector:
        """Return the row-vector product self * matrix."""
        if self.rows != matrix.rows:
            raise DimensionError(
                "Dimension error! The vector must have the same number of "
                f"elements as the matrix rows ({self.rows} != {matrix.rows})"
            )
        result: List[float] = [0.0 for _ in range(matrix.columns)]
        for j in range(matrix.columns):
            acc: float = 0.0
            for k, val in enumerate(self._values):
                acc += val * matrix.at(k, j)
            result[j] = acc
        return Vector(result)

    def max(self) -> float:
        """Return the largest component."""
        if not self._values:
            raise EmptyError("Cannot get the maximum value of an empty vector")
        return max(self._values)

    def min(self) -> float:
        """Return the smallest component."""
        if not self._values:
            raise EmptyError("Cannot get the minimum value of an empty vector")
        return min(self._values)

    def round(self) -> Vector:
        """Round every component half up to the nearest integer."""
        if not self._values:
            raise EmptyError("Cannot round an empty vector")
        return self._map(lambda val, i: round_half_up(val))

    def scale(self, scale: float) -> Vector:
        """Multiply every component by a scalar."""
        factor: float = require_finite(scale, "scale")
        return self._map(lambda val, i: val * factor)

    def normalize(self) -> Vector:
        """Return the unit vector with the same direction."""
        length: float = self.norm()
        if length == 0.0:
            raise MathError("Cannot normalize a zero-length vector")
        return self._map(lambda val, i: val / length)

    def dot(self, vector: Vector) -> float:
        """Return the dot product."""
        self._require_same_size(vector, "dot")
        acc: float = 0.0
        for i, val in enumerate(self._values):
            acc += val * vector.at(i)
        return acc

    def cross(self, vector: Vector) -> Vector:
        """Return the cross product of the leading three components."""
        if self.rows < 3 or vector.rows < 3:
            raise DimensionError(
                "Dimension error: cross product is possible on 3D vectors only"
            )
        return Vector(
            [
                self.at(1) * vector.at(2) - self.at(2) * vector.at(1),
                self.at(2) * vector.at(0) - self.at(0) * vector.at(2),
                self.at(0) * vector.at(1) - self.at(1) * vector.at(0),
            ]
        )

    def mix(self, vector: Vector, time: float) -> Vector:
        """Linearly interpolate toward vector by the fraction time."""
        self._require_same_size(vector, "mix")
        return self._map(lambda val, i: val + time * (vector.at(i) - val))

    def angle_from(self, vector: Vector) -> float:
        """Return the angle to vector in radians, between 0 and pi."""
        if self.rows != vector.rows:
            raise DimensionError(
                "Dimension error: to calculate the angle, vectors must have the "
                "same dimension"
            )
        cos: float = self.dot(vector) / (self.norm() * vector.norm())
        # Round-off can push parallel vectors just outside [-1, 1]
        return math.acos(max(-1.0, min(1.0, cos)))

    def distance_from(self, vector: Vector) -> float:
        """Return |self - vector|."""
        if self.rows != vector.rows:
            raise DimensionError(
                "Dimension error: to calculate the distance, vectors must have "
                "the same dimension"
            )
        return self.subtract(vector).norm()

    @staticmethod
    def get_360_angle(va: Vector, vb: Vector) -> float:
        """Return the signed angle from va to vb around the +Z axis."""
        if va.rows != 3 or vb.rows != 3:
            raise DimensionError(
                "Dimension error: vectors must be in 3D. You can add a 1 "
                "dimension if it is missing"
            )
        return -math.atan2(
            vb.cross(va).dot(Vector([0.0, 0.0, 1.0]).normalize()),
            va.dot(vb),
        )

    def to_numpy(self) -> NDArray[np.float64]:
        """Return the components as a float64 array copy."""
        return np.array(self._values, dtype=np.float64)

    def _map(self, operation: Callable[[float, int], float]) -> Vector:
        return Vector([operation(val, i) for i, val in enumerate(self._values)])

    def _require_same_size(self, vector: Vector, name: str) -> None:
        if self.rows != vector.rows:
            raise DimensionError(
                f"Dimension error: {name} requires vectors of the same "
                f"dimension ({self.rows} != {vector.rows})"
            )
