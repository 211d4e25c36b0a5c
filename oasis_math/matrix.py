################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Dense row-major matrices for small geometric problems."""

from __future__ import annotations

import logging
import math
from typing import Any
from typing import Iterable
from typing import List
from typing import Optional
from typing import Sequence
from typing import Tuple
from typing import Union

import numpy as np
from numpy.typing import NDArray

from .config.math_params import MATRIX_ROUND_DECIMALS
from .config.math_params import MATRIX_SINGULAR_TOLERANCE
from .errors import DimensionError
from .errors import EmptyError
from .errors import NotSquareError
from .errors import SingularMatrixError
from .validation import as_matrix_array
from .validation import format_number
from .validation import finite_prefix
from .validation import require_finite
from .validation import require_size
from .validation import round_half_up
from .validation import zeros
from .vector import Vector


_LOG: logging.Logger = logging.getLogger(__name__)


class Matrix:
    """Rectangular grid of floats with a recursive determinant and inverse.

    Responsibility:
        Own a rows x columns grid and provide the algebra needed by
        rotation and transform pipelines.

    Mutability:
        - Algebraic operations (transpose, multiply, multiply_vector,
          get_cofactor, inverse, scale, round, copy) return new objects and
          never share storage with the receiver.
        - Structural builders (reset, add_a_row, add_a_column,
          set_as_identity and the values setter) modify the receiver in place
          and return None.

    Data contract:
        - Every row has exactly ``columns`` finite entries.
        - Sizes may be zero so a matrix can be grown from empty.
        - Equality is exact, round before comparing chained results.

    Equations:
        Laplace expansion along the first row:
            det(A) = sum_j (-1)^j * A[0][j] * det(M_0j)

        Adjugate inverse:
            C[i][j] = (-1)^(i + j) * det(M_ij)
            A^-1 = C^T / det(A)

    Numerical notes:
        - The determinant is O(n!) and intended for n up to about 10.
        - Singularity uses an absolute determinant tolerance.
    """

    def __init__(
        self,
        rows: int,
        columns: int,
        values: Optional[Sequence[Sequence[float]]] = None,
    ) -> None:
        self._rows: int = require_size(rows, "rows")
        self._columns: int = require_size(columns, "columns")
        self._values: List[List[float]] = zeros(self._rows, self._columns)
        if values is not None:
            self.values = values

    @staticmethod
    def identity(dimension: int) -> Matrix:
        """Return a new dimension x dimension identity matrix."""
        matrix: Matrix = Matrix(dimension, dimension)
        matrix.set_as_identity()
        return matrix

    @staticmethod
    def from_numpy(array: Any) -> Matrix:
        """Create a matrix from a 2D array-like."""
        data: NDArray[np.float64] = as_matrix_array(array, "array")
        rows, columns = data.shape
        return Matrix(int(rows), int(columns), data.tolist())

    @classmethod
    def _wrap(cls, rows: int, columns: int, grid: List[List[float]]) -> Matrix:
        # Adopts an already validated, freshly allocated grid without copying
        matrix: Matrix = cls.__new__(cls)
        matrix._rows = rows
        matrix._columns = columns
        matrix._values = grid
        return matrix

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def columns(self) -> int:
        """Number of columns."""
        return self._columns

    @property
    def shape(self) -> Tuple[int, int]:
        """(rows, columns) pair."""
        return (self._rows, self._columns)

    @property
    def values(self) -> List[List[float]]:
        """Return a deep copy of the grid."""
        return [list(row) for row in self._values]

    @values.setter
    def values(self, new_values: Sequence[Sequence[float]]) -> None:
        # The declared shape wins: extra rows or cells are ignored and cells
        # not covered by the input keep their current value
        updates: List[List[float]] = [
            finite_prefix(source, self._columns, "values")
            for _, source in zip(self._values, new_values)
        ]
        for row, update in zip(self._values, updates):
            row[: len(update)] = update

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix({self._rows}, {self._columns}, {self._values!r})"

    def __str__(self) -> str:
        return self.to_string()

    def to_string(self) -> str:
        """Render rows as ``[v1, v2]`` joined by ``,\\n`` inside brackets."""
        rendered: Iterable[str] = (
            "[" + ", ".join(format_number(val) for val in row) + "]"
            for row in self._values
        )
        return "[" + ",\n".join(rendered) + "]"

    def to_numpy(self) -> NDArray[np.float64]:
        """Return the grid as a float64 array copy."""
        return np.array(self._values, dtype=np.float64).reshape(
            self._rows, self._columns
        )

    def copy(self) -> Matrix:
        """Return an independent copy."""
        return Matrix._wrap(self._rows, self._columns, self.values)

    def at(self, row: int, col: int) -> float:
        """Return the value stored at (row, col)."""
        if not 0 <= row < self._rows or not 0 <= col < self._columns:
            raise IndexError(
                f"Cell ({row}, {col}) out of range for a "
                f"{self._rows}x{self._columns} matrix"
            )
        return self._values[row][col]

    def index_of(self, value: float) -> Tuple[int, int]:
        """Return (row, col) of the first match in row-major order, or (-1, -1)."""
        for i, row in enumerate(self._values):
            for j, current in enumerate(row):
                if current == value:
                    return (i, j)
        return (-1, -1)

    def equals(self, matrix: Matrix) -> bool:
        """Check shape and exact value equality."""
        if self._rows != matrix.rows or self._columns != matrix.columns:
            return False
        for i, row in enumerate(self._values):
            for j, current in enumerate(row):
                if current != matrix.at(i, j):
                    return False
        return True

    def is_identity(self, decimals: int = MATRIX_ROUND_DECIMALS) -> bool:
        """Check whether the matrix rounds to the identity.

        Args:
            decimals: Decimal places kept before the exact comparison, so
                products such as A * inverse(A) pass despite round-off.
        """
        if self._rows != self._columns:
            return False
        return self.round(decimals).equals(Matrix.identity(self._rows))

    def max(self) -> float:
        """Return the largest value, or 0.0 for a matrix with no cells."""
        cells: List[float] = [val for row in self._values for val in row]
        if not cells:
            return 0.0
        return max(cells)

    def min(self) -> float:
        """Return the smallest value, or 0.0 for a matrix with no cells."""
        cells: List[float] = [val for row in self._values for val in row]
        if not cells:
            return 0.0
        return min(cells)

    def round(self, decimals: int = 0) -> Matrix:
        """Return a copy with every value rounded half up."""
        if decimals < 0:
            raise ValueError("decimals must be non-negative")
        return Matrix._wrap(
            self._rows,
            self._columns,
            [[round_half_up(val, decimals) for val in row] for row in self._values],
        )

    def scale(self, factor: float) -> Matrix:
        """Return a copy with every value multiplied by factor."""
        scalar: float = require_finite(factor, "factor")
        return Matrix._wrap(
            self._rows,
            self._columns,
            [[val * scalar for val in row] for row in self._values],
        )

    def reset(self) -> None:
        """Set every value to 0 in place."""
        for row in self._values:
            for j in range(len(row)):
                row[j] = 0.0

    def add_a_row(self) -> None:
        """Append a row of zeros in place."""
        self._values.append([0.0 for _ in range(self._columns)])
        self._rows += 1

    def add_a_column(self) -> None:
        """Append a zero to every row in place."""
        for row in self._values:
            row.append(0.0)
        self._columns += 1

    def set_as_identity(self) -> None:
        """Overwrite the matrix with the identity pattern in place."""
        self._require_square("set_as_identity")
        for i, row in enumerate(self._values):
            for j in range(len(row)):
                row[j] = 1.0 if i == j else 0.0

    def transpose(self) -> Matrix:
        """Return the columns x rows transpose."""
        return Matrix._wrap(
            self._columns,
            self._rows,
            [
                [self._values[i][j] for i in range(self._rows)]
                for j in range(self._columns)
            ],
        )

    def multiply(self, matrix: Matrix) -> Matrix:
        """Return the product self * matrix."""
        if self._columns != matrix.rows:
            raise DimensionError(
                "Dimension error! The first matrix must have as many columns "
                f"as the second has rows ({self._columns} != {matrix.rows})"
            )
        other: List[List[float]] = matrix._values
        result: List[List[float]] = zeros(self._rows, matrix.columns)
        for i in range(self._rows):
            left: List[float] = self._values[i]
            for j in range(matrix.columns):
                acc: float = 0.0
                for k in range(self._columns):
                    acc += left[k] * other[k][j]
                result[i][j] = acc
        return Matrix._wrap(self._rows, matrix.columns, result)

    def multiply_vector(self, vector: Union[Vector, Sequence[float]]) -> Vector:
        """Return the column-vector product self * vector."""
        operand: Vector = vector if isinstance(vector, Vector) else Vector(vector)
        if len(operand) != self._columns:
            raise DimensionError(
                "Dimension error! The vector must have as many elements as "
                f"the matrix has columns ({len(operand)} != {self._columns})"
            )
        result: List[float] = [0.0 for _ in range(self._rows)]
        for i, row in enumerate(self._values):
            acc: float = 0.0
            for k, val in enumerate(row):
                acc += val * operand.at(k)
            result[i] = acc
        return Vector(result)

    def determinant(self) -> float:
        """Return the determinant by Laplace expansion along the first row."""
        self._require_square("determinant")
        if self._rows == 0:
            raise EmptyError("determinant requires a non-empty matrix")
        if self._rows == 1:
            return self._values[0][0]
        if self._rows == 2:
            a, b = self._values[0]
            c, d = self._values[1]
            return a * d - b * c

        det: float = 0.0
        sign: float = 1.0
        for j, val in enumerate(self._values[0]):
            # Zero entries contribute nothing, skip their minors
            if val != 0.0:
                det += sign * val * self.get_cofactor(0, j).determinant()
            sign = -sign
        return det

    def get_cofactor(self, row: int, col: int) -> Matrix:
        """Return the minor with the given row and column removed.

        The result is unsigned: callers apply (-1)^(row + col) themselves.
        """
        self._require_square("get_cofactor")
        if not 0 <= row < self._rows or not 0 <= col < self._columns:
            raise IndexError(
                f"Cell ({row}, {col}) out of range for a "
                f"{self._rows}x{self._columns} matrix"
            )
        minor: List[List[float]] = [
            [val for j, val in enumerate(values) if j != col]
            for i, values in enumerate(self._values)
            if i != row
        ]
        return Matrix._wrap(self._rows - 1, self._columns - 1, minor)

    def inverse(self, tolerance: float = MATRIX_SINGULAR_TOLERANCE) -> Matrix:
        """Return the inverse computed with the adjugate method.

        Args:
            tolerance: Determinants whose magnitude does not exceed this
                value are treated as zero.
        """
        self._require_square("inverse")
        det: float = self.determinant()
        _LOG.debug(
            "Inverting %dx%d matrix, determinant %g", self._rows, self._rows, det
        )
        if abs(det) <= tolerance:
            raise SingularMatrixError(f"Matrix is not invertible (determinant {det!r})")
        inv_det: float = 1.0 / det
        if not math.isfinite(inv_det):
            raise SingularMatrixError(
                f"Matrix is not invertible (1 / determinant overflows, {det!r})"
            )

        size: int = self._rows
        if size == 1:
            return Matrix._wrap(1, 1, [[inv_det]])

        cofactors: List[List[float]] = zeros(size, size)
        for i in range(size):
            for j in range(size):
                sign: float = 1.0 if (i + j) % 2 == 0 else -1.0
                cofactors[i][j] = sign * self.get_cofactor(i, j).determinant()

        adjugate: Matrix = Matrix._wrap(size, size, cofactors).transpose()
        return adjugate.scale(inv_det)

    def _require_square(self, name: str) -> None:
        if self._rows != self._columns:
            raise NotSquareError(
                f"Dimension error: {name} requires a squared matrix, got "
                f"{self._rows}x{self._columns}"
            )
