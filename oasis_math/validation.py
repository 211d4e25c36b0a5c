################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Validation helpers shared by the math primitives."""

from __future__ import annotations

import math
import operator
from typing import Any
from typing import List
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from .errors import NonFiniteValueError


def require_finite(value: float, name: str) -> float:
    """Return the value as a float, raising when it is NaN or infinite."""
    result: float = float(value)
    if not math.isfinite(result):
        raise NonFiniteValueError(f"{name} must be finite, got {value!r}")
    return result


def assert_finite(x: NDArray[np.float64], name: str) -> None:
    """Raise NonFiniteValueError when the array contains non-finite values."""
    if not np.all(np.isfinite(x)):
        raise NonFiniteValueError(f"{name} must be finite")


def as_matrix_array(value: Any, name: str) -> NDArray[np.float64]:
    """Coerce an array-like into a finite 2D float64 array."""
    array: NDArray[np.float64] = np.asarray(value, dtype=np.float64)
    if array.ndim != 2:
        raise ValueError(f"{name} must be a 2D array, got {array.ndim}D")
    assert_finite(array, name)
    return array


def as_vector_array(value: Any, name: str) -> NDArray[np.float64]:
    """Coerce an array-like into a finite 1D float64 array."""
    array: NDArray[np.float64] = np.asarray(value, dtype=np.float64)
    if array.ndim != 1:
        raise ValueError(f"{name} must be a 1D array, got {array.ndim}D")
    assert_finite(array, name)
    return array


def zeros(rows: int, columns: int) -> List[List[float]]:
    """Return a freshly allocated rows x columns grid of zeros."""
    return [[0.0 for _ in range(columns)] for _ in range(rows)]


def format_number(value: float) -> str:
    """Render a value the way the textual dumps expect.

    Integral values drop the trailing ``.0`` so ``[1, 2]`` prints as written.
    """
    if value.is_integer():
        return str(int(value))
    return repr(value)


def round_half_up(value: float, decimals: int = 0) -> float:
    """Round to the given decimals, resolving ties toward positive infinity."""
    if decimals == 0:
        return _half_up(value)
    try:
        factor: float = 10.0**decimals
    except OverflowError:
        # No float has fractional digits this far out
        return value
    scaled: float = value * factor
    # Magnitudes this large carry no fractional digits at this precision
    if not math.isfinite(scaled):
        return value
    return _half_up(scaled) / factor


def _half_up(value: float) -> float:
    # Compare against the floor instead of adding 0.5, which rounds first
    floor: int = math.floor(value)
    if value - floor >= 0.5:
        return float(floor + 1)
    return float(floor)


def require_size(value: int, name: str) -> int:
    """Validate a matrix or vector dimension."""
    if isinstance(value, bool):
        raise TypeError(f"{name} must be an int")
    try:
        size: int = operator.index(value)
    except TypeError as exc:
        raise TypeError(f"{name} must be an int") from exc
    if size < 0:
        raise ValueError(f"{name} must be non-negative")
    return size


def finite_prefix(source: Sequence[float], size: int, name: str) -> List[float]:
    """Return the first size values of source as checked floats."""
    return [require_finite(val, name) for val in source[: min(size, len(source))]]


def overlay_row(target: List[float], source: Sequence[float], name: str) -> None:
    """Copy the overlapping prefix of source into target in place.

    Every value is checked before target is touched.
    """
    update: List[float] = finite_prefix(source, len(target), name)
    target[: len(update)] = update
