################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Exception types raised by the matrix, vector and quaternion primitives."""

from __future__ import annotations


class MathError(ValueError):
    """Base class for invalid operands passed to the math primitives."""


class DimensionError(MathError):
    """Raised when operand shapes are incompatible."""


class NotSquareError(DimensionError):
    """Raised when an operation requires a square matrix."""


class SingularMatrixError(MathError):
    """Raised when inverting a matrix whose determinant is zero."""


class EmptyError(MathError):
    """Raised when an operation needs at least one element."""


class NonFiniteValueError(MathError):
    """Raised when NaN or infinite values are supplied."""
