################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Dense vector, matrix and quaternion primitives for geometric computation."""

from __future__ import annotations

from oasis_math.errors import DimensionError
from oasis_math.errors import EmptyError
from oasis_math.errors import MathError
from oasis_math.errors import NonFiniteValueError
from oasis_math.errors import NotSquareError
from oasis_math.errors import SingularMatrixError
from oasis_math.matrix import Matrix
from oasis_math.quat import Quat
from oasis_math.vector import Vector


__all__ = [
    "DimensionError",
    "EmptyError",
    "MathError",
    "Matrix",
    "NonFiniteValueError",
    "NotSquareError",
    "Quat",
    "SingularMatrixError",
    "Vector",
]
