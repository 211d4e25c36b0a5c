################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Parameter schema for the math primitives."""

from __future__ import annotations

from oasis_math.config.math_params import MathParams
from oasis_math.config.math_params import MathParamsError
from oasis_math.config.math_params import MatrixParams
from oasis_math.config.math_params import QuatParams
from oasis_math.config.math_params import load_params_file
from oasis_math.config.math_params import load_params_yaml


__all__ = [
    "MathParams",
    "MathParamsError",
    "MatrixParams",
    "QuatParams",
    "load_params_file",
    "load_params_yaml",
]
