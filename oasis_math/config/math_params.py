################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Structured configuration schema for the math primitives."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from dataclasses import fields
from dataclasses import replace
from pathlib import Path
from typing import Any

import yaml


# Absolute determinant magnitude at or below which a matrix is singular
MATRIX_SINGULAR_TOLERANCE: float = 1e-12
# Decimal places kept when comparing A * inverse(A) against the identity
MATRIX_ROUND_DECIMALS: int = 10

# Componentwise threshold for approximate quaternion equality
QUAT_EPSILON: float = 1e-5
# Quaternion cosine above which short_mix interpolates linearly
QUAT_SLERP_LINEAR_COS: float = 0.9999
# Half-angle sine below which mix averages the endpoints
QUAT_SLERP_HALF_SIN_MIN: float = 0.001

_LOG: logging.Logger = logging.getLogger(__name__)


class MathParamsError(Exception):
    """Raised when math parameter validation fails."""


def _require_non_negative(value: float, name: str) -> None:
    """Require a non-negative value."""
    if value < 0.0:
        raise MathParamsError(f"{name} must be non-negative")


def _require_positive(value: float, name: str) -> None:
    """Require a positive value."""
    if value <= 0.0:
        raise MathParamsError(f"{name} must be positive")


def _require_number(value: Any, name: str) -> float:
    """Require a real number, rejecting booleans."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MathParamsError(f"{name} must be a number")
    return float(value)


def _require_int(value: Any, name: str) -> int:
    """Require an integer, rejecting booleans."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise MathParamsError(f"{name} must be an int")
    return value


@dataclass(frozen=True)
class MatrixParams:
    """Numerical policy for the matrix engine."""

    # Absolute determinant threshold for singularity
    singular_tolerance: float = MATRIX_SINGULAR_TOLERANCE
    # Decimal places used for identity round-trip checks
    round_decimals: int = MATRIX_ROUND_DECIMALS


@dataclass(frozen=True)
class QuatParams:
    """Numerical policy for quaternion comparison and interpolation."""

    # Threshold for approximate equality
    epsilon: float = QUAT_EPSILON
    # Cosine above which short_mix falls back to linear interpolation
    slerp_linear_cos: float = QUAT_SLERP_LINEAR_COS
    # Half-angle sine below which mix averages the endpoints
    slerp_half_sin_min: float = QUAT_SLERP_HALF_SIN_MIN


@dataclass(frozen=True)
class MathParams:
    """Complete configuration tree for the math primitives."""

    matrix: MatrixParams
    quat: QuatParams

    @classmethod
    def defaults(cls) -> MathParams:
        """Return the default parameter tree."""
        return cls(matrix=MatrixParams(), quat=QuatParams())

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MathParams:
        """Build and validate parameters from a nested mapping.

        Missing namespaces and keys keep their defaults. Unknown keys are
        rejected so typos in parameter files surface immediately.
        """
        if not isinstance(data, dict):
            raise MathParamsError("parameters must be a mapping")
        unknown: set[str] = set(data.keys()) - {"matrix", "quat"}
        if unknown:
            raise MathParamsError(
                f"Unexpected parameter namespaces: {', '.join(sorted(unknown))}"
            )

        matrix_data: dict[str, Any] = _namespace(data, "matrix", MatrixParams)
        quat_data: dict[str, Any] = _namespace(data, "quat", QuatParams)

        matrix: MatrixParams = MatrixParams()
        if "singular_tolerance" in matrix_data:
            matrix = replace(
                matrix,
                singular_tolerance=_require_number(
                    matrix_data["singular_tolerance"], "matrix.singular_tolerance"
                ),
            )
        if "round_decimals" in matrix_data:
            matrix = replace(
                matrix,
                round_decimals=_require_int(
                    matrix_data["round_decimals"], "matrix.round_decimals"
                ),
            )

        quat: QuatParams = QuatParams()
        for key in ("epsilon", "slerp_linear_cos", "slerp_half_sin_min"):
            if key in quat_data:
                quat = replace(
                    quat, **{key: _require_number(quat_data[key], f"quat.{key}")}
                )

        params: MathParams = cls(matrix=matrix, quat=quat)
        params.validate()
        return params

    def validate(self) -> None:
        """Validate parameter invariants and constraints."""
        _require_non_negative(
            self.matrix.singular_tolerance, "matrix.singular_tolerance"
        )
        _require_non_negative(self.matrix.round_decimals, "matrix.round_decimals")

        _require_non_negative(self.quat.epsilon, "quat.epsilon")
        _require_positive(self.quat.slerp_linear_cos, "quat.slerp_linear_cos")
        if self.quat.slerp_linear_cos > 1.0:
            raise MathParamsError("quat.slerp_linear_cos must not exceed 1")
        _require_non_negative(self.quat.slerp_half_sin_min, "quat.slerp_half_sin_min")

    def replace(self, **namespace_overrides: Any) -> MathParams:
        """Return a modified copy of the parameters."""
        return replace(self, **namespace_overrides)

    def as_nested_dict(self) -> dict[str, Any]:
        """Return a nested dict representation for debugging."""
        return _dataclass_to_dict(self)


def load_params_yaml(text: str) -> MathParams:
    """Parse parameters from YAML text."""
    loaded: Any = yaml.safe_load(text)
    if loaded is None:
        return MathParams.defaults()
    if not isinstance(loaded, dict):
        raise MathParamsError("YAML root must be a mapping")
    return MathParams.from_dict(loaded)


def load_params_file(path: str | Path) -> MathParams:
    """Load parameters from a YAML file on disk."""
    params_path: Path = Path(path)
    params: MathParams = load_params_yaml(params_path.read_text(encoding="utf-8"))
    _LOG.info("Loaded math parameters from %s", params_path)
    return params


def _namespace(data: dict[str, Any], name: str, schema: type) -> dict[str, Any]:
    """Return one parameter namespace, rejecting unknown keys."""
    value: Any = data.get(name, {})
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise MathParamsError(f"{name} must be a mapping")
    allowed: set[str] = {field.name for field in fields(schema)}
    unknown: set[str] = set(value.keys()) - allowed
    if unknown:
        raise MathParamsError(
            f"Unexpected keys in {name}: {', '.join(sorted(unknown))}"
        )
    return value


def _dataclass_to_dict(value: Any) -> Any:
    """Convert dataclasses into plain Python values."""
    if hasattr(value, "__dataclass_fields__"):
        return {
            field.name: _dataclass_to_dict(getattr(value, field.name))
            for field in fields(value)
        }
    return value
