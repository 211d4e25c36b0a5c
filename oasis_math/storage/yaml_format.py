################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""YAML schema utilities for matrices, vectors and quaternions.

Documents are mappings with a ``type`` discriminator:

    type: matrix
    rows: 2
    columns: 2
    values:
    - [1.0, 2.0]
    - [3.0, 4.0]

Vectors carry ``values`` as a flat list and quaternions carry ``xyzw``.
"""

from __future__ import annotations

import numbers
from typing import Any
from typing import List
from typing import Union

import yaml

from ..errors import MathError
from ..matrix import Matrix
from ..quat import Quat
from ..vector import Vector


MathValue = Union[Matrix, Vector, Quat]

TYPE_MATRIX: str = "matrix"
TYPE_VECTOR: str = "vector"
TYPE_QUAT: str = "quat"


class MathYamlError(Exception):
    """Raised when a serialized math value does not match the schema."""


def to_dict(value: MathValue) -> dict[str, object]:
    """Convert a matrix, vector or quaternion into plain Python values."""
    if isinstance(value, Matrix):
        return {
            "type": TYPE_MATRIX,
            "rows": value.rows,
            "columns": value.columns,
            "values": value.values,
        }
    if isinstance(value, Vector):
        return {"type": TYPE_VECTOR, "values": value.values}
    if isinstance(value, Quat):
        return {"type": TYPE_QUAT, "xyzw": value.values}
    raise MathYamlError(f"Unsupported value type: {type(value).__name__}")


def from_dict(data: dict[str, object]) -> MathValue:
    """Build a matrix, vector or quaternion from a validated mapping."""
    mapping: dict[str, object] = _require_mapping(data, "document")
    kind: object = mapping.get("type")
    if kind == TYPE_MATRIX:
        return _matrix_from_dict(mapping)
    if kind == TYPE_VECTOR:
        return _vector_from_dict(mapping)
    if kind == TYPE_QUAT:
        return _quat_from_dict(mapping)
    raise MathYamlError(f"Unknown document type: {kind!r}")


def dumps_yaml(value: MathValue) -> str:
    """Serialize a value to deterministic YAML."""
    return yaml.safe_dump(
        to_dict(value),
        sort_keys=False,
        indent=2,
        default_flow_style=None,
    )


def loads_yaml(text: str) -> MathValue:
    """Parse a value from YAML text."""
    loaded: Any = yaml.safe_load(text)
    if not isinstance(loaded, dict):
        raise MathYamlError("YAML root must be a mapping")
    return from_dict(loaded)


def _matrix_from_dict(data: dict[str, object]) -> Matrix:
    _require_keys("matrix", data, {"type", "rows", "columns", "values"})
    rows: int = _require_int(data["rows"], "rows")
    columns: int = _require_int(data["columns"], "columns")
    raw_rows: List[object] = _require_list(data["values"], "values")
    if len(raw_rows) != rows:
        raise MathYamlError(f"values must have {rows} rows, got {len(raw_rows)}")

    grid: List[List[float]] = []
    for index, raw_row in enumerate(raw_rows):
        row: List[float] = _require_floats(raw_row, f"values[{index}]")
        if len(row) != columns:
            raise MathYamlError(
                f"values[{index}] must have {columns} columns, got {len(row)}"
            )
        grid.append(row)

    try:
        return Matrix(rows, columns, grid)
    except MathError as exc:
        raise MathYamlError(str(exc)) from exc


def _vector_from_dict(data: dict[str, object]) -> Vector:
    _require_keys("vector", data, {"type", "values"})
    values: List[float] = _require_floats(data["values"], "values")
    try:
        return Vector(values)
    except MathError as exc:
        raise MathYamlError(str(exc)) from exc


def _quat_from_dict(data: dict[str, object]) -> Quat:
    _require_keys("quat", data, {"type", "xyzw"})
    xyzw: List[float] = _require_floats(data["xyzw"], "xyzw")
    if len(xyzw) != 4:
        raise MathYamlError(f"xyzw must have 4 elements, got {len(xyzw)}")
    try:
        return Quat(xyzw)
    except MathError as exc:
        raise MathYamlError(str(exc)) from exc


def _require_keys(scope: str, data: dict[str, object], required: set[str]) -> None:
    """Ensure a mapping has exactly the required keys."""
    unknown: set[str] = {key for key in data.keys() if key not in required}
    if unknown:
        raise MathYamlError(f"Unexpected keys in {scope}: {', '.join(sorted(unknown))}")
    missing: set[str] = {key for key in required if key not in data}
    if missing:
        raise MathYamlError(f"Missing keys in {scope}: {', '.join(sorted(missing))}")


def _require_mapping(value: object, name: str) -> dict[str, object]:
    """Ensure the value is a dictionary."""
    if not isinstance(value, dict):
        raise MathYamlError(f"{name} must be a mapping")
    return value


def _require_list(value: object, name: str) -> List[object]:
    """Ensure the value is a list."""
    if not isinstance(value, list):
        raise MathYamlError(f"{name} must be a list")
    return value


def _require_int(value: object, name: str) -> int:
    """Ensure the value is a non-negative integer."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise MathYamlError(f"{name} must be an int")
    if value < 0:
        raise MathYamlError(f"{name} must be non-negative")
    return value


def _require_floats(value: object, name: str) -> List[float]:
    """Ensure the value is a list of real numbers."""
    items: List[object] = _require_list(value, name)
    result: List[float] = []
    for item in items:
        if isinstance(item, bool) or not isinstance(item, numbers.Real):
            raise MathYamlError(f"{name} must contain only numbers")
        result.append(float(item))
    return result
