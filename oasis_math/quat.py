################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Quaternions for 3D rotations, stored in xyzw order."""

from __future__ import annotations

import logging
import math
from typing import List
from typing import Optional
from typing import Sequence
from typing import Tuple
from typing import Union

from .config.math_params import QUAT_EPSILON
from .config.math_params import QUAT_SLERP_HALF_SIN_MIN
from .config.math_params import QUAT_SLERP_LINEAR_COS
from .errors import DimensionError
from .errors import MathError
from .matrix import Matrix
from .validation import format_number
from .validation import overlay_row
from .validation import require_finite
from .vector import Vector


_LOG: logging.Logger = logging.getLogger(__name__)


class Quat:
    """Quaternion with components [x, y, z, w].

    Conventions:
        - The default value is the identity rotation [0, 0, 0, 1].
        - Composition uses the Hamilton product.

    Mutability:
        Instance operations (reset, set_identity, calculate_w, inverse,
        conjugate, normalize, add, multiply) update the receiver and return
        it for chaining. Static operations (dot, sum, product, cross, mix,
        short_mix, from_axis_angle) return new quaternions.
    """

    def __init__(self, values: Optional[Sequence[float]] = None) -> None:
        self._values: List[float] = [0.0, 0.0, 0.0, 1.0]
        if values is not None:
            self.xyzw = values

    @property
    def values(self) -> List[float]:
        """Return a copy of the components."""
        return list(self._values)

    @values.setter
    def values(self, new_values: Sequence[float]) -> None:
        overlay_row(self._values, new_values, "values")

    @property
    def x(self) -> float:
        return self._values[0]

    @x.setter
    def x(self, value: float) -> None:
        self._values[0] = require_finite(value, "x")

    @property
    def y(self) -> float:
        return self._values[1]

    @y.setter
    def y(self, value: float) -> None:
        self._values[1] = require_finite(value, "y")

    @property
    def z(self) -> float:
        return self._values[2]

    @z.setter
    def z(self, value: float) -> None:
        self._values[2] = require_finite(value, "z")

    @property
    def w(self) -> float:
        return self._values[3]

    @w.setter
    def w(self, value: float) -> None:
        self._values[3] = require_finite(value, "w")

    @property
    def xy(self) -> Tuple[float, float]:
        return (self._values[0], self._values[1])

    @xy.setter
    def xy(self, values: Sequence[float]) -> None:
        _require_length(values, 2, "xy")
        self.values = values

    @property
    def xyz(self) -> Tuple[float, float, float]:
        return (self._values[0], self._values[1], self._values[2])

    @xyz.setter
    def xyz(self, values: Sequence[float]) -> None:
        _require_length(values, 3, "xyz")
        self.values = values

    @property
    def xyzw(self) -> Tuple[float, float, float, float]:
        return (self._values[0], self._values[1], self._values[2], self._values[3])

    @xyzw.setter
    def xyzw(self, values: Sequence[float]) -> None:
        _require_length(values, 4, "xyzw")
        self.values = values

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quat):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Quat({self._values!r})"

    def __str__(self) -> str:
        return "[" + ", ".join(format_number(val) for val in self._values) + "]"

    @staticmethod
    def identity() -> Quat:
        """Return a new identity quaternion."""
        return Quat([0.0, 0.0, 0.0, 1.0])

    def at(self, index: int) -> float:
        """Return the component at index 0 to 3."""
        if not 0 <= index < 4:
            raise IndexError(f"Quaternion index {index} out of range")
        return self._values[index]

    def reset(self) -> Quat:
        """Set all components to 0."""
        for index in range(4):
            self._values[index] = 0.0
        return self

    def copy(self, dest: Optional[Quat] = None) -> Quat:
        """Copy the components into dest, or into a new quaternion."""
        target: Quat = dest if dest is not None else Quat()
        target._values[:] = self._values
        return target

    def roll(self) -> float:
        """Return the roll angle in radians."""
        x, y, z, w = self._values
        return math.atan2(2.0 * (x * y + w * z), w * w + x * x - y * y - z * z)

    def pitch(self) -> float:
        """Return the pitch angle in radians."""
        x, y, z, w = self._values
        return math.atan2(2.0 * (y * z + w * x), w * w - x * x - y * y + z * z)

    def yaw(self) -> float:
        """Return the yaw angle in radians."""
        sin_yaw: float = 2.0 * (self.x * self.z - self.w * self.y)
        # Unit quaternions can overshoot [-1, 1] by round-off
        return math.asin(max(-1.0, min(1.0, sin_yaw)))

    def equals(self, quat: Quat, threshold: float = QUAT_EPSILON) -> bool:
        """Check componentwise equality within threshold."""
        for index in range(4):
            if abs(self._values[index] - quat.at(index)) > threshold:
                return False
        return True

    def set_identity(self) -> Quat:
        """Set the identity rotation."""
        self._values[:] = [0.0, 0.0, 0.0, 1.0]
        return self

    def calculate_w(self) -> Quat:
        """Derive w from x, y and z assuming a unit quaternion."""
        x, y, z, _ = self._values
        self._values[3] = -math.sqrt(abs(1.0 - x * x - y * y - z * z))
        return self

    def inverse(self) -> Quat:
        """Invert in place; the zero quaternion stays zero."""
        dot: float = Quat.dot(self, self)
        if dot == 0.0:
            self.reset()
            return self

        inv_dot: float = 1.0 / dot
        self._values[0] *= -inv_dot
        self._values[1] *= -inv_dot
        self._values[2] *= -inv_dot
        self._values[3] *= inv_dot
        return self

    def conjugate(self) -> Quat:
        """Negate the vector part in place."""
        for index in range(3):
            self._values[index] *= -1.0
        return self

    def length(self) -> float:
        """Return the quaternion magnitude."""
        return math.sqrt(Quat.dot(self, self))

    def normalize(self, dest: Optional[Quat] = None) -> Quat:
        """Scale to unit length, writing into dest when given."""
        target: Quat = dest if dest is not None else self
        length: float = self.length()
        if length == 0.0:
            _LOG.warning("Normalizing a zero quaternion, result is all zeros")
            target.reset()
            return target

        inv_length: float = 1.0 / length
        target._values[:] = [val * inv_length for val in self._values]
        return target

    def add(self, other: Quat) -> Quat:
        """Add other componentwise in place."""
        for index in range(4):
            self._values[index] += other.at(index)
        return self

    def multiply(self, other: Quat) -> Quat:
        """Replace self with the Hamilton product self * other."""
        self._values[:] = Quat.product(self, other)._values
        return self

    def to_matrix(self) -> Matrix:
        """Return the 3x3 rotation matrix of the normalized quaternion."""
        if self.length() == 0.0:
            raise MathError("Cannot build a rotation from a zero quaternion")
        x, y, z, w = Quat.normalize(self.copy())._values
        xx: float = x * x
        yy: float = y * y
        zz: float = z * z
        xy: float = x * y
        xz: float = x * z
        yz: float = y * z
        wx: float = w * x
        wy: float = w * y
        wz: float = w * z
        return Matrix(
            3,
            3,
            [
                [1.0 - 2.0 * (yy + zz), 2.0 * (xy - wz), 2.0 * (xz + wy)],
                [2.0 * (xy + wz), 1.0 - 2.0 * (xx + zz), 2.0 * (yz - wx)],
                [2.0 * (xz - wy), 2.0 * (yz + wx), 1.0 - 2.0 * (xx + yy)],
            ],
        )

    def rotate(self, vector: Union[Vector, Sequence[float]]) -> Vector:
        """Rotate a 3D vector by this quaternion."""
        return self.to_matrix().multiply_vector(vector)

    @staticmethod
    def dot(q1: Quat, q2: Quat) -> float:
        """Return the four-component dot product."""
        return q1.x * q2.x + q1.y * q2.y + q1.z * q2.z + q1.w * q2.w

    @staticmethod
    def sum(q1: Quat, q2: Quat) -> Quat:
        """Return q1 + q2 as a new quaternion."""
        return Quat([q1.x + q2.x, q1.y + q2.y, q1.z + q2.z, q1.w + q2.w])

    @staticmethod
    def product(q1: Quat, q2: Quat) -> Quat:
        """Return the Hamilton product q1 * q2 as a new quaternion."""
        x1, y1, z1, w1 = q1._values
        x2, y2, z2, w2 = q2._values
        return Quat(
            [
                x1 * w2 + w1 * x2 + y1 * z2 - z1 * y2,
                y1 * w2 + w1 * y2 + z1 * x2 - x1 * z2,
                z1 * w2 + w1 * z2 + x1 * y2 - y1 * x2,
                w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
            ]
        )

    @staticmethod
    def cross(q1: Quat, q2: Quat) -> Quat:
        """Return the quaternion cross product as a new quaternion."""
        x1, y1, z1, w1 = q1._values
        x2, y2, z2, w2 = q2._values
        return Quat(
            [
                w1 * z2 + z1 * w2 + x1 * y2 - y1 * x2,
                w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
                w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
                w1 * y2 + y1 * w2 + z1 * x2 - x1 * z2,
            ]
        )

    @staticmethod
    def short_mix(
        q1: Quat,
        q2: Quat,
        time: float,
        linear_cos: float = QUAT_SLERP_LINEAR_COS,
    ) -> Quat:
        """Spherical interpolation along the shortest path.

        Times outside [0, 1] clamp to the endpoints. Nearly parallel inputs
        interpolate linearly.
        """
        if time <= 0.0:
            return q1.copy()
        if time >= 1.0:
            return q2.copy()

        cos: float = Quat.dot(q1, q2)
        q2a: Quat = q2.copy()
        if cos < 0.0:
            # -q2 is the same rotation on the near hemisphere
            q2a = Quat([-val for val in q2._values])
            cos = -cos

        k0: float
        k1: float
        if cos > linear_cos:
            k0 = 1.0 - time
            k1 = time
        else:
            sin: float = math.sqrt(1.0 - cos * cos)
            angle: float = math.atan2(sin, cos)
            one_over_sin: float = 1.0 / sin
            k0 = math.sin((1.0 - time) * angle) * one_over_sin
            k1 = math.sin(time * angle) * one_over_sin

        return Quat([k0 * a + k1 * b for a, b in zip(q1._values, q2a._values)])

    @staticmethod
    def mix(
        q1: Quat,
        q2: Quat,
        time: float,
        half_sin_min: float = QUAT_SLERP_HALF_SIN_MIN,
    ) -> Quat:
        """Spherical linear interpolation between q1 and q2."""
        cos_half_theta: float = Quat.dot(q1, q2)
        if abs(cos_half_theta) >= 1.0:
            return q1.copy()

        half_theta: float = math.acos(cos_half_theta)
        sin_half_theta: float = math.sqrt(1.0 - cos_half_theta * cos_half_theta)
        if abs(sin_half_theta) < half_sin_min:
            return Quat([0.5 * a + 0.5 * b for a, b in zip(q1._values, q2._values)])

        ratio_a: float = math.sin((1.0 - time) * half_theta) / sin_half_theta
        ratio_b: float = math.sin(time * half_theta) / sin_half_theta
        return Quat(
            [a * ratio_a + b * ratio_b for a, b in zip(q1._values, q2._values)]
        )

    @staticmethod
    def from_axis_angle(axis: Vector, angle: float) -> Quat:
        """Return the rotation of angle radians about axis."""
        if axis.rows != 3:
            raise DimensionError("Dimension error: the axis vector must be in 3D")
        half: float = 0.5 * angle
        sin_half: float = math.sin(half)
        return Quat(
            [
                axis.at(0) * sin_half,
                axis.at(1) * sin_half,
                axis.at(2) * sin_half,
                math.cos(half),
            ]
        )


def _require_length(values: Sequence[float], size: int, name: str) -> None:
    if len(values) != size:
        raise DimensionError(
            f"Dimension error: {name} requires {size} components, got {len(values)}"
        )
