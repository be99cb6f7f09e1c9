"""
Immutable 3D vector used as point, direction or set of Euler angles.

Every operation returns a new Vector3. Degenerate arithmetic (division by a
zero scalar or a zero component, normalizing the zero vector) never raises:
it yields IEEE-754 inf / nan which propagate through later operations.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Iterable, Iterator

import numpy as np
from numpy.typing import NDArray

from .quaternion import Quaternion
from .tolerance import EQUALITY_DECIMALS, EQUALITY_TOLERANCE, LEGALITY_TOLERANCE, TEXT_DECIMALS

if TYPE_CHECKING:
    from .sides import Side


def _divide(num: float, den: float) -> float:
    # float64 division gives inf/nan where Python floats would raise
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(num) / np.float64(den))


def _round_half_up(value: float) -> float:
    # compare the fraction instead of adding 0.5, which rounds 0.49999999999999994 up
    v = np.float64(value)
    r = np.floor(v)
    return float(r + 1.0 if v - r >= 0.5 else r)


def _format_component(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    text = f"{value:.{TEXT_DECIMALS}f}".rstrip("0").rstrip(".")
    # -0.0000001 renders as "-0"
    return "0" if text == "-0" else text


@dataclass(frozen=True)
class Vector3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add(self, v: Vector3) -> Vector3:
        return Vector3(self.x + v.x, self.y + v.y, self.z + v.z)

    def add_scalar(self, s: float) -> Vector3:
        return Vector3(self.x + s, self.y + s, self.z + s)

    def subtract(self, v: Vector3) -> Vector3:
        return Vector3(self.x - v.x, self.y - v.y, self.z - v.z)

    def subtract_scalar(self, s: float) -> Vector3:
        return Vector3(self.x - s, self.y - s, self.z - s)

    def multiply(self, v: Vector3) -> Vector3:
        """Component-wise (Hadamard) product."""
        return Vector3(self.x * v.x, self.y * v.y, self.z * v.z)

    def multiply_scalar(self, s: float) -> Vector3:
        return Vector3(self.x * s, self.y * s, self.z * s)

    def divide(self, v: Vector3) -> Vector3:
        """Component-wise quotient; zero components give inf or nan."""
        return Vector3(_divide(self.x, v.x), _divide(self.y, v.y), _divide(self.z, v.z))

    def divide_scalar(self, s: float) -> Vector3:
        return Vector3(_divide(self.x, s), _divide(self.y, s), _divide(self.z, s))

    def absolute(self) -> Vector3:
        return Vector3(abs(self.x), abs(self.y), abs(self.z))

    def apply(self, func: Callable[[float], float]) -> Vector3:
        """Map a unary numeric transform over x, y and z independently."""
        return Vector3(func(self.x), func(self.y), func(self.z))

    def __add__(self, other: Vector3) -> Vector3:
        return self.add(other)

    def __sub__(self, other: Vector3) -> Vector3:
        return self.subtract(other)

    def __mul__(self, scalar: float) -> Vector3:
        return self.multiply_scalar(scalar)

    def __rmul__(self, scalar: float) -> Vector3:
        return self.multiply_scalar(scalar)

    def __truediv__(self, scalar: float) -> Vector3:
        return self.divide_scalar(scalar)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __abs__(self) -> Vector3:
        return self.absolute()

    # -------------------------------------------------------------------------
    # Geometric queries
    # -------------------------------------------------------------------------

    def dot(self, v: Vector3) -> float:
        return (self.x * v.x) + (self.y * v.y) + (self.z * v.z)

    def sqr_length(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.sqr_length())

    def normalize(self) -> Vector3:
        """Unit vector in the same direction. The zero vector gives nan components."""
        return self.divide_scalar(self.length())

    def cross(self, v: Vector3) -> Vector3:
        return Vector3(
            self.y * v.z - self.z * v.y,
            self.z * v.x - self.x * v.z,
            self.x * v.y - self.y * v.x,
        )

    def distance(self, v: Vector3) -> float:
        return self.subtract(v).length()

    def lerp(self, v: Vector3, alpha: float) -> Vector3:
        """Linear blend towards v; alpha outside [0, 1] extrapolates."""
        return Vector3(
            self.x + (v.x - self.x) * alpha,
            self.y + (v.y - self.y) * alpha,
            self.z + (v.z - self.z) * alpha,
        )

    def equals(self, other: object) -> bool:
        """
        Approximate equality: the distance rounded to two decimals is at most 0.01.
        Anything that is not a Vector3 compares unequal.
        """
        if not isinstance(other, Vector3):
            return False
        rounded = float(f"{self.distance(other):.{EQUALITY_DECIMALS}f}")
        return rounded <= EQUALITY_TOLERANCE

    def round(self) -> Vector3:
        """Nearest integer per component, halves rounded towards +inf."""
        return Vector3(_round_half_up(self.x), _round_half_up(self.y), _round_half_up(self.z))

    # -------------------------------------------------------------------------
    # Rotation
    # -------------------------------------------------------------------------

    def to_quat(self) -> Quaternion:
        """Read the components as Euler angles (radians) and convert them."""
        return Quaternion.from_euler(self.x, self.y, self.z)

    def multiply_quat(self, quat: Quaternion) -> Vector3:
        """
        Rotate by a unit quaternion.

        Expanded form of q * v * q^-1, computed straight from the quaternion
        components without building the pure-vector quaternion.
        """
        num = quat.x * 2
        num2 = quat.y * 2
        num3 = quat.z * 2
        xx = quat.x * num
        yy = quat.y * num2
        zz = quat.z * num3
        xy = quat.x * num2
        xz = quat.x * num3
        yz = quat.y * num3
        wx = quat.w * num
        wy = quat.w * num2
        wz = quat.w * num3

        return Vector3(
            (1 - (yy + zz)) * self.x + (xy - wz) * self.y + (xz + wy) * self.z,
            (xy + wz) * self.x + (1 - (xx + zz)) * self.y + (yz - wx) * self.z,
            (xz - wy) * self.x + (yz + wx) * self.y + (1 - (xx + yy)) * self.z,
        )

    def rotate_around(self, pivot: Vector3, angles: Vector3) -> Vector3:
        return self.subtract(pivot).multiply_quat(angles.to_quat()).add(pivot)

    # -------------------------------------------------------------------------
    # Half-space legality
    # -------------------------------------------------------------------------

    def is_legal(self, sides: Iterable[Side], tolerance: float = LEGALITY_TOLERANCE) -> bool:
        """
        True when the point lies inside (or on) every side's half-space.

        A side accepts the half-space its normal points into.
        Plane-plane-plane intersection produces candidates outside the
        convex region; those fail here. Sides are checked in order and the first
        rejection stops the scan. A point sitting exactly on a side's center
        has no facing direction and must be filtered by the caller.
        """
        for side in sides:
            facing = self.subtract(side.center()).normalize()
            if facing.dot(side.normal().normalize()) < -tolerance:
                return False
        return True

    # -------------------------------------------------------------------------
    # Text / array interop
    # -------------------------------------------------------------------------

    def to_str(self) -> str:
        """Space separated components, six decimals at most, trailing zeros trimmed."""
        return " ".join(_format_component(c) for c in (self.x, self.y, self.z))

    def __str__(self) -> str:
        return self.to_str()

    @classmethod
    def from_str(cls, text: str) -> Vector3:
        parts = text.split()
        if len(parts) != 3:
            raise ValueError(f"expected three components, got {len(parts)}: {text!r}")
        try:
            x, y, z = (float(p) for p in parts)
        except ValueError as exc:
            raise ValueError(f"invalid vector text {text!r}") from exc
        return cls(x, y, z)

    def to_array(self) -> NDArray[np.floating]:
        return np.array([self.x, self.y, self.z], dtype=float)

    @classmethod
    def from_array(cls, arr: NDArray[np.floating]) -> Vector3:
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))
