"""
Unit quaternion produced from Euler angles and consumed by Vector3.multiply_quat.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class Quaternion:
    """
    Rotation quaternion with vector part (x, y, z) and scalar part w.

    Only built by `from_euler` and only applied by `Vector3.multiply_quat`;
    there is no composition or inversion.
    """

    x: float
    y: float
    z: float
    w: float

    @classmethod
    def from_euler(cls, x: float, y: float, z: float) -> "Quaternion":
        """
        Half-angle product of Euler angles (radians).

        The y angle is the primary (yaw-like) factor, x the secondary and z the
        tertiary one. Downstream placement depends on this exact combination,
        so a lone y angle turns about the x axis and a lone x angle about y.
        """
        c1 = math.cos(y / 2)
        c2 = math.cos(x / 2)
        c3 = math.cos(z / 2)

        s1 = math.sin(y / 2)
        s2 = math.sin(x / 2)
        s3 = math.sin(z / 2)

        return cls(
            x=s1 * c2 * c3 + c1 * s2 * s3,
            y=c1 * s2 * c3 - s1 * c2 * s3,
            z=c1 * c2 * s3 + s1 * s2 * c3,
            w=c1 * c2 * c3 - s1 * s2 * s3,
        )

    def norm(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w)

    def as_array(self) -> NDArray[np.floating]:
        """Scalar-first [w, x, y, z] layout."""
        return np.array([self.w, self.x, self.y, self.z], dtype=float)
