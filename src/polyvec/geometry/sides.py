"""
Bounding planes of a convex region and their intersection.

A side's normal points towards the half-space it accepts, i.e. into the
region: a point p is accepted when (p - center) . normal is not negative
(within tolerance), see Vector3.is_legal.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

from .tolerance import INTERSECTION_EPS
from .vector import Vector3


class Side(Protocol):
    def center(self) -> Vector3: ...

    def normal(self) -> Vector3: ...


@dataclass(frozen=True)
class Plane:
    point: Vector3
    direction: Vector3  # into the accepted half-space, any length

    @classmethod
    def from_equation(cls, a: float, b: float, c: float, d: float) -> "Plane":
        """
        Boundary of the half-space a*x + b*y + c*z + d <= 0.

        This is the layout of scipy's ConvexHull.equations rows, whose
        (a, b, c) points out of the hull; the stored direction is flipped.
        """
        n = Vector3(float(a), float(b), float(c))
        foot = n.multiply_scalar(-float(d) / n.sqr_length())
        return cls(point=foot, direction=-n)

    def center(self) -> Vector3:
        return self.point

    def normal(self) -> Vector3:
        return self.direction

    def offset(self) -> float:
        """Signed distance of the plane from the origin along the unit normal."""
        return self.direction.normalize().dot(self.point)

    def depth(self, p: Vector3) -> float:
        """How far p lies inside the accepted half-space; negative outside."""
        return p.subtract(self.point).dot(self.direction.normalize())


def intersect_planes(a: Side, b: Side, c: Side) -> Optional[Vector3]:
    """
    Common point of three planes, or None when two of them are parallel
    or all three share a line.
    """
    n1 = a.normal().normalize()
    n2 = b.normal().normalize()
    n3 = c.normal().normalize()
    n23 = n2.cross(n3)
    det = n1.dot(n23)
    if abs(det) < INTERSECTION_EPS:
        return None
    d1 = n1.dot(a.center())
    d2 = n2.dot(b.center())
    d3 = n3.dot(c.center())
    n31 = n3.cross(n1)
    n12 = n1.cross(n2)
    return n23.multiply_scalar(d1).add(n31.multiply_scalar(d2)).add(n12.multiply_scalar(d3)).divide_scalar(det)
