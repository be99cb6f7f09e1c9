"""
Vector kernel, rotations, bounding planes and polyhedron vertices.
"""

from .quaternion import Quaternion
from .vector import Vector3
from .sides import Side, Plane, intersect_planes
from .shapes import (
    SHAPES,
    cube_vertices,
    octa_vertices,
    rhombic_dodecahedron_vertices,
    truncated_cube_vertices,
    sides_from_vertices,
    legal_vertices,
    halfspace_vertices,
    build_sides,
)
from .tolerance import (
    EQUALITY_TOLERANCE,
    EQUALITY_DECIMALS,
    LEGALITY_TOLERANCE,
    TEXT_DECIMALS,
    INTERSECTION_EPS,
)

__all__ = [
    "Quaternion",
    "Vector3",
    "Side",
    "Plane",
    "intersect_planes",
    "SHAPES",
    "cube_vertices",
    "octa_vertices",
    "rhombic_dodecahedron_vertices",
    "truncated_cube_vertices",
    "sides_from_vertices",
    "legal_vertices",
    "halfspace_vertices",
    "build_sides",
    "EQUALITY_TOLERANCE",
    "EQUALITY_DECIMALS",
    "LEGALITY_TOLERANCE",
    "TEXT_DECIMALS",
    "INTERSECTION_EPS",
]
