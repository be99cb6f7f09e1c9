"""
Vertex sets and bounding planes for convex polyhedra, and legal vertex
enumeration by plane-plane-plane intersection.
"""

from __future__ import annotations

import logging
import math
from itertools import combinations, permutations, product
from typing import List, Sequence

import numpy as np
from numpy.typing import NDArray
from scipy.spatial import ConvexHull, HalfspaceIntersection

from .sides import Plane, Side, intersect_planes
from .tolerance import EQUALITY_TOLERANCE
from .vector import Vector3

logger = logging.getLogger(__name__)

SHAPES = ("cube", "octa", "rd", "tcube")


def cube_vertices(edge_length: float = 1.0) -> NDArray[np.floating]:
    """Generate vertices for a cube centered at origin."""
    half = edge_length / 2.0
    pts = [(sx * half, sy * half, sz * half) for sx, sy, sz in product((-1.0, 1.0), repeat=3)]
    return np.array(pts, dtype=float)


def octa_vertices(edge_length: float = 1.0) -> NDArray[np.floating]:
    """Generate vertices for an octahedron."""
    # vertices on the axes at distance r give edge length sqrt(2)*r
    r = edge_length / math.sqrt(2.0)
    return np.array(
        [
            (r, 0.0, 0.0), (-r, 0.0, 0.0),
            (0.0, r, 0.0), (0.0, -r, 0.0),
            (0.0, 0.0, r), (0.0, 0.0, -r),
        ],
        dtype=float,
    )


def rhombic_dodecahedron_vertices(diameter: float = 1.0) -> NDArray[np.floating]:
    """
    Generate vertices for a rhombic dodecahedron.
    Diameter is the distance between opposite vertices (axis-aligned ones).
    """
    half = diameter / 2.0
    tips = np.vstack([half * np.eye(3), -half * np.eye(3)])
    corners = (half / 2.0) * np.array(list(product((-1.0, 1.0), repeat=3)), dtype=float)
    return np.vstack([tips, corners])


def truncated_cube_vertices(edge_length: float = 1.0, truncation_ratio: float = math.sqrt(2.0) - 1.0) -> NDArray[np.floating]:
    """
    Generate vertices for a truncated cube from sign permutations of
    (1, 1, truncation_ratio). sqrt(2) - 1 gives the Archimedean solid.
    """
    base_perms = set(permutations((1.0, 1.0, truncation_ratio)))
    coords = set()
    for perm in base_perms:
        for sx, sy, sz in product((-1.0, 1.0), repeat=3):
            coords.add((sx * perm[0], sy * perm[1], sz * perm[2]))
    scale = edge_length / math.sqrt(8.0)
    return np.array(sorted((scale * x, scale * y, scale * z) for x, y, z in coords), dtype=float)


def sides_from_vertices(vertices: NDArray[np.floating]) -> List[Plane]:
    """
    Bounding planes of the convex hull of `vertices`.

    The hull is triangulated, so coplanar facets are merged into one plane.
    """
    hull = ConvexHull(np.asarray(vertices, dtype=float))
    sides: List[Plane] = []
    for eq in hull.equations:
        plane = Plane.from_equation(*eq)
        unit = plane.direction.normalize()
        duplicate = any(
            unit.equals(s.direction.normalize()) and abs(s.offset() - plane.offset()) <= EQUALITY_TOLERANCE
            for s in sides
        )
        if not duplicate:
            sides.append(plane)
    logger.debug("%d hull facets merged into %d sides", len(hull.equations), len(sides))
    return sides


def legal_vertices(sides: Sequence[Side]) -> List[Vector3]:
    """
    Vertices of the convex region bounded by `sides`.

    Every triple of planes is intersected; intersections outside any side are
    dropped and near-duplicates collapsed, keeping the first one found.
    """
    found: List[Vector3] = []
    rejected = 0
    for a, b, c in combinations(sides, 3):
        point = intersect_planes(a, b, c)
        if point is None:
            continue
        if not point.is_legal(sides):
            rejected += 1
            continue
        if any(point.equals(v) for v in found):
            continue
        found.append(point)
    logger.debug("%d legal vertices, %d illegal candidates discarded", len(found), rejected)
    return found


def halfspace_vertices(sides: Sequence[Side], interior: Vector3 = Vector3()) -> NDArray[np.floating]:
    """
    Vertices of the same region computed by scipy's HalfspaceIntersection.
    `interior` must lie strictly inside every side.
    """
    rows = []
    for side in sides:
        outward = -side.normal().normalize()
        rows.append([outward.x, outward.y, outward.z, -outward.dot(side.center())])
    hs = HalfspaceIntersection(np.array(rows, dtype=float), interior.to_array())
    # vertices shared by more than three planes come back once per facet
    pts = np.unique(np.round(hs.intersections, 9), axis=0)
    hull = ConvexHull(pts)
    return hull.points[hull.vertices]


def build_sides(name: str, size: float = 1.0, truncation: float = math.sqrt(2.0) - 1.0) -> List[Plane]:
    name = name.lower()
    if name == "cube":
        verts = cube_vertices(size)
    elif name == "octa":
        verts = octa_vertices(size)
    elif name == "rd":
        verts = rhombic_dodecahedron_vertices(size)
    elif name == "tcube":
        verts = truncated_cube_vertices(size, truncation)
    else:
        raise ValueError(f"Unknown shape: {name}")
    return sides_from_vertices(verts)
