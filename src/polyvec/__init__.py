"""
polyvec: immutable 3D vectors and half-space geometry for convex polyhedra.
"""

from .geometry import Plane, Quaternion, Side, Vector3

__version__ = "0.1.0"

__all__ = ["Plane", "Quaternion", "Side", "Vector3", "__version__"]
