"""
Tolerances shared by the vector kernel and the shape builders.
"""

from __future__ import annotations

# Two vectors are equal when their distance, rounded to EQUALITY_DECIMALS,
# does not exceed EQUALITY_TOLERANCE. Absorbs drift from repeated plane intersections.
EQUALITY_TOLERANCE = 0.01
EQUALITY_DECIMALS = 2

# A plane rejects a point when facing . normal drops below -LEGALITY_TOLERANCE.
LEGALITY_TOLERANCE = 0.01

# Decimals rendered per component by Vector3.to_str.
TEXT_DECIMALS = 6

# Triple products below this are treated as planes without a unique intersection.
INTERSECTION_EPS = 1e-9
