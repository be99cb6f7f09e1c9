"""
CLI handler for testing a point against the bounding planes of a shape.
"""

import argparse
import logging

from ..geometry.shapes import build_sides
from ..geometry.tolerance import LEGALITY_TOLERANCE
from .common import add_shape_arguments, vector_arg

logger = logging.getLogger(__name__)


def register_arguments(parser: argparse.ArgumentParser):
    add_shape_arguments(parser)
    parser.add_argument("--point", type=vector_arg, required=True, help='Point as "x y z"')
    parser.add_argument("--tolerance", type=float, default=LEGALITY_TOLERANCE)


def run(args: argparse.Namespace) -> int:
    sides = build_sides(args.shape, args.size, args.truncation)
    legal = args.point.is_legal(sides, tolerance=args.tolerance)
    logger.info("%s against %d sides of %s: %s", args.point, len(sides), args.shape, "legal" if legal else "illegal")
    print("legal" if legal else "illegal")
    return 0 if legal else 1
