"""
CLI handler for rotating a point about a pivot by Euler angles.
"""

import argparse
import logging

from ..geometry.vector import Vector3
from .common import vector_arg

logger = logging.getLogger(__name__)


def register_arguments(parser: argparse.ArgumentParser):
    parser.add_argument("--point", type=vector_arg, required=True, help='Point as "x y z"')
    parser.add_argument("--pivot", type=vector_arg, default=Vector3(), help='Pivot as "x y z" (default origin)')
    parser.add_argument("--angles", type=vector_arg, required=True, help='Euler angles in radians as "x y z"')


def run(args: argparse.Namespace) -> int:
    quat = args.angles.to_quat()
    logger.debug("quaternion x=%.6f y=%.6f z=%.6f w=%.6f", quat.x, quat.y, quat.z, quat.w)
    rotated = args.point.rotate_around(args.pivot, args.angles)
    print(rotated.to_str())
    return 0
