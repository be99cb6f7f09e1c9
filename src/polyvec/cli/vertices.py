"""
CLI handler for enumerating the legal vertices of a convex shape.
"""

import argparse
import logging
import os

import numpy as np
from scipy.spatial import QhullError

from ..geometry.shapes import build_sides, halfspace_vertices, legal_vertices
from ..geometry.vector import Vector3
from .common import add_shape_arguments, vector_arg

logger = logging.getLogger(__name__)


def register_arguments(parser: argparse.ArgumentParser):
    add_shape_arguments(parser)
    parser.add_argument("--rotate", type=vector_arg, default=None, help='Euler angles in radians as "x y z"')
    parser.add_argument("--pivot", type=vector_arg, default=Vector3(), help='Rotation pivot as "x y z"')
    parser.add_argument("--round", action="store_true", help="Round vertices to integers")
    parser.add_argument("--verify", action="store_true", help="Cross-check against scipy HalfspaceIntersection")
    parser.add_argument("--out", type=str, default=None, help="Write one vertex per line")
    parser.add_argument("--png", type=str, default=None, help="Output PNG path")
    parser.add_argument("--html", type=str, default=None, help="Output Plotly HTML path")


def run(args: argparse.Namespace) -> int:
    sides = build_sides(args.shape, args.size, args.truncation)
    verts = legal_vertices(sides)
    logger.info("%s: %d sides, %d legal vertices", args.shape, len(sides), len(verts))

    if args.verify:
        reference = halfspace_vertices(sides)
        if len(reference) != len(verts):
            logger.warning("HalfspaceIntersection found %d vertices, expected %d", len(reference), len(verts))
        else:
            logger.info("HalfspaceIntersection agrees (%d vertices)", len(reference))

    if args.rotate is not None:
        verts = [v.rotate_around(args.pivot, args.rotate) for v in verts]
    if args.round:
        verts = [v.round() for v in verts]

    lines = [v.to_str() for v in verts]
    for line in lines:
        print(line)

    if args.out:
        out_dir = os.path.dirname(args.out)
        if out_dir:
            os.makedirs(out_dir, exist_ok=True)
        with open(args.out, "w", encoding="utf-8") as fh:
            fh.write("\n".join(lines) + "\n")
        logger.info("Vertices written → %s", args.out)

    if args.png or args.html:
        # imported lazily, plotting backends are slow to load
        from ..utils import visualization

        # rounding can merge vertices
        points = np.unique(np.stack([v.to_array() for v in verts], axis=0), axis=0)
        try:
            if args.png:
                visualization.render_png(points, args.png, title=args.shape)
                logger.info("Plot saved → %s", args.png)
            if args.html:
                visualization.render_html(points, args.html, title=args.shape)
                logger.info("Plot saved → %s", args.html)
        except QhullError:
            logger.warning("%d distinct vertices do not span a solid, plot skipped", len(points))
    return 0
