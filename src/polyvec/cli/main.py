"""
Unified CLI entry point for the polyvec tools.
"""

import argparse
import logging
import sys

from . import legal
from . import rotate
from . import vertices


def setup_logging(level_str: str):
    level = getattr(logging, level_str.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="polyvec", description="Convex polyhedra from bounding planes")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Set logging level",
    )

    subparsers = parser.add_subparsers(dest="command", required=True, help="Sub-commands")

    cmd_vertices = subparsers.add_parser("vertices", help="Legal vertices of a shape")
    vertices.register_arguments(cmd_vertices)

    cmd_rotate = subparsers.add_parser("rotate", help="Rotate a point about a pivot")
    rotate.register_arguments(cmd_rotate)

    cmd_legal = subparsers.add_parser("legal", help="Test a point against the sides of a shape")
    legal.register_arguments(cmd_legal)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        if args.command == "vertices":
            return vertices.run(args)
        if args.command == "rotate":
            return rotate.run(args)
        if args.command == "legal":
            return legal.run(args)
    except ValueError as exc:
        parser.error(str(exc))
    parser.print_help()
    return 2


if __name__ == "__main__":
    sys.exit(main())
