"""
Argument helpers shared by the sub-commands.
"""

import argparse

from ..geometry.shapes import SHAPES
from ..geometry.vector import Vector3


def vector_arg(text: str) -> Vector3:
    try:
        return Vector3.from_str(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def add_shape_arguments(parser: argparse.ArgumentParser):
    parser.add_argument("--shape", choices=SHAPES, required=True)
    parser.add_argument("--size", type=float, default=1.0, help="Edge length (cube, octa, tcube) or diameter (rd)")
    parser.add_argument("--truncation", type=float, default=2.0 ** 0.5 - 1.0, help="tcube truncation ratio")
