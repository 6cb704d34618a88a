import argparse
import json

import numpy as np

from .matrix import Matrix


def grid(text):
    """Parse a JSON list of rows into a Matrix."""
    try:
        rows = json.loads(text)
    except json.JSONDecodeError as e:
        raise argparse.ArgumentTypeError(f"not valid JSON: {e}")

    if not isinstance(rows, list) or not all(isinstance(row, list) for row in rows):
        raise argparse.ArgumentTypeError("grid must be a JSON list of rows")
    if len({len(row) for row in rows}) > 1:
        raise argparse.ArgumentTypeError("rows must all have the same length")

    for row in rows:
        for value in row:
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
                raise argparse.ArgumentTypeError(
                    f"values must be integers in 0..255, got {value!r}"
                )

    height = len(rows)
    width = len(rows[0]) if rows else 0
    return Matrix.from_array(np.array(rows, dtype=np.uint8).reshape(height, width))


def build_parser():
    parser = argparse.ArgumentParser(
        prog="matrix-flipper", description="Flip a uint8 matrix along one or both axes"
    )
    parser.add_argument(
        "--grid",
        type=grid,
        required=True,
        help="Matrix as a JSON list of rows, e.g. '[[1,2,3],[4,5,6]]'",
    )
    parser.add_argument(
        "--axis",
        choices=["h", "v", "both"],
        default="h",
        help="h reverses columns, v reverses rows, both prints each flip",
    )
    parser.add_argument(
        "--no-color", action="store_true", help="Print the matrices without colors"
    )
    return parser


def parse_args(argv=None):
    args = build_parser().parse_args(argv)

    return {
        "grid": args.grid,
        "axis": args.axis,
        "color": not args.no_color,
    }
