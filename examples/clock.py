#!/usr/bin/env python3
"""Draw the twelve hour marks of a clock face.

Each mark starts at the origin, is pushed up to 12 o'clock, rotated into
place, scaled to the clock radius and moved to the canvas center, all with
chained transform builder calls.

Usage:
    python examples/clock.py [options]

Options:
    --size SIZE         Canvas width and height in pixels (default: 512)
    --output OUTPUT     Output file path (default: clock.ppm)
"""

from __future__ import annotations

import argparse
import math
import sys
from pathlib import Path

from raykernel import WHITE, Canvas, Matrix, Point, canvas_to_ppm
from raykernel.logging_config import setup_logging


def hour_marks(size: int) -> list[Point]:
    """Return the canvas position of each hour mark, starting at 12."""
    radius = size / 4
    center = size / 2
    marks = []
    for hour in range(12):
        m = (
            Matrix.identity()
            .translate(0.0, 1.0, 0.0)
            .rotate_z(-math.pi / 6 * hour)
            .scale(radius, radius, 1.0)
            .translate(center, center, 0.0)
        )
        marks.append(m @ Point(0.0, 0.0, 0.0))
    return marks


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(description="Draw a clock face.")
    parser.add_argument(
        "--size",
        type=int,
        default=512,
        help="Canvas width and height in pixels (default: 512)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="clock.ppm",
        help="Output file path (default: clock.ppm)",
    )
    return parser.parse_args()


def main() -> int:
    """Main entry point."""
    args = parse_args()
    setup_logging()

    try:
        canvas = Canvas(args.size, args.size)
        for mark in hour_marks(args.size):
            canvas.write_px(round(mark.x), round(mark.y), WHITE)
        output_file = Path(args.output)
        output_file.write_text(canvas_to_ppm(canvas))
        print(f"Saved to: {output_file.absolute()}")
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
