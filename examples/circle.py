#!/usr/bin/env python3
"""Cast rays at a sphere and draw its silhouette.

A camera at (0, 0, -5) shoots one ray per pixel at a 7x7 wall placed at
z = 10. Pixels whose ray hits the unit sphere are painted red.

Usage:
    python examples/circle.py [options]

Options:
    --size SIZE         Canvas width and height in pixels (default: 100)
    --output OUTPUT     Output file path (default: circle.ppm)
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from raykernel import Canvas, Color, Point, Ray, Sphere, canvas_to_ppm, intersect
from raykernel.logging_config import setup_logging

WALL_SIZE = 7.0
WALL_Z = 10.0
CAMERA = Point(0.0, 0.0, -5.0)


def draw_silhouette(canvas: Canvas, sphere: Sphere, color: Color) -> None:
    """Paint every pixel whose ray hits sphere."""
    size = canvas.width
    pixel_size = WALL_SIZE / size
    half = WALL_SIZE / 2

    for y in range(canvas.height):
        # World y points up, canvas y points down
        world_y = half - pixel_size * y
        for x in range(size):
            world_x = -half + pixel_size * x
            target = Point(world_x, world_y, WALL_Z)
            ray = Ray(CAMERA, target - CAMERA)
            if intersect(ray, sphere).hit() is not None:
                canvas.write_px(x, y, color)


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(description="Draw the silhouette of a sphere.")
    parser.add_argument(
        "--size",
        type=int,
        default=100,
        help="Canvas width and height in pixels (default: 100)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="circle.ppm",
        help="Output file path (default: circle.ppm)",
    )
    return parser.parse_args()


def main() -> int:
    """Main entry point."""
    args = parse_args()
    setup_logging()

    try:
        canvas = Canvas(args.size, args.size)
        draw_silhouette(canvas, Sphere(), Color(1.0, 0.0, 0.0))
        output_file = Path(args.output)
        output_file.write_text(canvas_to_ppm(canvas))
        print(f"Saved to: {output_file.absolute()}")
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
