#!/usr/bin/env python3
"""Render six Phong-shaded spheres in a 3x2 grid.

Each cell casts one normalized ray per pixel from a camera at (0, 0, -5)
toward a wall at z = 10. Hits are shaded with the Phong lighting function;
misses show the wall color. The cells vary the sphere transform, the
material and the light color.

Usage:
    python examples/fancy_sphere.py [options]

Options:
    --cell-size SIZE    Width and height of each cell in pixels (default: 100)
    --output OUTPUT     Output file path (default: fancy_sphere.ppm)
    --verbose           Show kernel debug logging
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import math
import sys
import time
from pathlib import Path
from typing import NamedTuple

from raykernel import (
    WHITE,
    Canvas,
    Color,
    Material,
    Matrix,
    Point,
    PointLight,
    Ray,
    Sphere,
    canvas_to_ppm,
    intersect,
    lighting,
    normal_at,
)
from raykernel.logging_config import setup_logging

WALL_SIZE = 7.0
WALL_Z = 10.0
CAMERA = Point(0.0, 0.0, -5.0)
LIGHT_POSITION = Point(-10.0, 10.0, -10.0)
WALL_COLORS = (Color(0.7, 0.7, 0.7), Color(0.8, 0.8, 0.8))


class Scenario(NamedTuple):
    column: int
    row: int
    wall_color: Color
    light: PointLight
    sphere: Sphere


def build_scenarios() -> list[Scenario]:
    """Return the six grid cells, left to right and top to bottom."""
    base = Material()
    white_light = PointLight(LIGHT_POSITION, WHITE)
    squashed = Matrix.identity().scale(0.5, 1.0, 1.0)
    return [
        Scenario(
            0, 0, WALL_COLORS[0], white_light,
            Sphere(material=dataclasses.replace(base, color=Color(1.0, 0.2, 1.0))),
        ),
        Scenario(
            1, 0, WALL_COLORS[1], white_light,
            Sphere(Matrix.scaling(1.0, 0.5, 1.0), dataclasses.replace(base, color=Color(0.2, 0.2, 1.0))),
        ),
        Scenario(
            2, 0, WALL_COLORS[0], PointLight(LIGHT_POSITION, Color(1.0, 0.2, 0.4)),
            Sphere(Matrix.scaling(0.5, 1.0, 1.0), dataclasses.replace(base, color=Color(0.2, 1.0, 0.2))),
        ),
        Scenario(
            0, 1, WALL_COLORS[1], white_light,
            Sphere(
                squashed.rotate_z(math.pi / 4),
                dataclasses.replace(base, color=Color(1.0, 1.0, 0.2), specular=0.3, shininess=50.0),
            ),
        ),
        Scenario(
            1, 1, WALL_COLORS[1], white_light,
            Sphere(
                squashed.rotate_z(math.pi / 4),
                dataclasses.replace(base, color=Color(1.0, 1.0, 0.2), shininess=50.0),
            ),
        ),
        Scenario(
            2, 1, WALL_COLORS[0], white_light,
            Sphere(
                squashed.shear(1.0, 0.0, 0.0, 0.0, 0.0, 0.0),
                dataclasses.replace(base, color=Color(0.2, 1.0, 1.0), ambient=0.6, diffuse=0.4),
            ),
        ),
    ]


def shade(ray: Ray, scenario: Scenario) -> Color:
    """Return the color seen along ray: the lit sphere or the wall."""
    hit = intersect(ray, scenario.sphere).hit()
    if hit is None:
        return scenario.wall_color
    point = ray.position(hit.t)
    normal = normal_at(point, hit.object)
    eye = -ray.direction
    return lighting(hit.object.material, scenario.light, point, eye, normal)


def draw_scenario(canvas: Canvas, scenario: Scenario, cell_size: int) -> None:
    """Render one scenario into its grid cell."""
    pixel_size = WALL_SIZE / cell_size
    half = WALL_SIZE / 2
    start_x = scenario.column * cell_size
    start_y = scenario.row * cell_size

    for y in range(cell_size):
        world_y = half - pixel_size * y
        for x in range(cell_size):
            world_x = -half + pixel_size * x
            target = Point(world_x, world_y, WALL_Z)
            ray = Ray(CAMERA, (target - CAMERA).normalize())
            canvas.write_px(start_x + x, start_y + y, shade(ray, scenario))


def render_fancy_spheres(cell_size: int = 100, output_path: str = "fancy_sphere.ppm") -> Path:
    """Render all six scenarios and save the canvas.

    Args:
        cell_size: Width and height of each grid cell in pixels.
        output_path: Output file path (PPM).

    Returns:
        Path to the saved image file.
    """
    canvas = Canvas(cell_size * 3, cell_size * 2)
    start_time = time.time()

    for scenario in build_scenarios():
        print(f"Rendering cell ({scenario.column}, {scenario.row})...")
        draw_scenario(canvas, scenario, cell_size)

    output_file = Path(output_path)
    output_file.write_text(canvas_to_ppm(canvas))
    print(f"Saved to: {output_file.absolute()}")
    print(f"Total time: {time.time() - start_time:.2f}s")
    return output_file


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render six Phong-shaded spheres.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--cell-size",
        type=int,
        default=100,
        help="Width and height of each cell in pixels (default: 100)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="fancy_sphere.ppm",
        help="Output file path (default: fancy_sphere.ppm)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show kernel debug logging",
    )
    return parser.parse_args()


def main() -> int:
    """Main entry point."""
    args = parse_args()
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        render_fancy_spheres(cell_size=args.cell_size, output_path=args.output)
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
