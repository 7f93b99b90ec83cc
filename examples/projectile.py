#!/usr/bin/env python3
"""Fire a projectile and track it until it hits the ground.

This script exercises the point/vector algebra: each tick moves the
projectile by its velocity and bends the velocity by gravity and wind. It
prints every position, and with --plot also draws the trajectory onto a
900x550 canvas and saves it as PPM.

Usage:
    python examples/projectile.py [options]

Options:
    --plot              Draw the trajectory and save it as PPM
    --output OUTPUT     Output file path (default: projectile.ppm)
    --verbose           Show kernel debug logging

Example:
    python examples/projectile.py --plot --output trajectory.ppm
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from raykernel import Canvas, Color, Point, Vector, canvas_to_ppm
from raykernel.logging_config import setup_logging


@dataclass(frozen=True)
class Projectile:
    position: Point
    velocity: Vector


@dataclass(frozen=True)
class Environment:
    gravity: Vector
    wind: Vector


def tick(env: Environment, proj: Projectile) -> Projectile:
    """Advance the projectile by one time step."""
    return Projectile(
        proj.position + proj.velocity,
        proj.velocity + env.gravity + env.wind,
    )


def fly(env: Environment, proj: Projectile) -> list[Projectile]:
    """Return every state from launch until the projectile drops to y <= 0."""
    states = [proj]
    while proj.position.y > 0.0:
        proj = tick(env, proj)
        states.append(proj)
    return states


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Track a projectile under gravity and wind.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--plot",
        action="store_true",
        help="Draw the trajectory and save it as PPM",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="projectile.ppm",
        help="Output file path (default: projectile.ppm)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show kernel debug logging",
    )
    return parser.parse_args()


def print_trajectory() -> int:
    """Print the flight of a slow projectile and return the tick count."""
    env = Environment(Vector(0.0, -0.1, 0.0), Vector(-0.01, 0.0, 0.0))
    states = fly(env, Projectile(Point(0.0, 1.0, 0.0), Vector(1.0, 1.0, 0.0).normalize()))
    for state in states:
        print(state)
    ticks = len(states) - 1
    print(f"Ticks: {ticks}")
    return ticks


def plot_trajectory(output_path: str) -> Path:
    """Draw a fast projectile's flight onto a canvas and save it.

    Args:
        output_path: Output file path (PPM).

    Returns:
        Path to the saved image file.
    """
    env = Environment(Vector(0.0, -0.1, 0.0), Vector(-0.01, 0.0, 0.0))
    start = Projectile(Point(0.0, 1.0, 0.0), Vector(1.0, 1.8, 0.0).normalize() * 11.25)
    canvas = Canvas(900, 550)
    red = Color(1.0, 0.0, 0.0)

    # Canvas y grows downward, so flip the height
    for state in fly(env, start)[:-1]:
        x = round(state.position.x)
        y = canvas.height - round(state.position.y)
        if 0 <= x < canvas.width and 0 <= y < canvas.height:
            canvas.write_px(x, y, red)

    output_file = Path(output_path)
    output_file.write_text(canvas_to_ppm(canvas))
    print(f"Saved to: {output_file.absolute()}")
    return output_file


def main() -> int:
    """Main entry point."""
    args = parse_args()
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        print_trajectory()
        if args.plot:
            plot_trajectory(args.output)
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
