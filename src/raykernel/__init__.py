"""Geometric-optics ray tracing kernel.

This package provides the building blocks for a simple Whitted-style
renderer, with support for:
- Homogeneous points and vectors with kind-checked arithmetic
- Square matrices (orders 1-4) with cofactor inversion and affine builders
- Transform-aware ray/sphere intersection and surface normals
- Phong illumination from point lights
- A pixel canvas encoded as plain-text PPM

Subpackages:
    core: Float equality, tuples, colors and matrices
    geometry: Rays, spheres and sorted intersection lists
    materials: Phong material and the lighting function
    scene: Light sources
    image: Canvas and PPM encoding

The kernel is pure computation: it performs no I/O and keeps no global
state. Library logging goes to the "raykernel" logger, which is silent
unless the application configures it (see logging_config.setup_logging).
"""

import logging

from .core import BLACK, EPSILON, WHITE, Color, Matrix, Point, Tuple4, Vector, float_eq, point, vector
from .errors import (
    ContractViolation,
    NumericDegenerate,
    OutOfRange,
    RayKernelError,
    SingularMatrix,
    WrongKind,
)
from .geometry import Intersection, Intersections, Ray, Sphere, hit, intersect, intersections, normal_at
from .image import Canvas, canvas_to_ppm
from .materials import Material, lighting
from .scene import PointLight

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "EPSILON",
    "float_eq",
    "Tuple4",
    "Point",
    "Vector",
    "point",
    "vector",
    "Color",
    "BLACK",
    "WHITE",
    "Matrix",
    "Ray",
    "Sphere",
    "Intersection",
    "Intersections",
    "intersections",
    "intersect",
    "normal_at",
    "hit",
    "Material",
    "PointLight",
    "lighting",
    "Canvas",
    "canvas_to_ppm",
    "RayKernelError",
    "ContractViolation",
    "OutOfRange",
    "WrongKind",
    "SingularMatrix",
    "NumericDegenerate",
]
