"""Geometry module for rays, spheres and intersections.

This module provides the ray/object side of the kernel:

Components:
    ray: Ray with position, transform and intersect
    sphere: Unit sphere with an affine transform, ray intersection and
        surface normals
    intersection: Intersection records and the always-sorted
        Intersections list with hit selection

Ray-object intersection follows the pattern:
    xs = ray.intersect(sphere)      # or intersect(ray, sphere)
    visible = xs.hit()              # nearest non-negative t, or None
"""

from .intersection import Intersection, Intersections, hit, intersections
from .ray import Ray
from .sphere import OBJECT_ORIGIN, Sphere, intersect, normal_at

__all__ = [
    "Ray",
    "Sphere",
    "OBJECT_ORIGIN",
    "intersect",
    "normal_at",
    "Intersection",
    "Intersections",
    "intersections",
    "hit",
]
