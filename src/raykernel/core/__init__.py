"""Core numeric module.

This module contains the value types every other part of the kernel is
built on:

Components:
    floats: Epsilon-tolerant float comparison
    tuples: Homogeneous points and vectors with kind-checked arithmetic
    color: Unclamped RGB colors
    matrix: Square matrices (orders 1-4), inversion and affine builders

All types are immutable values compared with the package-wide EPSILON.
"""

from .color import BLACK, WHITE, Color
from .floats import EPSILON, float_eq
from .matrix import INVERSE_TOLERANCE, SUPPORTED_ORDERS, Matrix
from .tuples import Point, Tuple4, Vector, point, vector

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
    "INVERSE_TOLERANCE",
    "SUPPORTED_ORDERS",
]
