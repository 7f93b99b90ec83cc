"""Homogeneous 4-component tuples: points and vectors.

A tuple (x, y, z, w) is a Point when w == 1 and a Vector when w == 0. Both
kinds share one representation so that a single 4x4 matrix can transform
either, but only the type-correct arithmetic is exposed:

    point  + vector -> point        vector + vector -> vector
    point  - point  -> vector       point  - vector -> point
    vector - vector -> vector       -vector, vector * s, vector / s

Anything else (point + point, -point, point * s, cross on a point, ...)
raises WrongKind. Values are immutable and compare with the package-wide
epsilon tolerance.

Example:
    >>> from raykernel.core.tuples import Point, Vector
    >>> p = Point(1.0, 2.0, 3.0)
    >>> v = Vector(0.0, 0.0, 1.0)
    >>> p + v * 2.0
    Point(1.0, 2.0, 5.0)
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Iterator

import numpy as np
import numpy.typing as npt

from raykernel.core.floats import float_eq
from raykernel.errors import NumericDegenerate, OutOfRange, WrongKind


class Tuple4:
    """An immutable homogeneous tuple (x, y, z, w).

    Most code should construct Point or Vector directly. A raw Tuple4 only
    appears as the result of a general matrix product whose w is neither
    0 nor 1.

    Attributes:
        x: First spatial component.
        y: Second spatial component.
        z: Third spatial component.
        w: Homogeneous component (1 for points, 0 for vectors).
    """

    __slots__ = ("_x", "_y", "_z", "_w")

    def __init__(self, x: float, y: float, z: float, w: float) -> None:
        self._x = float(x)
        self._y = float(y)
        self._z = float(z)
        self._w = float(w)

    @classmethod
    def from_components(cls, x: float, y: float, z: float, w: float) -> Tuple4:
        """Build the most specific tuple for the given components.

        Returns a Point when w is within EPSILON of 1, a Vector when w is
        within EPSILON of 0, and a raw Tuple4 otherwise.
        """
        if float_eq(w, 1.0):
            return Point(x, y, z)
        if float_eq(w, 0.0):
            return Vector(x, y, z)
        return Tuple4(x, y, z, w)

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def z(self) -> float:
        return self._z

    @property
    def w(self) -> float:
        return self._w

    def is_point(self) -> bool:
        return float_eq(self._w, 1.0)

    def is_vector(self) -> bool:
        return float_eq(self._w, 0.0)

    def _kind(self) -> str:
        if self.is_point():
            return "point"
        if self.is_vector():
            return "vector"
        return "tuple"

    def _require_vector(self, operation: str) -> None:
        if not self.is_vector():
            raise WrongKind(f"{operation} requires a vector, got a {self._kind()}: {self!r}")

    # -------------------------------------------------------------------------
    # Sequence protocol
    # -------------------------------------------------------------------------

    def __iter__(self) -> Iterator[float]:
        yield self._x
        yield self._y
        yield self._z
        yield self._w

    def __len__(self) -> int:
        return 4

    def __getitem__(self, index: int) -> float:
        if index in (0, -4):
            return self._x
        if index in (1, -3):
            return self._y
        if index in (2, -2):
            return self._z
        if index in (3, -1):
            return self._w
        raise OutOfRange(f"Tuple index {index} out of range for 4 components")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple4):
            return NotImplemented
        return all(float_eq(a, b) for a, b in zip(self, other))

    # Tolerant equality cannot be made consistent with hashing.
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Tuple4({self._x!r}, {self._y!r}, {self._z!r}, {self._w!r})"

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> Tuple4:
        if not isinstance(other, Tuple4):
            return NotImplemented
        if other.is_vector():
            if self.is_point():
                return Point(self._x + other._x, self._y + other._y, self._z + other._z)
            if self.is_vector():
                return Vector(self._x + other._x, self._y + other._y, self._z + other._z)
        raise WrongKind(f"Cannot add a {other._kind()} to a {self._kind()}")

    def __sub__(self, other: object) -> Tuple4:
        if not isinstance(other, Tuple4):
            return NotImplemented
        dx, dy, dz = self._x - other._x, self._y - other._y, self._z - other._z
        if self.is_point() and other.is_point():
            return Vector(dx, dy, dz)
        if self.is_point() and other.is_vector():
            return Point(dx, dy, dz)
        if self.is_vector() and other.is_vector():
            return Vector(dx, dy, dz)
        raise WrongKind(f"Cannot subtract a {other._kind()} from a {self._kind()}")

    def __neg__(self) -> Vector:
        self._require_vector("Negation")
        return Vector(-self._x, -self._y, -self._z)

    def __mul__(self, scalar: object) -> Vector:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        self._require_vector("Scalar multiplication")
        s = float(scalar)
        return Vector(self._x * s, self._y * s, self._z * s)

    __rmul__ = __mul__

    def __truediv__(self, scalar: object) -> Vector:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        self._require_vector("Scalar division")
        s = float(scalar)
        if s == 0.0:
            raise NumericDegenerate(f"Cannot divide {self!r} by zero")
        return Vector(self._x / s, self._y / s, self._z / s)

    # -------------------------------------------------------------------------
    # Vector operations
    # -------------------------------------------------------------------------

    def dot(self, other: Tuple4) -> float:
        """Dot product over all four components."""
        if not isinstance(other, Tuple4):
            raise WrongKind(f"dot() requires a tuple, got {type(other).__name__}")
        return self._x * other._x + self._y * other._y + self._z * other._z + self._w * other._w

    def magnitude(self) -> float:
        """Euclidean length of the spatial part of a vector.

        Raises:
            WrongKind: If called on a point.
        """
        self._require_vector("magnitude()")
        return math.sqrt(self._x * self._x + self._y * self._y + self._z * self._z)

    def normalize(self) -> Vector:
        """Return a unit vector in the same direction.

        Raises:
            WrongKind: If called on a point.
            NumericDegenerate: If the vector has zero (or non-finite) length.
        """
        length = self.magnitude()
        if length == 0.0 or not math.isfinite(length):
            raise NumericDegenerate(f"Cannot normalize {self!r} with magnitude {length!r}")
        return Vector(self._x / length, self._y / length, self._z / length)

    def cross(self, other: Tuple4) -> Vector:
        """Cross product of two vectors (spatial components only).

        Raises:
            WrongKind: If either operand is not a vector.
        """
        self._require_vector("cross()")
        if not isinstance(other, Tuple4):
            raise WrongKind(f"cross() requires a vector, got {type(other).__name__}")
        other._require_vector("cross()")
        return Vector(
            self._y * other._z - self._z * other._y,
            self._z * other._x - self._x * other._z,
            self._x * other._y - self._y * other._x,
        )

    def reflect(self, normal: Tuple4) -> Vector:
        """Reflect this vector about a normal: v - 2 (v . n) n.

        The normal should be unit length for a length-preserving reflection.
        """
        self._require_vector("reflect()")
        normal._require_vector("reflect()")
        return self - normal * (2.0 * self.dot(normal))

    def as_vector(self) -> Vector:
        """Return the spatial part with w forced to 0."""
        return Vector(self._x, self._y, self._z)

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Return the four components as a float64 array."""
        return np.array([self._x, self._y, self._z, self._w], dtype=np.float64)


class Point(Tuple4):
    """A position in space (w = 1)."""

    __slots__ = ()

    def __init__(self, x: float, y: float, z: float) -> None:
        super().__init__(x, y, z, 1.0)

    def __repr__(self) -> str:
        return f"Point({self._x!r}, {self._y!r}, {self._z!r})"


class Vector(Tuple4):
    """A displacement or direction (w = 0)."""

    __slots__ = ()

    def __init__(self, x: float, y: float, z: float) -> None:
        super().__init__(x, y, z, 0.0)

    def __repr__(self) -> str:
        return f"Vector({self._x!r}, {self._y!r}, {self._z!r})"


def point(x: float, y: float, z: float) -> Point:
    """Create a point (w = 1)."""
    return Point(x, y, z)


def vector(x: float, y: float, z: float) -> Vector:
    """Create a vector (w = 0)."""
    return Vector(x, y, z)
