"""Ray data structure.

A ray is a half-line: an origin point and a direction vector. The direction
is not required to be unit length; transforming a ray into an object's
space generally changes its length, and intersection math accounts for it.

Example:
    >>> from raykernel.core.tuples import Point, Vector
    >>> from raykernel.geometry.ray import Ray
    >>> ray = Ray(Point(2, 3, 4), Vector(1, 0, 0))
    >>> ray.position(2.5)
    Point(4.5, 3.0, 4.0)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from raykernel.core.tuples import Point, Vector
from raykernel.errors import WrongKind
from raykernel.geometry.sphere import intersect

if TYPE_CHECKING:
    from raykernel.core.matrix import Matrix
    from raykernel.geometry.intersection import Intersections
    from raykernel.geometry.sphere import Sphere


@dataclass(frozen=True)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction vector of the ray.

    Raises:
        WrongKind: If origin is not a point or direction is not a vector.
    """

    origin: Point
    direction: Vector

    def __post_init__(self) -> None:
        if not self.origin.is_point():
            raise WrongKind(f"Ray origin must be a point, got {self.origin!r}")
        if not self.direction.is_vector():
            raise WrongKind(f"Ray direction must be a vector, got {self.direction!r}")

    def position(self, t: float) -> Point:
        """Compute the point along the ray at parameter t.

        Args:
            t: The parameter value. Negative values lie behind the origin.

        Returns:
            The point origin + direction * t.
        """
        return self.origin + self.direction * t

    def transform(self, matrix: Matrix) -> Ray:
        """Return a new ray with origin and direction mapped by matrix."""
        return Ray(matrix @ self.origin, matrix @ self.direction)

    def intersect(self, sphere: Sphere) -> Intersections:
        """Intersect this ray with a sphere. See geometry.sphere.intersect."""
        return intersect(self, sphere)
