"""Sphere primitive with transform-aware ray intersection.

Every sphere is the unit sphere (radius 1) centered at the origin of its
own object space. Its transform maps object space to world space, so a
sphere is moved, resized or squashed by giving it a transform rather than
a center and radius.

Rays are intersected in object space: the world-space ray is mapped by the
inverse transform, then solved against the unit sphere with the quadratic

    a t^2 + b t + c = 0
    a = D . D,  b = 2 D . O,  c = O . O - 1

where O is the ray origin minus the object-space center and D the ray
direction. A negative discriminant means a miss; otherwise both roots are
reported, t1 <= t2 (equal for a tangent ray).

Normals are computed by mapping the world point into object space, taking
the vector from the center, and mapping it back with the inverse-transpose
of the transform. The inverse-transpose can leave a non-zero w when the
transform contains a translation, so w is forced back to 0 before the
result is normalized.

Example:
    >>> from raykernel.core.matrix import Matrix
    >>> from raykernel.core.tuples import Point, Vector
    >>> from raykernel.geometry.ray import Ray
    >>> from raykernel.geometry.sphere import Sphere, intersect
    >>> s = Sphere(Matrix.scaling(2, 2, 2))
    >>> intersect(Ray(Point(0, 0, -5), Vector(0, 0, 1)), s).ts
    (3.0, 7.0)
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from raykernel.core.matrix import Matrix
from raykernel.core.tuples import Point, Tuple4, Vector
from raykernel.errors import ContractViolation, NumericDegenerate, SingularMatrix, WrongKind
from raykernel.geometry.intersection import Intersection, Intersections
from raykernel.materials.phong import Material

if TYPE_CHECKING:
    from raykernel.geometry.ray import Ray

# Center of every sphere in its own object space.
OBJECT_ORIGIN = Point(0.0, 0.0, 0.0)


def _require_affine(transform: Matrix) -> None:
    if not isinstance(transform, Matrix):
        raise ContractViolation(f"Sphere transform must be a Matrix, got {type(transform).__name__}")
    if transform.order != 4:
        raise ContractViolation(f"Sphere transform must be order 4, got order {transform.order}")


@dataclass
class Sphere:
    """A unit sphere placed in the world by an affine transform.

    Spheres compare by value (transform and material). The inverse and
    inverse-transpose of the transform are computed on first use and cached
    until the transform changes.

    Attributes:
        transform: Object-to-world transform (default identity).
        material: Surface material (default Material()).
    """

    transform: Matrix = field(default_factory=Matrix.identity)
    material: Material = field(default_factory=Material)
    _cached_for: Matrix | None = field(default=None, init=False, repr=False, compare=False)
    _inverse: Matrix | None = field(default=None, init=False, repr=False, compare=False)
    _normal_transform: Matrix | None = field(default=None, init=False, repr=False, compare=False)

    def __setattr__(self, name: str, value: object) -> None:
        # Covers the dataclass __init__, set_transform and direct assignment.
        if name == "transform":
            _require_affine(value)  # type: ignore[arg-type]
        super().__setattr__(name, value)

    def set_transform(self, transform: Matrix) -> None:
        """Replace the object-to-world transform.

        Raises:
            ContractViolation: If transform is not an order-4 Matrix.
        """
        self.transform = transform

    def _refresh_cache(self) -> tuple[Matrix, Matrix]:
        """Return (inverse, inverse-transpose), recomputing them if stale."""
        # Matrices are immutable, so identity tells whether the cache is stale.
        if self._cached_for is not self.transform or self._inverse is None or self._normal_transform is None:
            try:
                inverse = self.transform.inverse()
            except SingularMatrix as exc:
                raise ContractViolation(f"Sphere transform is not invertible: {self.transform!r}") from exc
            self._inverse = inverse
            self._normal_transform = inverse.transpose()
            self._cached_for = self.transform
            return inverse, self._normal_transform
        return self._inverse, self._normal_transform

    @property
    def inverse_transform(self) -> Matrix:
        """World-to-object transform.

        Raises:
            ContractViolation: If the transform is not invertible.
        """
        inverse, _ = self._refresh_cache()
        return inverse

    @property
    def normal_transform(self) -> Matrix:
        """Inverse-transpose of the transform, used to map normals."""
        _, normal_transform = self._refresh_cache()
        return normal_transform

    def intersect(self, ray: Ray) -> Intersections:
        return intersect(ray, self)

    def normal_at(self, world_point: Tuple4) -> Vector:
        return normal_at(world_point, self)


def intersect(ray: Ray, sphere: Sphere) -> Intersections:
    """Intersect a world-space ray with a sphere.

    Args:
        ray: The ray, in world space.
        sphere: The sphere to test.

    Returns:
        Either an empty Intersections (miss) or two intersections, sorted by
        t, both referencing sphere. A ray that starts inside the sphere gets
        one negative and one positive t.

    Raises:
        ContractViolation: If the sphere's transform is not invertible.
        NumericDegenerate: If the ray direction has zero length.
    """
    local = ray.transform(sphere.inverse_transform)
    sphere_to_ray = local.origin - OBJECT_ORIGIN

    a = local.direction.dot(local.direction)
    if a == 0.0:
        raise NumericDegenerate(f"Ray direction {ray.direction!r} has zero length")
    b = 2.0 * local.direction.dot(sphere_to_ray)
    c = sphere_to_ray.dot(sphere_to_ray) - 1.0

    discriminant = b * b - 4.0 * a * c
    if discriminant < 0.0:
        return Intersections()

    sqrt_d = math.sqrt(discriminant)
    t1 = (-b - sqrt_d) / (2.0 * a)
    t2 = (-b + sqrt_d) / (2.0 * a)
    return Intersections((Intersection(t1, sphere), Intersection(t2, sphere)))


def normal_at(world_point: Tuple4, sphere: Sphere) -> Vector:
    """Compute the unit surface normal of a sphere at a world-space point.

    The point is assumed to lie on the sphere's surface; no check is made.

    Args:
        world_point: A point on the sphere, in world space.
        sphere: The sphere.

    Returns:
        The world-space unit normal.

    Raises:
        WrongKind: If world_point is not a point.
        ContractViolation: If the sphere's transform is not invertible.
    """
    if not isinstance(world_point, Tuple4) or not world_point.is_point():
        raise WrongKind(f"normal_at() requires a point, got {world_point!r}")
    object_point = sphere.inverse_transform @ world_point
    object_normal = object_point - OBJECT_ORIGIN
    world_normal = sphere.normal_transform @ object_normal
    return world_normal.as_vector().normalize()
