"""Unit tests for rays."""

import pytest


class TestRay:
    """Tests for ray construction, position and transformation."""

    def test_create(self):
        """Test that a ray stores its origin and direction."""
        from raykernel.core.tuples import Point, Vector
        from raykernel.geometry.ray import Ray

        origin = Point(1, 2, 3)
        direction = Vector(4, 5, 6)
        ray = Ray(origin, direction)
        assert ray.origin == origin
        assert ray.direction == direction

    @pytest.mark.parametrize(
        "t,expected",
        [(0, (2, 3, 4)), (1, (3, 3, 4)), (-1, (1, 3, 4)), (2.5, (4.5, 3, 4))],
    )
    def test_position(self, t, expected):
        """Test computing a point from a distance along the ray."""
        from raykernel.core.tuples import Point, Vector
        from raykernel.geometry.ray import Ray

        ray = Ray(Point(2, 3, 4), Vector(1, 0, 0))
        assert ray.position(t) == Point(*expected)

    def test_translate(self):
        """Test that translation moves the origin but not the direction."""
        from raykernel.core.matrix import Matrix
        from raykernel.core.tuples import Point, Vector
        from raykernel.geometry.ray import Ray

        ray = Ray(Point(1, 2, 3), Vector(0, 1, 0))
        moved = ray.transform(Matrix.translation(3, 4, 5))
        assert moved.origin == Point(4, 6, 8)
        assert moved.direction == Vector(0, 1, 0)

    def test_scale(self):
        """Test that scaling changes both origin and direction length."""
        from raykernel.core.matrix import Matrix
        from raykernel.core.tuples import Point, Vector
        from raykernel.geometry.ray import Ray

        ray = Ray(Point(1, 2, 3), Vector(0, 1, 0))
        scaled = ray.transform(Matrix.scaling(2, 3, 4))
        assert scaled.origin == Point(2, 6, 12)
        assert scaled.direction == Vector(0, 3, 0)

    def test_transform_returns_new_ray(self):
        """Test that the original ray is left unchanged."""
        from raykernel.core.matrix import Matrix
        from raykernel.core.tuples import Point, Vector
        from raykernel.geometry.ray import Ray

        ray = Ray(Point(1, 2, 3), Vector(0, 1, 0))
        ray.transform(Matrix.translation(3, 4, 5))
        assert ray.origin == Point(1, 2, 3)

    def test_origin_must_be_point(self):
        """Test that a vector origin is rejected."""
        from raykernel.core.tuples import Vector
        from raykernel.errors import WrongKind
        from raykernel.geometry.ray import Ray

        with pytest.raises(WrongKind):
            Ray(Vector(1, 2, 3), Vector(0, 1, 0))

    def test_direction_must_be_vector(self):
        """Test that a point direction is rejected."""
        from raykernel.core.tuples import Point
        from raykernel.errors import WrongKind
        from raykernel.geometry.ray import Ray

        with pytest.raises(WrongKind):
            Ray(Point(1, 2, 3), Point(0, 1, 0))

    def test_frozen(self):
        """Test that rays are immutable."""
        import dataclasses

        from raykernel.core.tuples import Point
        from raykernel.geometry.ray import Ray

        ray = Ray(Point(0, 0, 0), Point(0, 0, 1) - Point(0, 0, 0))
        with pytest.raises(dataclasses.FrozenInstanceError):
            ray.origin = Point(1, 1, 1)
