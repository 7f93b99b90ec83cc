"""Unit tests for the affine transform constructors and the chaining builder."""

import math

import pytest

HALF_SQRT2 = math.sqrt(2) / 2


class TestTranslation:
    """Tests for translation matrices."""

    def test_moves_point(self):
        """Test that translation moves a point."""
        from raykernel.core.matrix import Matrix
        from raykernel.core.tuples import Point

        assert Matrix.translation(5, -3, 2) @ Point(-3, 4, 5) == Point(2, 1, 7)

    def test_inverse_moves_back(self):
        """Test that the inverse translation moves the other way."""
        from raykernel.core.matrix import Matrix
        from raykernel.core.tuples import Point

        inv = Matrix.translation(5, -3, 2).inverse()
        assert inv @ Point(-3, 4, 5) == Point(-8, 7, 3)

    def test_ignores_vectors(self):
        """Test that translation leaves vectors unchanged."""
        from raykernel.core.matrix import Matrix
        from raykernel.core.tuples import Vector

        assert Matrix.translation(5, -3, 2) @ Vector(-3, 4, 5) == Vector(-3, 4, 5)

    def test_accepts_tuple_argument(self):
        """Test that a vector or 3-sequence may stand in for x, y, z."""
        from raykernel.core.matrix import Matrix
        from raykernel.core.tuples import Vector

        expected = Matrix.translation(5, -3, 2)
        assert Matrix.translation(Vector(5, -3, 2)) == expected
        assert Matrix.translation((5, -3, 2)) == expected

    def test_partial_components_rejected(self):
        """Test that passing only x and y is an error."""
        from raykernel.core.matrix import Matrix

        with pytest.raises(TypeError):
            Matrix.translation(1, 2)


class TestScaling:
    """Tests for scaling matrices."""

    def test_scales_point(self):
        """Test scaling a point."""
        from raykernel.core.matrix import Matrix
        from raykernel.core.tuples import Point

        assert Matrix.scaling(2, 3, 4) @ Point(-4, 6, 8) == Point(-8, 18, 32)

    def test_scales_vector(self):
        """Test scaling a vector."""
        from raykernel.core.matrix import Matrix
        from raykernel.core.tuples import Vector

        assert Matrix.scaling(2, 3, 4) @ Vector(-4, 6, 8) == Vector(-8, 18, 32)

    def test_inverse_shrinks(self):
        """Test that the inverse scaling divides."""
        from raykernel.core.matrix import Matrix
        from raykernel.core.tuples import Vector

        inv = Matrix.scaling(2, 3, 4).inverse()
        assert inv @ Vector(-4, 6, 8) == Vector(-2, 2, 2)

    def test_reflection(self):
        """Test that scaling by a negative value reflects."""
        from raykernel.core.matrix import Matrix
        from raykernel.core.tuples import Point

        assert Matrix.scaling(-1, 1, 1) @ Point(2, 3, 4) == Point(-2, 3, 4)


class TestRotation:
    """Tests for rotations about the three axes."""

    def test_rotate_x(self):
        """Test rotating a point around the x axis."""
        from raykernel.core.matrix import Matrix
        from raykernel.core.tuples import Point

        p = Point(0, 1, 0)
        assert Matrix.rotation_x(math.pi / 4) @ p == Point(0, HALF_SQRT2, HALF_SQRT2)
        assert Matrix.rotation_x(math.pi / 2) @ p == Point(0, 0, 1)

    def test_rotate_x_inverse(self):
        """Test that the inverse x rotation turns the opposite way."""
        from raykernel.core.matrix import Matrix
        from raykernel.core.tuples import Point

        inv = Matrix.rotation_x(math.pi / 4).inverse()
        assert inv @ Point(0, 1, 0) == Point(0, HALF_SQRT2, -HALF_SQRT2)

    def test_rotate_y(self):
        """Test rotating a point around the y axis."""
        from raykernel.core.matrix import Matrix
        from raykernel.core.tuples import Point

        p = Point(0, 0, 1)
        assert Matrix.rotation_y(math.pi / 4) @ p == Point(HALF_SQRT2, 0, HALF_SQRT2)
        assert Matrix.rotation_y(math.pi / 2) @ p == Point(1, 0, 0)

    def test_rotate_z(self):
        """Test rotating a point around the z axis."""
        from raykernel.core.matrix import Matrix
        from raykernel.core.tuples import Point

        p = Point(0, 1, 0)
        assert Matrix.rotation_z(math.pi / 4) @ p == Point(-HALF_SQRT2, HALF_SQRT2, 0)
        assert Matrix.rotation_z(math.pi / 2) @ p == Point(-1, 0, 0)


class TestShearing:
    """Tests for the six shear factors."""

    @pytest.mark.parametrize(
        "factors,expected",
        [
            ((1, 0, 0, 0, 0, 0), (5, 3, 4)),
            ((0, 1, 0, 0, 0, 0), (6, 3, 4)),
            ((0, 0, 1, 0, 0, 0), (2, 5, 4)),
            ((0, 0, 0, 1, 0, 0), (2, 7, 4)),
            ((0, 0, 0, 0, 1, 0), (2, 3, 6)),
            ((0, 0, 0, 0, 0, 1), (2, 3, 7)),
        ],
        ids=["xy", "xz", "yx", "yz", "zx", "zy"],
    )
    def test_shear(self, factors, expected):
        """Test each shear factor in isolation."""
        from raykernel.core.matrix import Matrix
        from raykernel.core.tuples import Point

        assert Matrix.shearing(*factors) @ Point(2, 3, 4) == Point(*expected)


class TestBuilder:
    """Tests for chaining transforms onto a matrix."""

    def test_individual_steps(self):
        """Test applying rotation, scaling and translation one at a time."""
        from raykernel.core.matrix import Matrix
        from raykernel.core.tuples import Point

        a = Matrix.rotation_x(math.pi / 2)
        b = Matrix.scaling(5, 5, 5)
        c = Matrix.translation(10, 5, 7)
        p2 = a @ Point(1, 0, 1)
        assert p2 == Point(1, -1, 0)
        p3 = b @ p2
        assert p3 == Point(5, -5, 0)
        assert c @ p3 == Point(15, 0, 7)

    def test_chained_in_reverse(self):
        """Test that an explicit product applies the rightmost transform first."""
        from raykernel.core.matrix import Matrix
        from raykernel.core.tuples import Point

        t = Matrix.translation(10, 5, 7) @ Matrix.scaling(5, 5, 5) @ Matrix.rotation_x(math.pi / 2)
        assert t @ Point(1, 0, 1) == Point(15, 0, 7)

    def test_builder_applies_in_call_order(self):
        """Test that builder calls apply to a point in the order written."""
        from raykernel.core.matrix import Matrix
        from raykernel.core.tuples import Point

        t = Matrix.identity().rotate_x(math.pi / 2).scale(5, 5, 5).translate(10, 5, 7)
        assert t @ Point(1, 0, 1) == Point(15, 0, 7)
        assert t == Matrix.translation(10, 5, 7) @ Matrix.scaling(5, 5, 5) @ Matrix.rotation_x(math.pi / 2)

    def test_builder_left_multiplies(self):
        """Test that each builder call is equivalent to a left product."""
        from raykernel.core.matrix import Matrix

        m = Matrix.scaling(2, 3, 4)
        assert m.translate(1, 2, 3) == Matrix.translation(1, 2, 3) @ m
        assert m.rotate_y(0.3) == Matrix.rotation_y(0.3) @ m
        assert m.rotate_z(0.3) == Matrix.rotation_z(0.3) @ m
        assert m.shear(1, 0, 0, 0, 0, 1) == Matrix.shearing(1, 0, 0, 0, 0, 1) @ m

    def test_builder_leaves_original(self):
        """Test that the builder returns a new matrix."""
        from raykernel.core.matrix import Matrix

        m = Matrix.identity()
        m.translate(1, 2, 3)
        assert m == Matrix.identity()

    def test_clock_face(self):
        """Test the clock-face placement of hour marks on a 512x512 canvas."""
        from raykernel.core.matrix import Matrix
        from raykernel.core.tuples import Point

        def hour(angle):
            return (
                Matrix.identity()
                .translate(0, 1, 0)
                .rotate_z(angle)
                .scale(128, 128, 1)
                .translate(256, 256, 0)
            )

        origin = Point(0, 0, 0)
        assert hour(0.0) @ origin == Point(256, 384, 0)
        assert hour(math.pi / 2) @ origin == Point(128, 256, 0)
        assert hour(math.pi) @ origin == Point(256, 128, 0)

    def test_builder_needs_order_4(self):
        """Test that builders refuse smaller matrices."""
        from raykernel.core.matrix import Matrix
        from raykernel.errors import ContractViolation

        with pytest.raises(ContractViolation):
            Matrix.identity(3).translate(1, 2, 3)
