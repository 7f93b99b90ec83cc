"""Pytest configuration for kernel tests.

This module provides shared fixtures for all test modules: a seeded random
generator for property-style checks and the default objects most chapter
scenarios start from.
"""

import numpy as np
import pytest


@pytest.fixture
def rng():
    """Seeded NumPy generator so property checks are reproducible."""
    return np.random.default_rng(42)


@pytest.fixture
def unit_sphere():
    """A default sphere: identity transform, default material."""
    from raykernel.geometry.sphere import Sphere

    return Sphere()


@pytest.fixture
def default_material():
    """The default Phong material."""
    from raykernel.materials.phong import Material

    return Material()


@pytest.fixture
def z_ray():
    """Ray from (0, 0, -5) along +z, aimed at the origin."""
    from raykernel.core.tuples import Point, Vector
    from raykernel.geometry.ray import Ray

    return Ray(Point(0.0, 0.0, -5.0), Vector(0.0, 0.0, 1.0))


@pytest.fixture
def invertible_matrix():
    """A 4x4 matrix with determinant 532."""
    from raykernel.core.matrix import Matrix

    return Matrix(
        [
            [-5.0, 2.0, 6.0, -8.0],
            [1.0, -5.0, 1.0, 8.0],
            [7.0, 7.0, -6.0, -7.0],
            [1.0, -3.0, 7.0, 4.0],
        ]
    )
