"""Pytest configuration and shared fixtures."""

import random

import pytest

from core.vector import Vector3
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.lambertian import Lambertian


@pytest.fixture
def rng():
    """A seeded random source."""
    return random.Random(1234)


@pytest.fixture
def gray():
    return Lambertian(Vector3(0.5, 0.5, 0.5))


@pytest.fixture
def two_sphere_world(gray):
    """Unit test scene: small sphere on a large ground sphere."""
    return HittableList([
        Sphere(Vector3(0, 0, -1), 0.5, gray),
        Sphere(Vector3(0, -100.5, -1), 100, gray),
    ])

