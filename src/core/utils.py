# core/utils.py
"""
Sampling helpers. Every function takes the random source explicitly so that
each render task can own an independent, seedable generator.
"""
import random
from core.vector import Vector3

def random_in(rng: random.Random, lo: float, hi: float) -> float:
    """
    Returns a uniform float in [lo, hi).
    """
    return lo + (hi - lo) * rng.random()

def random_vector(rng: random.Random, lo: float = 0.0, hi: float = 1.0) -> Vector3:
    return Vector3(random_in(rng, lo, hi),
                   random_in(rng, lo, hi),
                   random_in(rng, lo, hi))

def random_in_unit_sphere(rng: random.Random) -> Vector3:
    """
    Returns a random point strictly inside the unit sphere.
    """
    while True:
        p = random_vector(rng, -1.0, 1.0)
        # Reject points too close to the origin to normalize safely.
        if 1e-160 < p.length_squared() < 1.0:
            return p

def random_unit_vector(rng: random.Random) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    return random_in_unit_sphere(rng).normalize()

def random_on_hemisphere(rng: random.Random, normal: Vector3) -> Vector3:
    """
    Returns a random unit vector in the hemisphere around normal.
    """
    on_unit_sphere = random_unit_vector(rng)
    if on_unit_sphere.dot(normal) > 0.0:
        return on_unit_sphere
    return -on_unit_sphere

def random_in_unit_disk(rng: random.Random) -> Vector3:
    """
    Random point in the z=0 unit disk, used for defocus blur.
    """
    while True:
        p = Vector3(random_in(rng, -1.0, 1.0), random_in(rng, -1.0, 1.0), 0.0)
        if p.length_squared() < 1.0:
            return p

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * (2 * v.dot(n))
