# materials/material.py
import random
from typing import Tuple
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import HitRecord

class Material:
    """
    Abstract material class. Subclasses must implement scatter().

    The set of materials is closed: Lambertian, Metal and Dielectric.
    Materials hold immutable value data and may be shared between spheres
    and across worker processes.
    """
    def scatter(self, ray_in: Ray, rec: HitRecord, rng: random.Random) -> Tuple[Ray, Vector3]:
        """
        Computes the scattered ray and attenuation.
        Returns a tuple (scattered_ray, attenuation). Absorption is expressed
        as a near-zero attenuation, never as a missing result.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

def check_attenuation(name: str, color: Vector3) -> Vector3:
    """
    Returns color unchanged if every component lies in [0, 1], otherwise
    raises ValueError. A component above 1 would add energy on each bounce.
    """
    if not all(0.0 <= c <= 1.0 for c in color):
        raise ValueError(f"{name} components must lie in [0, 1], got {color!r}")
    return color
