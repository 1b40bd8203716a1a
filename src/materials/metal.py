# materials/metal.py
import random
from typing import Tuple
from core.ray import Ray
from core.vector import Vector3
from core.utils import reflect, random_unit_vector
from geometry.hittable import HitRecord
from materials.material import Material, check_attenuation

class Metal(Material):
    """
    Metal material: mirror reflection blurred by a fuzz factor in [0, 1].
    """
    def __init__(self, albedo: Vector3, fuzz: float = 0.0):
        self.albedo = check_attenuation("albedo", albedo)
        self.fuzz = min(max(fuzz, 0.0), 1.0)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng: random.Random) -> Tuple[Ray, Vector3]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        direction = reflected
        if self.fuzz > 0:
            direction = reflected + random_unit_vector(rng) * self.fuzz
            # Full fuzz can cancel the reflection; keep the mirror direction.
            if direction.near_zero():
                direction = reflected
        # No check that a fuzzed ray still leaves the surface.
        return Ray(rec.p, direction), self.albedo

    def __repr__(self) -> str:
        return f"Metal({self.albedo!r}, fuzz={self.fuzz})"
