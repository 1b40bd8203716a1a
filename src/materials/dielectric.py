# src/materials/dielectric.py
import math
import random
from typing import Tuple
from core.ray import Ray
from core.vector import Vector3
from core.utils import reflect
from geometry.hittable import HitRecord
from materials.material import Material, check_attenuation

WHITE = Vector3(1.0, 1.0, 1.0)

class Dielectric(Material):
    """
    Clear refractive material such as glass or water.

    refraction_index is relative to the surrounding medium; a value below 1
    models e.g. an air bubble inside water. color tints refracted light only.
    """
    def __init__(self, refraction_index: float, color: Vector3 = WHITE):
        if refraction_index <= 0:
            raise ValueError("refraction_index must be positive")
        self.refraction_index = refraction_index
        self.color = check_attenuation("color", color)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng: random.Random) -> Tuple[Ray, Vector3]:
        # Determine if we're entering or exiting the material
        ri = 1.0 / self.refraction_index if rec.front_face else self.refraction_index

        unit_direction = ray_in.direction.normalize()

        # Clamped so rounding can't push sin_theta to a NaN
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(1.0 - cos_theta * cos_theta)

        # Total internal reflection
        if ri * sin_theta > 1.0:
            return Ray(rec.p, reflect(unit_direction, rec.normal)), WHITE

        if rng.random() < schlick(cos_theta, ri):
            return Ray(rec.p, reflect(unit_direction, rec.normal)), WHITE

        return Ray(rec.p, refract(unit_direction, rec.normal, ri)), self.color

    def __repr__(self) -> str:
        return f"Dielectric({self.refraction_index}, color={self.color!r})"

def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """
    Snell's law for a unit direction uv and unit normal n facing against it.
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * (-math.sqrt(abs(1.0 - r_out_perp.length_squared())))
    return r_out_perp + r_out_parallel

def schlick(cosine: float, ri: float) -> float:
    """
    Schlick's approximation of the Fresnel reflectance.
    """
    r0 = (1.0 - ri) / (1.0 + ri)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cosine), 5)
