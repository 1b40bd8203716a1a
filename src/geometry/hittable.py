# geometry/hittable.py
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.interval import Interval

class HitRecord:
    """
    Records details of a ray-object intersection. A fresh record is built
    for every successful hit and never reused.
    """
    __slots__ = ("p", "normal", "t", "front_face", "material")

    def __init__(self, p: Vector3, t: float, material=None):
        self.p = p              # Intersection point
        self.normal = None      # Unit normal, always facing against the ray
        self.t = t              # Ray parameter at intersection
        self.front_face = True  # Whether the ray hit the outward side
        self.material = material

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """
        Orients the normal against the ray. outward_normal must be unit length.
        """
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal

class Hittable:
    """
    Base class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")
