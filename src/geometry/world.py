# src/geometry/world.py
from typing import Iterable, Optional, List
from geometry.hittable import Hittable, HitRecord
from core.ray import Ray
from core.interval import Interval

class HittableList(Hittable):
    """
    The scene: an ordered list of Hittable objects searched linearly.
    """
    def __init__(self, objects: Iterable[Hittable] = ()):
        self.objects: List[Hittable] = list(objects)

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def clear(self):
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        # Each object only has to beat the closest hit found so far.
        hit_record = None
        closest_so_far = ray_t.max
        for obj in self.objects:
            rec = obj.hit(ray, Interval(ray_t.min, closest_so_far))
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record
