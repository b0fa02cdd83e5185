# src/geometry/world.py
from geometry.hittable import Hittable, HitRecord
from typing import Iterable, Iterator, Optional, List
from core.ray import Ray


class HittableList(Hittable):
    """
    A list of Hittable objects, hit-tested by a linear scan.

    The list is filled while a scene is built and must not change while it
    is being rendered; worker threads share it without locking.
    """
    def __init__(self, objects: Optional[Iterable[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects is not None else []

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record
