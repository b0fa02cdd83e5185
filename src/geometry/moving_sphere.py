# geometry/moving_sphere.py
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord
from geometry.sphere import solve_sphere, sphere_hit_record


class MovingSphere(Hittable):
    """
    A sphere whose center moves linearly from center0 at time0 to center1
    at time1. Rays pick the position matching their own time.
    """
    def __init__(self, center0: Vector3, center1: Vector3, time0: float, time1: float,
                 radius: float, material):
        if radius == 0:
            raise ValueError("MovingSphere radius must be non-zero")
        if time1 < time0:
            raise ValueError(f"MovingSphere time interval is inverted: [{time0}, {time1}]")
        self.center0 = center0
        self.center1 = center1
        self.time0 = time0
        self.time1 = time1
        self.radius = radius
        self.material = material

    def center(self, time: float) -> Vector3:
        if self.time1 == self.time0:
            return self.center0
        return self.center0 + (self.center1 - self.center0) * ((time - self.time0) / (self.time1 - self.time0))

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        center = self.center(ray.time)
        root = solve_sphere(center, self.radius, ray, t_min, t_max)
        if root is None:
            return None
        return sphere_hit_record(ray, root, center, self.radius, self.material)
