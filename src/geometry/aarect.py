# geometry/aarect.py
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord


class AARect(Hittable):
    """
    Axis-aligned rectangle lying in the plane ``<normal_axis> = k`` and
    bounded by [a0, a1] x [b0, b1] along the two remaining axes.

    Subclasses only choose the axes.
    """
    a_axis = "x"
    b_axis = "y"
    normal_axis = "z"

    def __init__(self, a0: float, a1: float, b0: float, b1: float, k: float, material):
        if a0 >= a1 or b0 >= b1:
            raise ValueError(
                f"{type(self).__name__} bounds must be increasing, got "
                f"[{a0}, {a1}] x [{b0}, {b1}]")
        self.a0 = a0
        self.a1 = a1
        self.b0 = b0
        self.b1 = b1
        self.k = k
        self.material = material
        self.outward_normal = Vector3(*(1.0 if axis == self.normal_axis else 0.0 for axis in "xyz"))

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        d = getattr(ray.direction, self.normal_axis)
        if abs(d) < 1e-12:
            # Parallel to the plane
            return None
        t = (self.k - getattr(ray.origin, self.normal_axis)) / d
        if t < t_min or t > t_max:
            return None
        a = getattr(ray.origin, self.a_axis) + t * getattr(ray.direction, self.a_axis)
        b = getattr(ray.origin, self.b_axis) + t * getattr(ray.direction, self.b_axis)
        if a < self.a0 or a > self.a1 or b < self.b0 or b > self.b1:
            return None

        rec = HitRecord(t=t, material=self.material)
        rec.u = (a - self.a0) / (self.a1 - self.a0)
        rec.v = (b - self.b0) / (self.b1 - self.b0)
        rec.p = ray.at(t)
        rec.set_face_normal(ray, self.outward_normal)
        return rec

    def __repr__(self) -> str:
        return (f"{type(self).__name__}({self.a0}, {self.a1}, {self.b0}, {self.b1}, "
                f"k={self.k})")


class XYRect(AARect):
    """Rectangle in the plane z = k."""
    a_axis, b_axis, normal_axis = "x", "y", "z"


class XZRect(AARect):
    """Rectangle in the plane y = k."""
    a_axis, b_axis, normal_axis = "x", "z", "y"


class YZRect(AARect):
    """Rectangle in the plane x = k."""
    a_axis, b_axis, normal_axis = "y", "z", "x"
