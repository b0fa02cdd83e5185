# geometry/sphere.py
import math
from typing import Optional, Tuple
from core.vector import Vector3
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord


def get_sphere_uv(p: Vector3) -> Tuple[float, float]:
    """
    Texture coordinates of a point on the unit sphere.

    u is the angle around the Y axis from X=-1, v the angle from Y=-1 to Y=+1,
    both normalized to [0, 1].
    """
    theta = math.acos(max(-1.0, min(1.0, -p.y)))
    phi = math.atan2(-p.z, p.x) + math.pi
    return phi / (2 * math.pi), theta / math.pi


def solve_sphere(center: Vector3, radius: float, ray: Ray,
                 t_min: float, t_max: float) -> Optional[float]:
    """Nearest root of the ray/sphere quadratic inside [t_min, t_max], if any."""
    oc = ray.origin - center
    a = ray.direction.dot(ray.direction)
    half_b = oc.dot(ray.direction)
    c = oc.dot(oc) - radius * radius
    discriminant = half_b * half_b - a * c

    if discriminant < 0 or a == 0:
        return None

    sqrt_disc = math.sqrt(discriminant)
    # Find the nearest root that lies in the acceptable range
    root = (-half_b - sqrt_disc) / a
    if root < t_min or root > t_max:
        root = (-half_b + sqrt_disc) / a
        if root < t_min or root > t_max:
            return None
    return root


def sphere_hit_record(ray: Ray, t: float, center: Vector3, radius: float, material) -> HitRecord:
    rec = HitRecord(t=t, material=material)
    rec.p = ray.at(t)
    outward_normal = (rec.p - center) / radius
    rec.set_face_normal(ray, outward_normal)
    rec.u, rec.v = get_sphere_uv(outward_normal)
    return rec


class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Vector3, radius: float, material):
        if radius == 0:
            raise ValueError("Sphere radius must be non-zero")
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        root = solve_sphere(self.center, self.radius, ray, t_min, t_max)
        if root is None:
            return None
        return sphere_hit_record(ray, root, self.center, self.radius, self.material)

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius})"
