from geometry.hittable import HitRecord, Hittable
from geometry.sphere import Sphere, get_sphere_uv
from geometry.moving_sphere import MovingSphere
from geometry.aarect import AARect, XYRect, XZRect, YZRect
from geometry.flip_face import FlipFace
from geometry.world import HittableList

__all__ = [
    "HitRecord",
    "Hittable",
    "Sphere",
    "get_sphere_uv",
    "MovingSphere",
    "AARect",
    "XYRect",
    "XZRect",
    "YZRect",
    "FlipFace",
    "HittableList",
]
