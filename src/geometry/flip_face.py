# geometry/flip_face.py
from typing import Optional
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord


class FlipFace(Hittable):
    """
    Wraps another hittable and swaps which side counts as its front face.

    The normal still points against the incoming ray; only front_face is
    inverted, so a one-sided emitter lights up from its other side.
    """
    def __init__(self, obj: Hittable):
        self.obj = obj
        self.material = getattr(obj, "material", None)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        rec = self.obj.hit(ray, t_min, t_max)
        if rec is None:
            return None
        rec.front_face = not rec.front_face
        return rec

    def __repr__(self) -> str:
        return f"FlipFace({self.obj!r})"
