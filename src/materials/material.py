# materials/material.py
import random
from typing import Optional, Tuple
from core.ray import Ray
from core.vector import Vector3, Color
from geometry.hittable import HitRecord

BLACK = Vector3(0.0, 0.0, 0.0)


class Material:
    """
    Abstract material class. Subclasses must implement scatter().

    Materials are shared between many primitives and read concurrently by
    render workers, so they never change after construction.
    """
    def scatter(self, ray_in: Ray, rec: HitRecord, rng=random) -> Optional[Tuple[Ray, Color]]:
        """
        Computes the scattered ray and attenuation.
        Returns a tuple (scattered_ray, attenuation) or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def emitted(self, u: float, v: float, p: Vector3, front_face: bool = True) -> Color:
        """
        Light emitted at the hit point. Non-emissive materials return black.
        """
        return BLACK
