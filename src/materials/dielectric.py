# src/materials/dielectric.py
import math
import random
from typing import Tuple
from core.ray import Ray
from core.vector import Vector3, Color
from core.utils import reflect, refract, schlick
from geometry.hittable import HitRecord
from materials.material import Material

WHITE = Vector3(1.0, 1.0, 1.0)


class Dielectric(Material):
    """Clear refractive material such as glass or water."""
    def __init__(self, ref_idx: float):
        if ref_idx <= 0:
            raise ValueError(f"Index of refraction must be positive, got {ref_idx}")
        self.ref_idx = ref_idx

    def scatter(self, ray_in: Ray, rec: HitRecord, rng=random) -> Tuple[Ray, Color]:
        attenuation = WHITE  # Glass doesn't absorb light

        # Determine if we're entering or exiting the material
        refraction_ratio = 1.0 / self.ref_idx if rec.front_face else self.ref_idx

        unit_direction = ray_in.direction.normalize()
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        # Total internal reflection, or a Fresnel reflection picked by Schlick
        cannot_refract = refraction_ratio * sin_theta > 1.0
        if cannot_refract or schlick(cos_theta, refraction_ratio) > rng.random():
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, refraction_ratio)

        return Ray(rec.p, direction, ray_in.time), attenuation
