# camera/camera.py
import math
import random
from core.vector import Vector3
from core.ray import Ray
from core.utils import degrees_to_radians, random_in_unit_disk


class Camera:
    """
    Thin-lens camera placed with look-from/look-at vectors.

    vfov is the vertical field of view in degrees. A non-zero aperture gives
    defocus blur around focus_dist; rays are stamped with a time drawn from
    the shutter interval [time0, time1] for motion blur.
    """
    def __init__(self, lookfrom: Vector3, lookat: Vector3, vup: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float = 0.0,
                 focus_dist: float = 10.0, time0: float = 0.0, time1: float = 0.0):
        if not 0 < vfov < 180:
            raise ValueError(f"vfov must be in (0, 180) degrees, got {vfov}")
        if aspect_ratio <= 0:
            raise ValueError(f"aspect_ratio must be positive, got {aspect_ratio}")
        if aperture < 0:
            raise ValueError(f"aperture must be non-negative, got {aperture}")
        if focus_dist <= 0:
            raise ValueError(f"focus_dist must be positive, got {focus_dist}")
        if time1 < time0:
            raise ValueError(f"Shutter interval is inverted: [{time0}, {time1}]")

        view = lookfrom - lookat
        if view.near_zero():
            raise ValueError("lookfrom and lookat must be distinct points")
        if vup.cross(view).near_zero():
            raise ValueError("vup must not be parallel to the viewing direction")

        self.lookfrom = lookfrom
        self.lookat = lookat
        self.vup = vup
        self.vfov = vfov
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture  # Lens aperture for depth of field
        self.focus_dist = focus_dist  # Distance to focus plane
        self.lens_radius = aperture / 2.0
        self.time0 = time0
        self.time1 = time1
        self.update_camera()

    def update_camera(self):
        """Computes the camera's basis vectors and viewport."""
        theta = degrees_to_radians(self.vfov)
        viewport_height = 2.0 * math.tan(theta / 2)
        viewport_width = self.aspect_ratio * viewport_height

        self.w = (self.lookfrom - self.lookat).normalize()
        self.u = self.vup.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        # Scale by focus distance
        self.origin = self.lookfrom
        self.horizontal = self.u * (viewport_width * self.focus_dist)
        self.vertical = self.v * (viewport_height * self.focus_dist)
        self.lower_left_corner = (self.origin
                                  - self.horizontal * 0.5
                                  - self.vertical * 0.5
                                  - self.w * self.focus_dist)

    def get_ray(self, s: float, t: float, rng=random) -> Ray:
        """Generates a ray through viewport coordinates (s, t), with depth of field and motion blur."""
        time = self.time0 if self.time1 == self.time0 else rng.uniform(self.time0, self.time1)
        target = self.lower_left_corner + self.horizontal * s + self.vertical * t

        if self.lens_radius <= 0:
            return Ray(self.origin, target - self.origin, time)

        # Generate random point on lens
        rd = random_in_unit_disk(rng) * self.lens_radius
        offset = self.u * rd.x + self.v * rd.y
        ray_origin = self.origin + offset
        return Ray(ray_origin, target - ray_origin, time)
