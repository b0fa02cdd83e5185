# scenes/builders.py
"""
Named scenes. Each builder returns a SceneSetup holding the world, its
background and the camera placement it was designed for.
"""
import logging
import random
from dataclasses import dataclass
from typing import Callable, Dict, Union
from core.vector import Vector3, Color, Point3
from camera.camera import Camera
from geometry.aarect import XYRect, XZRect, YZRect
from geometry.flip_face import FlipFace
from geometry.moving_sphere import MovingSphere
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.dielectric import Dielectric
from materials.diffuse_light import DiffuseLight
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.texture_loader import create_image_material
from materials.textures import CheckerTexture, NoiseTexture
from renderer.background import Background, SkyGradient, SolidBackground

logger = logging.getLogger(__name__)

SKY_BLUE = Vector3(0.70, 0.80, 1.00)
BLACK = Vector3(0.0, 0.0, 0.0)


@dataclass
class SceneSetup:
    world: HittableList
    background: Union[Color, Background]
    lookfrom: Point3
    lookat: Point3
    vfov: float = 40.0
    aperture: float = 0.0
    focus_dist: float = 10.0
    vup: Vector3 = Vector3(0, 1, 0)
    aspect_ratio: float = 16.0 / 9.0
    image_width: int = 400
    samples_per_pixel: int = 100
    max_depth: int = 50
    time0: float = 0.0
    time1: float = 1.0

    @property
    def image_height(self) -> int:
        return max(1, int(self.image_width / self.aspect_ratio))

    def make_camera(self) -> Camera:
        return Camera(self.lookfrom, self.lookat, self.vup, self.vfov, self.aspect_ratio,
                      self.aperture, self.focus_dist, self.time0, self.time1)


def _sky(gradient_sky: bool) -> Background:
    return SkyGradient() if gradient_sky else SolidBackground(SKY_BLUE)


def random_scene(rng=random, gradient_sky: bool = False) -> SceneSetup:
    """Checkered ground, a grid of small random spheres and three large ones."""
    world = HittableList()

    checker = CheckerTexture(Vector3(0.2, 0.3, 0.1), Vector3(0.9, 0.9, 0.9))
    world.add(Sphere(Vector3(0, -1000, 0), 1000, Lambertian(checker)))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Vector3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())

            if (center - Vector3(4, 0.2, 0)).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                # diffuse, bouncing during the shutter interval
                albedo = Vector3.random(rng) * Vector3.random(rng)
                center2 = center + Vector3(0, rng.uniform(0, 0.5), 0)
                world.add(MovingSphere(center, center2, 0.0, 1.0, 0.2, Lambertian(albedo)))
            elif choose_mat < 0.95:
                # metal
                albedo = Vector3.random(rng, 0.5, 1)
                fuzz = rng.uniform(0, 0.5)
                world.add(Sphere(center, 0.2, Metal(albedo, fuzz)))
            else:
                # glass
                world.add(Sphere(center, 0.2, Dielectric(1.5)))

    world.add(Sphere(Vector3(0, 1, 0), 1.0, Dielectric(1.5)))
    world.add(Sphere(Vector3(-4, 1, 0), 1.0, Lambertian(Vector3(0.4, 0.2, 0.1))))
    world.add(Sphere(Vector3(4, 1, 0), 1.0, Metal(Vector3(0.7, 0.6, 0.5), 0.0)))

    return SceneSetup(world, _sky(gradient_sky), lookfrom=Vector3(13, 2, 3), lookat=Vector3(0, 0, 0),
                      vfov=20.0, aperture=0.1)


def two_spheres(gradient_sky: bool = False) -> SceneSetup:
    world = HittableList()
    checker = CheckerTexture(Vector3(0.2, 0.3, 0.1), Vector3(0.9, 0.9, 0.9))
    world.add(Sphere(Vector3(0, -10, 0), 10, Lambertian(checker)))
    world.add(Sphere(Vector3(0, 10, 0), 10, Lambertian(checker)))
    return SceneSetup(world, _sky(gradient_sky), lookfrom=Vector3(13, 2, 3), lookat=Vector3(0, 0, 0),
                      vfov=20.0)


def two_perlin_spheres(seed=None) -> SceneSetup:
    world = HittableList()
    pertext = NoiseTexture(4, seed=seed)
    world.add(Sphere(Vector3(0, -1000, 0), 1000, Lambertian(pertext)))
    world.add(Sphere(Vector3(0, 2, 0), 2, Lambertian(pertext)))
    return SceneSetup(world, SKY_BLUE, lookfrom=Vector3(13, 2, 3), lookat=Vector3(0, 0, 0), vfov=20.0)


def earth(texture_path: str = "earthmap.jpg") -> SceneSetup:
    """A globe wrapped in an equirectangular image. Fails if the image is missing."""
    earth_surface = create_image_material(texture_path, Lambertian)
    world = HittableList([Sphere(Vector3(0, 0, 0), 2, earth_surface)])
    return SceneSetup(world, SKY_BLUE, lookfrom=Vector3(13, 2, 3), lookat=Vector3(0, 0, 0), vfov=20.0)


def simple_light(seed=None) -> SceneSetup:
    world = HittableList()
    pertext = NoiseTexture(4, seed=seed)
    world.add(Sphere(Vector3(0, -1000, 0), 1000, Lambertian(pertext)))
    world.add(Sphere(Vector3(0, 2, 0), 2, Lambertian(pertext)))
    world.add(XYRect(3, 5, 1, 3, -2, DiffuseLight(Vector3(4, 4, 4))))
    return SceneSetup(world, BLACK, lookfrom=Vector3(26, 3, 6), lookat=Vector3(0, 2, 0), vfov=20.0,
                      samples_per_pixel=400)


def cornell_box() -> SceneSetup:
    world = HittableList()

    red = Lambertian(Vector3(.65, .05, .05))
    white = Lambertian(Vector3(.73, .73, .73))
    green = Lambertian(Vector3(.12, .45, .15))
    light = DiffuseLight(Vector3(15, 15, 15))

    world.add(YZRect(0, 555, 0, 555, 555, green))
    world.add(YZRect(0, 555, 0, 555, 0, red))
    # Ceiling light faces down into the box
    world.add(FlipFace(XZRect(213, 343, 227, 332, 554, light)))
    world.add(XZRect(0, 555, 0, 555, 0, white))
    world.add(XZRect(0, 555, 0, 555, 555, white))
    world.add(XYRect(0, 555, 0, 555, 555, white))

    return SceneSetup(world, BLACK, lookfrom=Vector3(278, 278, -800), lookat=Vector3(278, 278, 0),
                      vfov=40.0, aspect_ratio=1.0, image_width=600, samples_per_pixel=200)


SCENES: Dict[str, Callable[..., SceneSetup]] = {
    "random": random_scene,
    "two_spheres": two_spheres,
    "two_perlin_spheres": two_perlin_spheres,
    "earth": earth,
    "simple_light": simple_light,
    "cornell_box": cornell_box,
}
DEFAULT_SCENE = "cornell_box"


def build_scene(name: str, **kwargs) -> SceneSetup:
    """Build a registered scene by name, passing kwargs to its builder."""
    try:
        builder = SCENES[name]
    except KeyError:
        raise KeyError(f"Unknown scene '{name}', expected one of {sorted(SCENES)}") from None
    setup = builder(**kwargs)
    logger.info("Built scene '%s' with %d objects", name, len(setup.world))
    return setup
