# renderer/raytracer.py
import logging
import random
import time
from typing import Optional, Union
from core.ray import Ray
from core.utils import INFINITY
from core.vector import Vector3, Color
from geometry.hittable import Hittable
from camera.camera import Camera
from renderer.background import Background, as_background
from renderer.pixel_buffer import PixelBuffer
from renderer.thread_pool import ProgressReporter, RenderPool

logger = logging.getLogger(__name__)

# Offset that keeps scattered rays from re-hitting their own surface
T_MIN = 0.001
MAX_BOUNCES = 50
DEFAULT_THREADS = 4


def ray_color(ray: Ray, background: Background, world: Hittable, depth: int,
              rng=random, t_min: float = T_MIN) -> Color:
    """
    Radiance carried back along `ray`.

    Each bounce adds the surface emission weighted by the attenuation
    gathered so far, then continues with the scattered ray. The walk stops
    when a material absorbs the ray, the ray escapes to the background, or
    `depth` bounces have been spent (contributing black).
    """
    color = Vector3(0.0, 0.0, 0.0)
    throughput = Vector3(1.0, 1.0, 1.0)

    for _ in range(depth):
        rec = world.hit(ray, t_min, INFINITY)
        if rec is None:
            return color + throughput * background.value(ray)

        emitted = rec.material.emitted(rec.u, rec.v, rec.p, rec.front_face)
        color = color + throughput * emitted

        scattered = rec.material.scatter(ray, rec, rng)
        if scattered is None:
            return color
        ray, attenuation = scattered
        throughput = throughput * attenuation

    # Bounce limit exceeded, no more light is gathered
    return color


class Renderer:
    """
    Renders a scene into a PixelBuffer with a pool of worker threads, one
    task per pixel.

    With a seed, every pixel draws from its own generator seeded from the
    seed and the pixel index, so the result does not depend on the number of
    workers or on the order tasks finish in.
    """
    def __init__(self, width: int, height: int, samples_per_pixel: int = 100,
                 max_depth: int = MAX_BOUNCES, thread_count: int = DEFAULT_THREADS,
                 seed: Optional[int] = None, t_min: float = T_MIN,
                 show_progress: bool = True):
        if width < 1 or height < 1:
            raise ValueError(f"Image size must be positive, got {width}x{height}")
        if samples_per_pixel < 1:
            raise ValueError(f"samples_per_pixel must be at least 1, got {samples_per_pixel}")
        if max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {max_depth}")
        if thread_count < 1:
            raise ValueError(f"thread_count must be at least 1, got {thread_count}")
        if not 0 <= t_min < INFINITY:
            raise ValueError(f"t_min must lie in [0, inf), got {t_min}")
        self.width = width
        self.height = height
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.thread_count = thread_count
        self.seed = seed
        self.t_min = t_min
        self.show_progress = show_progress

    def pixel_rng(self, row: int, column: int) -> random.Random:
        if self.seed is None:
            return random.Random()
        return random.Random(self.seed * self.width * self.height + row * self.width + column)

    def render_pixel(self, row: int, column: int, world: Hittable, camera: Camera,
                     background: Background, buffer: PixelBuffer):
        """Sum samples_per_pixel jittered samples into the pixel's slot."""
        rng = self.pixel_rng(row, column)
        # Viewport coordinates run bottom-up
        j = self.height - 1 - row
        w = max(self.width - 1, 1)
        h = max(self.height - 1, 1)

        pixel_color = Vector3(0.0, 0.0, 0.0)
        for _ in range(self.samples_per_pixel):
            s = (column + rng.random()) / w
            t = (j + rng.random()) / h
            ray = camera.get_ray(s, t, rng)
            pixel_color = pixel_color + ray_color(ray, background, world, self.max_depth, rng, self.t_min)
        buffer.set(row, column, pixel_color)

    def render(self, world: Hittable, camera: Camera,
               background: Union[Color, Background]) -> PixelBuffer:
        """
        Render every pixel and return the accumulated buffer.

        Blocks until all pixel tasks are done. A failing task aborts the
        render and its exception propagates.
        """
        background = as_background(background)
        buffer = PixelBuffer(self.width, self.height)
        reporter = ProgressReporter() if self.show_progress else None

        logger.info(">>> RENDERING <<< %dx%d, %d spp, depth %d, %d threads",
                    self.width, self.height, self.samples_per_pixel, self.max_depth, self.thread_count)
        start = time.perf_counter()
        with RenderPool(self.thread_count, progress=reporter, total=len(buffer)) as pool:
            for row in range(self.height):
                for column in range(self.width):
                    pool.enqueue(self.render_pixel, row, column, world, camera, background, buffer)
            pool.wait_until_nothing_in_flight()
        if reporter is not None:
            reporter.finish()
        logger.info("Rendered %d pixels in %.2fs", len(buffer), time.perf_counter() - start)
        return buffer
