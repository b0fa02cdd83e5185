# main.py
import argparse
import logging
import random
import sys
from typing import List, Optional
from core.config import QUALITY_LEVELS, RenderSettings
from core.logging_config import setup_logging
from renderer.image_writer import save_image
from renderer.raytracer import Renderer
from scenes.builders import DEFAULT_SCENE, SCENES, build_scene

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    defaults = RenderSettings.from_env()
    parser = argparse.ArgumentParser(description="Render a scene with the path tracer.")
    parser.add_argument("--scene", choices=sorted(SCENES), default=DEFAULT_SCENE)
    parser.add_argument("--threads", type=int, default=defaults.thread_count,
                        help="worker threads (default: %(default)s)")
    parser.add_argument("--output", default=defaults.output_path)
    parser.add_argument("--quality", choices=sorted(QUALITY_LEVELS), default=defaults.quality)
    parser.add_argument("--samples", type=int, default=None, help="override samples per pixel")
    parser.add_argument("--width", type=int, default=None, help="override image width")
    parser.add_argument("--seed", type=int, default=defaults.seed)
    parser.add_argument("--texture", default="earthmap.jpg", help="image for the earth scene")
    parser.add_argument("--gradient-sky", action="store_true",
                        help="white-to-blue sky instead of a flat background (random, two_spheres)")
    parser.add_argument("--no-progress", action="store_true")
    parser.add_argument("--log-level", default=None)
    return parser.parse_args(argv)


def scene_kwargs(args: argparse.Namespace) -> dict:
    if args.scene == "earth":
        return {"texture_path": args.texture}
    if args.scene == "random":
        # Unseeded when no seed is given
        return {"gradient_sky": args.gradient_sky, "rng": random.Random(args.seed)}
    if args.scene == "two_spheres":
        return {"gradient_sky": args.gradient_sky}
    if args.scene in ("two_perlin_spheres", "simple_light"):
        return {"seed": args.seed}
    return {}


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(level=args.log_level)

    try:
        settings = RenderSettings(
            thread_count=args.threads,
            output_path=args.output,
            seed=args.seed,
            quality=args.quality,
            samples_per_pixel=args.samples,
            image_width=args.width,
            show_progress=not args.no_progress,
        )
        setup = build_scene(args.scene, **scene_kwargs(args))
        width, samples, depth = settings.resolve(setup.image_width, setup.samples_per_pixel,
                                                 setup.max_depth)
        height = max(1, int(width / setup.aspect_ratio))
        camera = setup.make_camera()
        renderer = Renderer(width, height, samples, depth, thread_count=settings.thread_count,
                            seed=settings.seed, show_progress=settings.show_progress)
    except (ValueError, FileNotFoundError) as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    buffer = renderer.render(setup.world, camera, setup.background)
    save_image(settings.output_path, buffer, samples)
    logger.info("Done. A new %s file has been generated.", settings.output_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
