"""Render configuration: environment defaults and quality presets."""

import os
from dataclasses import dataclass
from typing import Optional

# Environment
THREAD_COUNT = int(os.getenv("RT_THREADS", "4"))
LOG_LEVEL = os.getenv("RT_LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("RT_LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
OUTPUT_PATH = os.getenv("RT_OUTPUT", "output.ppm")
SEED: Optional[int] = int(os.environ["RT_SEED"]) if os.getenv("RT_SEED") else None

# Quality levels scale the scene's own sample count and resolution.
QUALITY_LEVELS = {
    "preview": {"samples": 0.1, "bounces": 10, "scale": 0.25},
    "balanced": {"samples": 0.5, "bounces": 25, "scale": 0.5},
    "final": {"samples": 1.0, "bounces": 50, "scale": 1.0},
}
DEFAULT_QUALITY = "final"


@dataclass(frozen=True)
class RenderSettings:
    """Options that are not part of a scene description."""
    thread_count: int = THREAD_COUNT
    output_path: str = OUTPUT_PATH
    seed: Optional[int] = SEED
    quality: str = DEFAULT_QUALITY
    samples_per_pixel: Optional[int] = None
    image_width: Optional[int] = None
    show_progress: bool = True

    def __post_init__(self):
        if self.thread_count < 1:
            raise ValueError(f"thread_count must be at least 1, got {self.thread_count}")
        if self.quality not in QUALITY_LEVELS:
            raise ValueError(
                f"Unknown quality level '{self.quality}', expected one of {sorted(QUALITY_LEVELS)}")

    @classmethod
    def from_env(cls) -> "RenderSettings":
        return cls(
            thread_count=int(os.getenv("RT_THREADS", str(THREAD_COUNT))),
            output_path=os.getenv("RT_OUTPUT", OUTPUT_PATH),
            seed=int(os.environ["RT_SEED"]) if os.getenv("RT_SEED") else SEED,
        )

    def resolve(self, image_width: int, samples_per_pixel: int, max_depth: int):
        """
        Apply the quality level and explicit overrides to a scene's defaults.

        Returns:
            (image_width, samples_per_pixel, max_depth)
        """
        level = QUALITY_LEVELS[self.quality]
        width = self.image_width or max(2, int(image_width * level["scale"]))
        samples = self.samples_per_pixel or max(1, int(samples_per_pixel * level["samples"]))
        depth = min(max_depth, level["bounces"])
        return width, samples, depth


__all__ = [
    "THREAD_COUNT",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "OUTPUT_PATH",
    "SEED",
    "QUALITY_LEVELS",
    "DEFAULT_QUALITY",
    "RenderSettings",
]
