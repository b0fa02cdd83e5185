# renderer/background.py
from typing import Union
from core.ray import Ray
from core.vector import Vector3, Color


class Background:
    """Radiance returned for rays that leave the scene."""
    def value(self, ray: Ray) -> Color:
        raise NotImplementedError("value() must be implemented by subclasses.")


class SolidBackground(Background):
    """Constant background; black gives scenes lit only by their emitters."""
    def __init__(self, color: Color):
        self.color = color

    def value(self, ray: Ray) -> Color:
        return self.color

    def __repr__(self) -> str:
        return f"SolidBackground({self.color!r})"


class SkyGradient(Background):
    """
    Vertical blend from `bottom` (looking straight down) to `top` (looking
    straight up), driven by the y component of the unit ray direction.
    """
    def __init__(self, bottom: Color = Vector3(1.0, 1.0, 1.0), top: Color = Vector3(0.5, 0.7, 1.0)):
        self.bottom = bottom
        self.top = top

    def value(self, ray: Ray) -> Color:
        unit_direction = ray.direction.normalize()
        t = 0.5 * (unit_direction.y + 1.0)
        return self.bottom * (1.0 - t) + self.top * t

    def __repr__(self) -> str:
        return f"SkyGradient({self.bottom!r}, {self.top!r})"


def as_background(value: Union[Color, Background]) -> Background:
    if isinstance(value, Background):
        return value
    if isinstance(value, Vector3):
        return SolidBackground(value)
    raise TypeError(f"Expected a Color or Background, got {type(value).__name__}")
