# materials/textures.py
import math
from typing import Optional, Union
import numpy as np
from core.utils import clamp
from core.vector import Vector3, Color
from materials.perlin import Perlin


class Texture:
    """Base class for all textures."""
    def value(self, u: float, v: float, p: Vector3) -> Color:
        """Color of the texture at surface coordinates (u, v) and world point p."""
        raise NotImplementedError("value() must be implemented by texture subclasses.")


class SolidTexture(Texture):
    """A solid color texture."""
    def __init__(self, color: Color):
        self.color = color

    def value(self, u: float, v: float, p: Vector3) -> Color:
        return self.color


def as_texture(value: Union[Color, Texture]) -> Texture:
    """Wrap a plain color in a SolidTexture; textures pass through."""
    if isinstance(value, Texture):
        return value
    if isinstance(value, Vector3):
        return SolidTexture(value)
    raise TypeError(f"Expected a Color or Texture, got {type(value).__name__}")


class CheckerTexture(Texture):
    """
    A 3D checker pattern: alternates between two textures depending on the
    sign of sin(scale*x) * sin(scale*y) * sin(scale*z) at the hit point.
    """
    def __init__(self, even: Union[Color, Texture], odd: Union[Color, Texture], scale: float = 10.0):
        self.even = as_texture(even)
        self.odd = as_texture(odd)
        self.scale = scale

    def value(self, u: float, v: float, p: Vector3) -> Color:
        sines = (math.sin(self.scale * p.x)
                 * math.sin(self.scale * p.y)
                 * math.sin(self.scale * p.z))
        if sines < 0:
            return self.odd.value(u, v, p)
        return self.even.value(u, v, p)


class NoiseTexture(Texture):
    """A marble-like procedural texture driven by Perlin turbulence."""
    def __init__(self, scale: float = 1.0, perlin: Optional[Perlin] = None, seed: Optional[int] = None):
        self.scale = scale
        self.noise = perlin if perlin is not None else Perlin(seed)

    def value(self, u: float, v: float, p: Vector3) -> Color:
        s = 0.5 * (1 + math.sin(self.scale * p.z + 10 * self.noise.turb(p)))
        return Vector3(s, s, s)


class ImageTexture(Texture):
    """
    A texture backed by an array of RGB samples in [0, 1] with shape
    (height, width, 3). Row 0 is the top of the image.

    Use materials.texture_loader.load_texture to build one from a file.
    """
    FILTERS = ("nearest", "bilinear")

    def __init__(self, data: np.ndarray, filter: str = "nearest"):
        data = np.asarray(data, dtype=np.float64)
        if data.ndim != 3 or data.shape[2] != 3 or data.shape[0] == 0 or data.shape[1] == 0:
            raise ValueError(f"Image texture data must have shape (height, width, 3), got {data.shape}")
        if filter not in self.FILTERS:
            raise ValueError(f"Unknown texture filter '{filter}', expected one of {self.FILTERS}")
        self.data = data
        self.height, self.width = data.shape[0], data.shape[1]
        self.filter = filter

    def value(self, u: float, v: float, p: Vector3) -> Color:
        # Clamp input texture coordinates to [0,1] x [1,0]
        u = clamp(u, 0.0, 1.0)
        v = 1.0 - clamp(v, 0.0, 1.0)  # Flip V to image coordinates

        if self.filter == "bilinear":
            return self._bilinear(u, v)

        x = min(int(u * self.width), self.width - 1)
        y = min(int(v * self.height), self.height - 1)
        r, g, b = self.data[y, x]
        return Vector3(float(r), float(g), float(b))

    def _bilinear(self, u: float, v: float) -> Color:
        fx = u * self.width - 0.5
        fy = v * self.height - 0.5
        x0 = int(math.floor(fx))
        y0 = int(math.floor(fy))
        tx = fx - x0
        ty = fy - y0
        x0c, x1c = clamp(x0, 0, self.width - 1), clamp(x0 + 1, 0, self.width - 1)
        y0c, y1c = clamp(y0, 0, self.height - 1), clamp(y0 + 1, 0, self.height - 1)
        top = self.data[y0c, x0c] * (1 - tx) + self.data[y0c, x1c] * tx
        bottom = self.data[y1c, x0c] * (1 - tx) + self.data[y1c, x1c] * tx
        r, g, b = top * (1 - ty) + bottom * ty
        return Vector3(float(r), float(g), float(b))
