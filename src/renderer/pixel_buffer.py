# renderer/pixel_buffer.py
import numpy as np
from core.vector import Vector3, Color


class PixelBuffer:
    """
    Accumulated (unnormalized, linear) color sums, one slot per pixel.

    Indexed by (row, column) with row 0 at the top of the image. Each slot is
    written by exactly one render task, so no locking is needed.
    """
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.data = np.zeros((height, width, 3), dtype=np.float64)

    def set(self, row: int, column: int, color: Color):
        self.data[row, column] = (color.x, color.y, color.z)

    def get(self, row: int, column: int) -> Color:
        r, g, b = self.data[row, column]
        return Vector3(float(r), float(g), float(b))

    def __len__(self) -> int:
        return self.width * self.height

    def __repr__(self) -> str:
        return f"PixelBuffer({self.width}x{self.height})"
