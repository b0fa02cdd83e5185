# materials/perlin.py
import math
from typing import Optional
import numpy as np
from core.vector import Vector3


class Perlin:
    """
    Gradient noise over 3D space built from 256 random unit vectors and
    three permutation tables, one per axis.
    """
    POINT_COUNT = 256

    def __init__(self, seed: Optional[int] = None):
        rng = np.random.default_rng(seed)
        vectors = rng.uniform(-1.0, 1.0, size=(self.POINT_COUNT, 3))
        vectors /= np.linalg.norm(vectors, axis=1, keepdims=True)
        self.ranvec = [Vector3(float(x), float(y), float(z)) for x, y, z in vectors]
        self.perm_x = rng.permutation(self.POINT_COUNT).tolist()
        self.perm_y = rng.permutation(self.POINT_COUNT).tolist()
        self.perm_z = rng.permutation(self.POINT_COUNT).tolist()

    def noise(self, p: Vector3) -> float:
        """Smooth noise in roughly [-1, 1]."""
        fx, fy, fz = math.floor(p.x), math.floor(p.y), math.floor(p.z)
        u, v, w = p.x - fx, p.y - fy, p.z - fz
        i, j, k = int(fx), int(fy), int(fz)

        c = [[[None, None], [None, None]], [[None, None], [None, None]]]
        for di in range(2):
            for dj in range(2):
                for dk in range(2):
                    c[di][dj][dk] = self.ranvec[
                        self.perm_x[(i + di) & 255]
                        ^ self.perm_y[(j + dj) & 255]
                        ^ self.perm_z[(k + dk) & 255]
                    ]
        return self._trilinear_interp(c, u, v, w)

    def turb(self, p: Vector3, depth: int = 7) -> float:
        """Sum of |noise| over `depth` octaves."""
        accum = 0.0
        temp_p = p
        weight = 1.0
        for _ in range(depth):
            accum += weight * self.noise(temp_p)
            weight *= 0.5
            temp_p = temp_p * 2
        return abs(accum)

    @staticmethod
    def _trilinear_interp(c, u: float, v: float, w: float) -> float:
        # Hermite smoothing
        uu = u * u * (3 - 2 * u)
        vv = v * v * (3 - 2 * v)
        ww = w * w * (3 - 2 * w)
        accum = 0.0
        for i in range(2):
            for j in range(2):
                for k in range(2):
                    weight = Vector3(u - i, v - j, w - k)
                    accum += ((i * uu + (1 - i) * (1 - uu))
                              * (j * vv + (1 - j) * (1 - vv))
                              * (k * ww + (1 - k) * (1 - ww))
                              * c[i][j][k].dot(weight))
        return accum
