"""Pytest configuration and shared fixtures."""

import random
import sys
from pathlib import Path

import pytest

# Add the source tree to the path
src_root = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_root))

from core.vector import Vector3  # noqa: E402
from geometry.hittable import HitRecord  # noqa: E402


@pytest.fixture
def rng():
    """Seeded generator so sampling-based tests are reproducible."""
    return random.Random(1234)


@pytest.fixture
def upward_hit():
    """Front-face hit at the origin of a surface facing +y."""
    def make(material=None):
        return HitRecord(p=Vector3(0, 0, 0), normal=Vector3(0, 1, 0), t=1.0,
                         u=0.5, v=0.5, front_face=True, material=material)
    return make


def assert_vec_close(a, b, tol=1e-9):
    assert abs(a.x - b.x) < tol and abs(a.y - b.y) < tol and abs(a.z - b.z) < tol, f"{a!r} != {b!r}"
