"""Tests for material scattering and emission."""

import random

import pytest

from conftest import assert_vec_close
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import HitRecord
from materials.dielectric import Dielectric
from materials.diffuse_light import DiffuseLight
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.textures import CheckerTexture, SolidTexture


def incoming(direction=Vector3(1, -1, 0), time=0.3):
    return Ray(Vector3(-1, 1, 0), direction, time)


class TestLambertian:
    def test_always_scatters_above_surface(self, rng, upward_hit):
        mat = Lambertian(Vector3(0.8, 0.5, 0.2))
        rec = upward_hit(mat)
        for _ in range(200):
            scattered, attenuation = mat.scatter(incoming(), rec, rng)
            assert scattered.origin == rec.p
            # normal + unit vector never points below the tangent plane
            assert scattered.direction.dot(rec.normal) >= 0
            assert attenuation == Vector3(0.8, 0.5, 0.2)

    def test_keeps_ray_time(self, rng, upward_hit):
        mat = Lambertian(Vector3(0.5, 0.5, 0.5))
        scattered, _ = mat.scatter(incoming(time=0.75), upward_hit(mat), rng)
        assert scattered.time == 0.75

    def test_attenuation_never_exceeds_texture(self, rng):
        checker = CheckerTexture(Vector3(0.2, 0.3, 0.1), Vector3(0.9, 0.9, 0.9))
        mat = Lambertian(checker)
        for _ in range(100):
            p = Vector3.random(rng, -5, 5)
            rec = HitRecord(p=p, normal=Vector3(0, 1, 0), t=1.0, material=mat)
            _, attenuation = mat.scatter(incoming(), rec, rng)
            assert all(0.0 <= c <= 0.9 for c in attenuation)

    def test_degenerate_direction_replaced_by_normal(self, upward_hit):
        class OppositeRandom(random.Random):
            """Always samples (0, -0.5, 0), which normalizes to minus the +y normal."""
            def __init__(self):
                super().__init__(0)
                self.draws = 0

            def uniform(self, a, b):
                value = -0.5 if self.draws % 3 == 1 else 0.0
                self.draws += 1
                return value

        mat = Lambertian(Vector3(1, 1, 1))
        rec = upward_hit(mat)
        scattered, _ = mat.scatter(incoming(), rec, OppositeRandom())
        assert scattered.direction == rec.normal

    def test_accepts_texture(self, rng, upward_hit):
        mat = Lambertian(SolidTexture(Vector3(0.1, 0.2, 0.3)))
        _, attenuation = mat.scatter(incoming(), upward_hit(mat), rng)
        assert attenuation == Vector3(0.1, 0.2, 0.3)

    def test_emits_nothing(self):
        assert Lambertian(Vector3(1, 1, 1)).emitted(0, 0, Vector3(0, 0, 0)) == Vector3(0, 0, 0)


class TestMetal:
    def test_zero_fuzz_is_perfect_mirror(self, rng, upward_hit):
        mat = Metal(Vector3(0.7, 0.6, 0.5), 0.0)
        rec = upward_hit(mat)
        d = Vector3(1, -2, 0.5)
        scattered, attenuation = mat.scatter(incoming(d), rec, rng)
        unit = d.normalize()
        assert scattered.direction.dot(rec.normal) == pytest.approx(-unit.dot(rec.normal))
        assert_vec_close(scattered.direction, Vector3(unit.x, -unit.y, unit.z))
        assert attenuation == Vector3(0.7, 0.6, 0.5)

    def test_fuzz_is_clamped(self):
        assert Metal(Vector3(1, 1, 1), 3.0).fuzz == 1

    def test_negative_fuzz_rejected(self):
        with pytest.raises(ValueError):
            Metal(Vector3(1, 1, 1), -0.1)

    def test_absorbs_when_reflection_points_into_surface(self, rng, upward_hit):
        mat = Metal(Vector3(1, 1, 1), 1.0)
        rec = upward_hit(mat)
        # Grazing incidence: fuzz pushes many reflections below the surface
        results = [mat.scatter(incoming(Vector3(1, -0.01, 0)), rec, rng) for _ in range(300)]
        absorbed = [r for r in results if r is None]
        scattered = [r for r in results if r is not None]
        assert absorbed
        assert all(ray.direction.dot(rec.normal) > 0 for ray, _ in scattered)


class TestDielectric:
    def test_never_absorbs_and_is_white(self, rng, upward_hit):
        mat = Dielectric(1.5)
        rec = upward_hit(mat)
        for _ in range(100):
            scattered, attenuation = mat.scatter(incoming(Vector3.random(rng, -1, 1) - Vector3(0, 2, 0)), rec, rng)
            assert scattered is not None
            assert attenuation == Vector3(1, 1, 1)

    def test_matching_index_passes_straight_through(self, upward_hit):
        mat = Dielectric(1.0)
        rec = upward_hit(mat)
        d = Vector3(0.1, -1, 0.05)

        class NeverReflect(random.Random):
            def random(self):
                return 1.0

        scattered, _ = mat.scatter(incoming(d), rec, NeverReflect())
        assert_vec_close(scattered.direction, d.normalize())

    def test_total_internal_reflection(self, rng):
        mat = Dielectric(1.5)
        # Leaving glass at a grazing angle: ratio * sin(theta) > 1
        rec = HitRecord(p=Vector3(0, 0, 0), normal=Vector3(0, -1, 0), t=1.0,
                        front_face=False, material=mat)
        d = Vector3(1, 0.2, 0).normalize()
        for _ in range(20):
            scattered, _ = mat.scatter(incoming(d), rec, rng)
            assert_vec_close(scattered.direction, Vector3(d.x, -d.y, d.z))

    def test_invalid_index_rejected(self):
        with pytest.raises(ValueError):
            Dielectric(0)


class TestDiffuseLight:
    def test_never_scatters(self, rng, upward_hit):
        mat = DiffuseLight(Vector3(4, 4, 4))
        assert mat.scatter(incoming(), upward_hit(mat), rng) is None

    def test_emits_on_front_face_only(self):
        mat = DiffuseLight(Vector3(4, 4, 4))
        p = Vector3(0, 0, 0)
        assert mat.emitted(0.5, 0.5, p) == Vector3(4, 4, 4)
        assert mat.emitted(0.5, 0.5, p, front_face=True) == Vector3(4, 4, 4)
        assert mat.emitted(0.5, 0.5, p, front_face=False) == Vector3(0, 0, 0)

    def test_textured_emission(self):
        mat = DiffuseLight(CheckerTexture(Vector3(1, 0, 0), Vector3(0, 0, 1), scale=1.0))
        assert mat.emitted(0, 0, Vector3(1, 1, 1)) == Vector3(1, 0, 0)
        assert mat.emitted(0, 0, Vector3(-1, 1, 1)) == Vector3(0, 0, 1)
