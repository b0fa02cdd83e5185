"""Tests for the scene builders, configuration and entry point."""

import random

import numpy as np
import pytest
from PIL import Image

import main
from camera.camera import Camera
from core.config import QUALITY_LEVELS, RenderSettings
from core.ray import Ray
from core.vector import Vector3
from geometry import FlipFace, MovingSphere, XZRect
from materials.diffuse_light import DiffuseLight
from renderer.background import SkyGradient, SolidBackground, as_background
from renderer.raytracer import Renderer, ray_color
from scenes.builders import SCENES, SceneSetup, build_scene, cornell_box, earth, random_scene


class TestBuilders:
    @pytest.mark.parametrize("name", ["random", "two_spheres", "two_perlin_spheres",
                                      "simple_light", "cornell_box"])
    def test_builds_scene_and_camera(self, name):
        setup = build_scene(name)
        assert isinstance(setup, SceneSetup)
        assert len(setup.world) > 0
        assert isinstance(setup.make_camera(), Camera)
        assert setup.image_height >= 1

    def test_unknown_scene(self):
        with pytest.raises(KeyError, match="cornell_box"):
            build_scene("teapot")

    def test_random_scene_is_reproducible(self):
        a = random_scene(random.Random(5))
        b = random_scene(random.Random(5))
        assert len(a.world) == len(b.world)
        assert [type(o) for o in a.world] == [type(o) for o in b.world]
        assert any(isinstance(o, MovingSphere) for o in a.world)

    def test_random_scene_background_modes(self):
        assert isinstance(random_scene(random.Random(1)).background, SolidBackground)
        assert isinstance(random_scene(random.Random(1), gradient_sky=True).background, SkyGradient)

    def test_cornell_box_setup(self):
        setup = cornell_box()
        assert setup.background == Vector3(0, 0, 0)
        assert (setup.image_width, setup.image_height) == (600, 600)
        assert setup.samples_per_pixel == 200
        lights = [o for o in setup.world if isinstance(o.material, DiffuseLight)]
        assert len(lights) == 1
        assert isinstance(lights[0], FlipFace) and isinstance(lights[0].obj, XZRect)

    def test_cornell_light_shines_into_the_box(self, rng):
        setup = cornell_box()
        ray = Ray(Vector3(278, 278, 278), Vector3(0, 1, 0))
        color = ray_color(ray, as_background(setup.background), setup.world, 5, rng)
        assert color == Vector3(15, 15, 15)

    def test_cornell_box_small_render_is_lit(self):
        setup = cornell_box()
        renderer = Renderer(8, 8, samples_per_pixel=16, max_depth=6, thread_count=2,
                            seed=3, show_progress=False)
        buffer = renderer.render(setup.world, setup.make_camera(), setup.background)
        assert buffer.data.mean() / 16 > 0.01

    def test_earth_requires_texture(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            earth(str(tmp_path / "earthmap.jpg"))

    def test_earth_with_texture(self, tmp_path):
        path = tmp_path / "earthmap.png"
        Image.fromarray(np.full((4, 8, 3), 128, dtype=np.uint8)).save(path)
        setup = build_scene("earth", texture_path=str(path))
        assert len(setup.world) == 1

    def test_registry_names(self):
        assert set(SCENES) == {"random", "two_spheres", "two_perlin_spheres", "earth",
                               "simple_light", "cornell_box"}


class TestSettings:
    def test_defaults(self):
        settings = RenderSettings(thread_count=4)
        assert settings.quality in QUALITY_LEVELS
        assert settings.seed is None or isinstance(settings.seed, int)

    def test_resolve_scales_scene_defaults(self):
        width, samples, depth = RenderSettings(quality="preview").resolve(400, 100, 50)
        assert (width, samples, depth) == (100, 10, 10)

    def test_resolve_overrides_win(self):
        settings = RenderSettings(quality="preview", samples_per_pixel=3, image_width=32)
        assert settings.resolve(400, 100, 50) == (32, 3, 10)

    def test_invalid_settings(self):
        with pytest.raises(ValueError):
            RenderSettings(thread_count=0)
        with pytest.raises(ValueError):
            RenderSettings(quality="ultra")

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("RT_THREADS", "2")
        monkeypatch.setenv("RT_SEED", "11")
        settings = RenderSettings.from_env()
        assert settings.thread_count == 2
        assert settings.seed == 11


class TestMain:
    def test_renders_small_image(self, tmp_path):
        output = tmp_path / "out.ppm"
        status = main.main(["--scene", "cornell_box", "--width", "8", "--samples", "1",
                            "--quality", "preview", "--threads", "2", "--seed", "1",
                            "--output", str(output), "--no-progress"])
        assert status == 0
        lines = output.read_text().splitlines()
        assert lines[:3] == ["P3", "8 8", "255"]
        assert len(lines) == 3 + 64

    def test_missing_texture_is_reported(self, tmp_path):
        status = main.main(["--scene", "earth", "--texture", str(tmp_path / "nope.jpg"),
                            "--output", str(tmp_path / "out.ppm"), "--no-progress"])
        assert status == 2

    def test_invalid_thread_count(self, tmp_path):
        status = main.main(["--scene", "two_spheres", "--threads", "0",
                            "--output", str(tmp_path / "out.ppm"), "--no-progress"])
        assert status == 2

    def test_seed_makes_random_scene_reproducible(self, tmp_path):
        outputs = []
        for name in ("a.ppm", "b.ppm"):
            output = tmp_path / name
            status = main.main(["--scene", "random", "--width", "8", "--samples", "1",
                                "--quality", "preview", "--threads", "2", "--seed", "5",
                                "--output", str(output), "--no-progress"])
            assert status == 0
            outputs.append(output.read_text())
        assert outputs[0] == outputs[1]

    def test_scene_kwargs_seed_the_random_scene(self):
        args = main.parse_args(["--scene", "random", "--seed", "9"])
        first = main.scene_kwargs(args)["rng"].random()
        assert main.scene_kwargs(args)["rng"].random() == first
        perlin_args = main.parse_args(["--scene", "two_perlin_spheres", "--seed", "9"])
        assert main.scene_kwargs(perlin_args) == {"seed": 9}
