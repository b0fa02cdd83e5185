"""Tests for tone mapping and image output."""

import io

import numpy as np
import pytest
from PIL import Image

from core.vector import Vector3
from renderer.image_writer import save_image, write_ppm
from renderer.pixel_buffer import PixelBuffer
from renderer.tone_mapping import gamma_correct, to_rgb8


def test_gamma_correct_averages_then_takes_sqrt():
    accumulated = np.array([[[0.25 * 4, 1.0 * 4, 0.0]]])
    assert np.allclose(gamma_correct(accumulated, 4), [[[0.5, 1.0, 0.0]]])


def test_to_rgb8_scales_and_clamps():
    accumulated = np.array([[[0.0, 0.25, 1.0], [9.0, -1.0, np.nan]]])
    rgb8 = to_rgb8(accumulated, 1)
    assert rgb8.dtype == np.uint8
    assert rgb8.tolist() == [[[0, 128, 255], [255, 0, 0]]]


def test_to_rgb8_rejects_zero_samples():
    with pytest.raises(ValueError):
        to_rgb8(np.zeros((1, 1, 3)), 0)


def test_write_ppm_layout():
    rgb8 = np.array([
        [[255, 0, 0], [0, 255, 0]],
        [[0, 0, 255], [10, 20, 30]],
    ], dtype=np.uint8)
    stream = io.StringIO()
    write_ppm(stream, rgb8)
    assert stream.getvalue().splitlines() == [
        "P3",
        "2 2",
        "255",
        "255 0 0",
        "0 255 0",
        "0 0 255",
        "10 20 30",
    ]


def test_pixel_buffer_roundtrip():
    buffer = PixelBuffer(3, 2)
    assert len(buffer) == 6
    buffer.set(1, 2, Vector3(0.5, 1.5, 2.5))
    assert buffer.get(1, 2) == Vector3(0.5, 1.5, 2.5)
    assert buffer.data[1, 2].tolist() == [0.5, 1.5, 2.5]
    assert buffer.get(0, 0) == Vector3(0, 0, 0)


def test_save_image_ppm(tmp_path):
    buffer = PixelBuffer(2, 1)
    buffer.set(0, 0, Vector3(2, 2, 2))
    path = tmp_path / "out.ppm"
    save_image(path, buffer, 2)
    lines = path.read_text().splitlines()
    assert lines[:3] == ["P3", "2 1", "255"]
    assert lines[3:] == ["255 255 255", "0 0 0"]


def test_save_image_png(tmp_path):
    buffer = PixelBuffer(3, 2)
    buffer.set(1, 0, Vector3(1, 0, 0))
    path = tmp_path / "out.png"
    save_image(path, buffer, 1)
    with Image.open(path) as img:
        assert img.size == (3, 2)
        assert img.getpixel((0, 1)) == (255, 0, 0)
        assert img.getpixel((0, 0)) == (0, 0, 0)
