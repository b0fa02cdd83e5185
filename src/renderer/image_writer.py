# renderer/image_writer.py
import logging
from pathlib import Path
from typing import TextIO, Union
import numpy as np
from PIL import Image
from renderer.pixel_buffer import PixelBuffer
from renderer.tone_mapping import to_rgb8

logger = logging.getLogger(__name__)


def write_ppm(stream: TextIO, rgb8: np.ndarray):
    """
    Write an 8-bit (height, width, 3) image as plain-text PPM (P3), one
    "R G B" line per pixel starting from the top row.
    """
    height, width = rgb8.shape[0], rgb8.shape[1]
    stream.write(f"P3\n{width} {height}\n255\n")
    for r, g, b in rgb8.reshape(-1, 3):
        stream.write(f"{r} {g} {b}\n")


def save_image(path: Union[str, Path], buffer: PixelBuffer, samples_per_pixel: int):
    """
    Tone-map a finished buffer and write it to `path`.

    `.ppm` files are written as P3 text; any other suffix is handed to Pillow.
    """
    path = Path(path)
    rgb8 = to_rgb8(buffer.data, samples_per_pixel)
    logger.info(">>> WRITING TO FILE <<< %s", path)
    if path.suffix.lower() == ".ppm":
        with open(path, "w") as stream:
            write_ppm(stream, rgb8)
    else:
        Image.fromarray(rgb8).save(path)
