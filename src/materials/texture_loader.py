# materials/texture_loader.py
import logging
import os
from PIL import Image, UnidentifiedImageError
import numpy as np
from materials.textures import ImageTexture

logger = logging.getLogger(__name__)


def load_texture(image_path: str, filter: str = "nearest") -> ImageTexture:
    """
    Load an image file as a texture, with error handling and automatic format conversion.

    Args:
        image_path: Path to the image file
        filter: "nearest" or "bilinear" sampling

    Returns:
        ImageTexture object

    Raises:
        FileNotFoundError: If the image file doesn't exist
        ValueError: If the image cannot be decoded
    """
    if not os.path.exists(image_path):
        raise FileNotFoundError(f"Texture file not found: {image_path}")

    try:
        with Image.open(image_path) as img:
            # Convert to RGB if necessary
            if img.mode != 'RGB':
                img = img.convert('RGB')
            data = np.asarray(img, dtype=np.float64) / 255.0  # Normalize to [0,1]
    except (UnidentifiedImageError, OSError) as e:
        raise ValueError(f"Error loading texture {image_path}: {e}") from e

    logger.info("Loaded texture %s (%dx%d)", image_path, data.shape[1], data.shape[0])
    return ImageTexture(data, filter=filter)


def create_image_material(image_path: str, material_class, **material_params):
    """
    Create a material with an image texture.

    Args:
        image_path: Path to the image file
        material_class: Material class to instantiate (e.g., Lambertian, DiffuseLight)
        **material_params: Additional parameters for the material

    Returns:
        Material instance with the image texture
    """
    texture = load_texture(image_path)
    return material_class(texture, **material_params)
