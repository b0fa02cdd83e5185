# renderer/tone_mapping.py
import numpy as np


def gamma_correct(accumulated: np.ndarray, samples_per_pixel: int, gamma: float = 2.0) -> np.ndarray:
    """
    Average the accumulated sample sums and apply gamma correction.

    NaNs left by degenerate samples become black. The result is still
    unclamped linear-to-display floats.
    """
    if samples_per_pixel < 1:
        raise ValueError(f"samples_per_pixel must be at least 1, got {samples_per_pixel}")
    averaged = np.nan_to_num(accumulated / samples_per_pixel, nan=0.0, posinf=1.0, neginf=0.0)
    averaged = np.maximum(averaged, 0.0)
    return averaged ** (1.0 / gamma)


def to_rgb8(accumulated: np.ndarray, samples_per_pixel: int, gamma: float = 2.0) -> np.ndarray:
    """
    Convert accumulated color sums to 8-bit RGB.

    Channels are clamped to [0, 0.999] before scaling by 256, so every value
    in [0, 1] maps onto one of 256 equally wide bins.
    """
    mapped = gamma_correct(accumulated, samples_per_pixel, gamma)
    output = (256 * mapped.clip(0.0, 0.999)).astype("uint8")
    return output
