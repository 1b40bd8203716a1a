# renderer/image.py
"""
Turns the renderer's linear float image into 8-bit pixels and writes them
out as PPM (P3 text) or, through Pillow, PNG.
"""
import logging
import math
from pathlib import Path
from typing import Union
import numpy as np
from numba import njit
from PIL import Image

logger = logging.getLogger(__name__)

# Upper clamp before scaling by 256, so 1.0 maps to 255 rather than 256.
INTENSITY_MAX = 0.999

IMAGE_SUFFIXES = (".ppm", ".png")

@njit
def linear_to_gamma(linear_component: float) -> float:
    """Gamma 2 transform; non-positive input maps to 0."""
    if linear_component > 0:
        return math.sqrt(linear_component)
    return 0.0

@njit
def _encode_kernel(linear, out):
    height, width, _ = linear.shape
    for y in range(height):
        for x in range(width):
            for c in range(3):
                value = linear_to_gamma(linear[y, x, c])
                if value < 0.0:
                    value = 0.0
                elif value > INTENSITY_MAX:
                    value = INTENSITY_MAX
                out[y, x, c] = int(256 * value)

def encode_pixels(linear: np.ndarray) -> np.ndarray:
    """
    Gamma-corrects and quantizes a (height, width, 3) linear image to uint8.
    """
    linear = np.ascontiguousarray(linear, dtype=np.float64)
    if linear.ndim != 3 or linear.shape[2] != 3:
        raise ValueError(f"expected a (height, width, 3) image, got shape {linear.shape}")
    out = np.empty(linear.shape, dtype=np.uint8)
    _encode_kernel(linear, out)
    return out

def write_ppm(path: Union[str, Path], pixels: np.ndarray) -> None:
    """Writes encoded pixels as a P3 file, one triplet per line."""
    height, width = pixels.shape[:2]
    with open(path, "w") as f:
        f.write(f"P3\n{width} {height}\n255\n")
        for r, g, b in pixels.reshape(-1, 3):
            f.write(f"{r} {g} {b}\n")

def save_png(path: Union[str, Path], pixels: np.ndarray) -> None:
    Image.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8)).save(path)

def check_image_path(path: Union[str, Path]) -> str:
    """Returns the lower-cased suffix, or raises ValueError if it can't be written."""
    suffix = Path(path).suffix.lower()
    if suffix not in IMAGE_SUFFIXES:
        raise ValueError(f"unsupported image format '{Path(path).suffix}', use .ppm or .png")
    return suffix

def save_image(path: Union[str, Path], linear: np.ndarray) -> np.ndarray:
    """
    Encodes a linear image and saves it, choosing the format from the file
    suffix. Returns the encoded pixels.
    """
    path = Path(path)
    suffix = check_image_path(path)

    pixels = encode_pixels(linear)
    if suffix == ".ppm":
        write_ppm(path, pixels)
    else:
        save_png(path, pixels)
    logger.info("Saved %s (%dx%d)", path, pixels.shape[1], pixels.shape[0])
    return pixels
