"""
Turn an image file into a fixed grid of RGB samples for clustering.
"""

from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image


# =============================================================================
# Constants
# =============================================================================

DEFAULT_GRID = 100  # Samples per side of the downsampled grid

# Image size limits (security: prevent decompression bombs)
MAX_IMAGE_PIXELS = 50_000_000  # 50 megapixels
MAX_IMAGE_DIMENSION = 10_000  # 10k pixels per side


# =============================================================================
# Loading
# =============================================================================

def load_image(image_path: Union[str, Path]) -> Image.Image:
    """
    Open an image and check it against the size limits.

    Raises:
        FileNotFoundError: If image file doesn't exist
        ValueError: If file is not a valid image or exceeds size limits
    """
    try:
        img = Image.open(image_path)
    except FileNotFoundError:
        raise FileNotFoundError(f"Image not found: {image_path}")
    except Exception as e:
        raise ValueError(f"Could not open image: {e}")

    width, height = img.size
    if width > MAX_IMAGE_DIMENSION or height > MAX_IMAGE_DIMENSION:
        raise ValueError(
            f"Image dimensions {width}x{height} exceed maximum "
            f"{MAX_IMAGE_DIMENSION}x{MAX_IMAGE_DIMENSION}"
        )
    if width * height > MAX_IMAGE_PIXELS:
        raise ValueError(
            f"Image has {width * height:,} pixels, exceeding maximum {MAX_IMAGE_PIXELS:,}"
        )

    return img


def flatten_alpha(img: Image.Image) -> Image.Image:
    """Composite over opaque black so transparent pixels sample as black."""
    rgba = img.convert('RGBA')
    background = Image.new('RGBA', rgba.size, (0, 0, 0, 255))
    return Image.alpha_composite(background, rgba).convert('RGB')


# =============================================================================
# Sampling
# =============================================================================

def samples_from_array(pixels: np.ndarray) -> np.ndarray:
    """
    Flatten an (h, w, 3) or (h, w, 4) uint8 array into (h*w, 3) samples.

    Alpha, if present, is composited over black. Rows are read top to bottom,
    pixels left to right.
    """
    if pixels.ndim != 3 or pixels.shape[2] not in (3, 4):
        raise ValueError(f"Expected pixels shaped (h, w, 3|4), got {pixels.shape}")

    rgb = pixels[..., :3].astype(np.float64)
    if pixels.shape[2] == 4:
        alpha = pixels[..., 3:4].astype(np.float64) / 255.0
        rgb = np.round(rgb * alpha)
    return rgb.reshape(-1, 3)


def sample_grid(source: Union[str, Path, Image.Image], grid: int = DEFAULT_GRID) -> np.ndarray:
    """
    Downsample an image to grid x grid and return its pixels as samples.

    Args:
        source: Image path or an already opened PIL image
        grid: Samples per side

    Returns:
        float64 array of shape (grid * grid, 3) with 0-255 intensities
    """
    if grid <= 0:
        raise ValueError(f"grid must be positive, got {grid}")

    img = source if isinstance(source, Image.Image) else load_image(source)
    img = flatten_alpha(img)
    img = img.resize((grid, grid), Image.Resampling.BILINEAR)

    return samples_from_array(np.asarray(img, dtype=np.uint8))
