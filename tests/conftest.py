"""
Shared fixtures: small synthetic images written to tmp_path.
"""
import numpy as np
import pytest
from PIL import Image


@pytest.fixture
def two_tone_image(tmp_path):
    """64x64 PNG, left half navy, right half cream."""
    img = np.zeros((64, 64, 3), dtype=np.uint8)
    img[:, :32] = (10, 20, 80)
    img[:, 32:] = (240, 230, 200)
    path = tmp_path / "two_tone.png"
    Image.fromarray(img).save(path)
    return path


@pytest.fixture
def solid_image(tmp_path):
    """32x32 PNG filled with a single color."""
    path = tmp_path / "solid.png"
    Image.new('RGB', (32, 32), (200, 100, 50)).save(path)
    return path
