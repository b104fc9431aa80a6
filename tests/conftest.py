"""
Pytest configuration and fixtures for bitmapops tests
"""

import numpy as np
import pytest


def _solid(width, height, rgba):
    """Create a bitmap filled with one RGBA value"""
    bitmap = np.zeros((height, width, 4), dtype=np.uint8)
    bitmap[...] = rgba
    return bitmap


@pytest.fixture
def red_bitmap():
    """4x4 opaque red bitmap"""
    return _solid(4, 4, (255, 0, 0, 255))


@pytest.fixture
def red_blue_bitmap():
    """4x4 bitmap, left half opaque red, right half opaque blue"""
    bitmap = _solid(4, 4, (255, 0, 0, 255))
    bitmap[:, 2:] = (0, 0, 255, 255)
    return bitmap


@pytest.fixture
def icon_bitmap():
    """4x4 bitmap with an opaque white 2x2 center and a transparent border"""
    bitmap = np.zeros((4, 4, 4), dtype=np.uint8)
    bitmap[1:3, 1:3] = (255, 255, 255, 255)
    return bitmap


@pytest.fixture
def noise_bitmap():
    """Opaque bitmap with random colors"""
    rng = np.random.default_rng(1234)
    bitmap = rng.integers(0, 256, size=(6, 5, 4), dtype=np.uint8)
    bitmap[..., 3] = 255
    return bitmap


@pytest.fixture
def solid():
    """Factory for single-color bitmaps"""
    return _solid
