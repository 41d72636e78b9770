"""
Pytest configuration and fixtures for Raster Kit tests
"""

import os

import cv2
import numpy as np
import pytest

from config import get_settings
from core.image.raster import RasterImage


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate every test from RASTER_* environment variables and cached settings"""
    for key in list(os.environ):
        if key.upper().startswith("RASTER_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_image():
    """Create a 640x480 test image"""
    image = np.zeros((480, 640, 3), dtype=np.uint8)
    # Add some content
    cv2.rectangle(image, (100, 100), (300, 300), (255, 255, 255), -1)
    cv2.circle(image, (450, 350), 50, (128, 128, 128), -1)
    return RasterImage.from_array(image)


@pytest.fixture
def gradient_image():
    """Create a 200x100 horizontal gradient image"""
    image = np.zeros((100, 200, 3), dtype=np.uint8)
    for i in range(200):
        image[:, i] = [i * 255 // 200, 100, 255 - i * 255 // 200]
    return RasterImage.from_array(image)


@pytest.fixture
def noise_image():
    """Create a 128x128 random noise image"""
    rng = np.random.default_rng(42)
    image = rng.integers(0, 256, (128, 128, 3), dtype=np.uint8)
    return RasterImage.from_array(image)


@pytest.fixture
def transparent_image():
    """Create a 40x20 image whose left half is opaque red and right half transparent"""
    image = np.zeros((20, 40, 4), dtype=np.uint8)
    image[:, :20] = (0, 0, 255, 255)
    return RasterImage(pixels=image)
