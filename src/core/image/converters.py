"""
Image format conversion utilities.

Handles conversions between pixel layouts using OpenCV:
- Grayscale / BGR / BGRA normalisation to BGRA
- Alpha flattening for formats without transparency
"""

import logging

import cv2
import numpy as np

logger = logging.getLogger(__name__)


def ensure_bgra(image: np.ndarray) -> np.ndarray:
    """
    Ensure image is 8-bit BGRA (convert from grayscale or BGR if needed).

    Args:
        image: Input image (grayscale, BGR or BGRA; uint8 or uint16)

    Returns:
        New array in BGRA format, dtype uint8

    Raises:
        ValueError: If the array layout is not an image
    """
    if image.dtype == np.uint16:
        image = (image >> 8).astype(np.uint8)
    elif image.dtype != np.uint8:
        raise ValueError(f"Unsupported pixel dtype: {image.dtype}")

    if image.ndim == 3 and image.shape[2] == 1:
        image = image[:, :, 0]

    if image.ndim == 2:
        if image.size == 0:
            return np.zeros(image.shape + (4,), dtype=np.uint8)
        return cv2.cvtColor(image, cv2.COLOR_GRAY2BGRA)

    if image.ndim != 3 or image.shape[2] not in (3, 4):
        raise ValueError(f"Unsupported image shape: {image.shape}")

    if image.shape[2] == 4:
        return image.copy()

    if image.size == 0:
        return np.zeros(image.shape[:2] + (4,), dtype=np.uint8)
    return cv2.cvtColor(image, cv2.COLOR_BGR2BGRA)


def flatten_alpha(image: np.ndarray) -> np.ndarray:
    """
    Drop the alpha channel of a BGRA image by compositing it over black.

    Matches premultiplied-alpha behaviour of encoders without an alpha channel.

    Args:
        image: BGRA image

    Returns:
        BGR image, dtype uint8
    """
    bgr = image[:, :, :3].astype(np.uint16)
    alpha = image[:, :, 3:4].astype(np.uint16)
    return ((bgr * alpha + 127) // 255).astype(np.uint8)
