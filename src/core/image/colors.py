"""
Color sampling utilities.

Average color computation with an explicit working color space, and the
sRGB transfer curve used to move between encoded and linear values.
"""

import logging
from typing import Optional

import numpy as np

from common.base import Color
from common.constants import ColorConstants, ImageConstants
from common.enums import ColorSpace
from config import get_settings
from core.image.raster import RasterImage

logger = logging.getLogger(__name__)


def srgb_to_linear(values: np.ndarray) -> np.ndarray:
    """
    Decode sRGB-encoded values in [0, 1] to linear light.

    Args:
        values: Encoded channel values in [0, 1]

    Returns:
        Linear channel values in [0, 1]
    """
    values = np.asarray(values, dtype=np.float64)
    return np.where(
        values <= ColorConstants.SRGB_LINEAR_THRESHOLD,
        values / ColorConstants.SRGB_LINEAR_SLOPE,
        ((values + ColorConstants.SRGB_OFFSET) / (1 + ColorConstants.SRGB_OFFSET))
        ** ColorConstants.SRGB_GAMMA,
    )


def linear_to_srgb(values: np.ndarray) -> np.ndarray:
    """
    Encode linear-light values in [0, 1] with the sRGB transfer curve.

    Args:
        values: Linear channel values in [0, 1]

    Returns:
        Encoded channel values in [0, 1]
    """
    values = np.clip(np.asarray(values, dtype=np.float64), 0.0, 1.0)
    return np.where(
        values <= ColorConstants.SRGB_ENCODED_THRESHOLD,
        values * ColorConstants.SRGB_LINEAR_SLOPE,
        (1 + ColorConstants.SRGB_OFFSET) * values ** (1 / ColorConstants.SRGB_GAMMA)
        - ColorConstants.SRGB_OFFSET,
    )


def _convert(values: np.ndarray, source: ColorSpace, target: ColorSpace) -> np.ndarray:
    if source == target:
        return values
    if target == ColorSpace.LINEAR:
        return srgb_to_linear(values)
    return linear_to_srgb(values)


def average_color(
    image: RasterImage, working_space: Optional[ColorSpace] = None
) -> Optional[Color]:
    """
    Compute the average color of an image.

    The working space is, in order: the explicit argument, the image's own
    color space, the configured default. Channels are averaged in the working
    space and the result is expressed in the image's color space, quantised
    to 8 bits per channel.

    Args:
        image: Image to sample
        working_space: Color space to average in

    Returns:
        Average color, or None for an empty image
    """
    if image.is_empty:
        return None

    native_space = image.color_space or ColorSpace.SRGB
    space = working_space or image.color_space or get_settings().color.default_working_space

    pixels = image.pixels.reshape(-1, ImageConstants.CHANNELS).astype(np.float64) / 255.0
    bgr = _convert(pixels[:, :3], native_space, space)

    mean_bgr = _convert(bgr.mean(axis=0), space, native_space)
    mean_alpha = pixels[:, 3].mean()

    # 8-bit readout
    blue, green, red, alpha = (
        int(v) for v in np.clip(np.rint(np.append(mean_bgr, mean_alpha) * 255.0), 0, 255)
    )
    logger.debug(f"Average color of {image!r} in {space.value}: {(red, green, blue, alpha)}")
    return Color.from_rgba8(red, green, blue, alpha)
