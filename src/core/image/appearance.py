"""
Rendering mode and tint helpers.
"""

from typing import Optional

import numpy as np

from common.base import Color
from common.enums import RenderingMode
from core.image.raster import RasterImage


def tinted(image: RasterImage, color: Color) -> RasterImage:
    """
    Recolor every pixel with color, keeping the image's alpha as a mask.

    Args:
        image: Source image
        color: Tint color; its alpha scales the image alpha

    Returns:
        Tinted image with the source rendering mode
    """
    if image.is_empty:
        return image

    blue, green, red, _ = color.to_bgra8()
    pixels = np.empty_like(image.pixels)
    pixels[:, :, 0] = blue
    pixels[:, :, 1] = green
    pixels[:, :, 2] = red
    pixels[:, :, 3] = np.rint(image.alpha.astype(np.float32) * color.alpha).astype(np.uint8)

    return RasterImage(
        pixels=pixels,
        scale=image.scale,
        rendering_mode=image.rendering_mode,
        color_space=image.color_space,
    )


def always_original(image: RasterImage, tint: Optional[Color] = None) -> RasterImage:
    """Image that is always drawn as-is, optionally tinted first."""
    if tint is not None:
        image = tinted(image, tint)
    return image.with_rendering_mode(RenderingMode.ALWAYS_ORIGINAL)


def always_template(image: RasterImage) -> RasterImage:
    """Image that is always drawn as a tint mask."""
    return image.with_rendering_mode(RenderingMode.ALWAYS_TEMPLATE)


def rendered(image: RasterImage, tint: Color) -> RasterImage:
    """What a consumer draws: template images take the tint, others are unchanged."""
    if image.rendering_mode == RenderingMode.ALWAYS_TEMPLATE:
        return tinted(image, tint)
    return image
