"""
Image processing operations.

Handles image construction and manipulation on drawing surfaces:
- Solid-color image creation
- Proportional resizing
"""

import logging
import math
from typing import Optional

from common.base import Color, Size
from common.enums import Interpolation
from config import get_settings
from core.exceptions import InvalidParameterException, RenderingFailedException
from core.image.raster import RasterImage
from core.image.surface import drawing_surface
from core.utils.decorators import timer

logger = logging.getLogger(__name__)


def create_filled_image(color: Color, size: Size) -> RasterImage:
    """
    Create an image of the given size filled with a single color.

    Args:
        color: Fill color
        size: Image size in logical units (scale 1)

    Returns:
        Filled image, or an empty placeholder if the surface produced no image

    Raises:
        InvalidParameterException: If either dimension is not positive
    """
    if not size.width > 0 or not size.height > 0:
        raise InvalidParameterException(
            "size", (size.width, size.height), "width and height must be greater than 0"
        )

    try:
        with drawing_surface(size, scale=1.0) as surface:
            surface.fill(color)
            image = surface.snapshot()
    except RenderingFailedException as e:
        logger.warning(f"Failed to create filled image, returning empty image: {e}")
        return RasterImage.empty()

    if image is None:
        logger.warning(
            f"Drawing surface for {size.width}x{size.height} produced no image, "
            "returning empty image"
        )
        return RasterImage.empty()

    return image


def resize_image(
    image: RasterImage,
    width: float,
    interpolation: Optional[Interpolation] = None,
) -> RasterImage:
    """
    Resize image to a new width, keeping its aspect ratio.

    Args:
        image: Source image (unchanged)
        width: Target width in logical units
        interpolation: Resampling filter (configured default if None)

    Returns:
        New image of width x (height * width / source width) at scale 1

    Raises:
        InvalidParameterException: If width is not positive or the source is empty
        RenderingFailedException: If the resized image cannot be produced
    """
    if not (width > 0 and math.isfinite(width)):
        raise InvalidParameterException("width", width, "must be a finite number greater than 0")

    if image.is_empty:
        raise InvalidParameterException("image", repr(image), "source image has no pixels")

    source_size = image.size

    interpolation = interpolation or get_settings().image.interpolation
    scale = width / source_size.width
    new_size = Size(width=width, height=source_size.height * scale)

    with timer() as t:
        with drawing_surface(new_size, scale=1.0) as surface:
            surface.draw_image(image, interpolation=interpolation)
            resized = surface.snapshot()

    if resized is None:
        raise RenderingFailedException(
            "resize",
            f"no image for {new_size.width}x{new_size.height} "
            f"(source {source_size.width}x{source_size.height})",
        )

    logger.debug(
        f"Resized {image.pixel_width}x{image.pixel_height} to "
        f"{resized.pixel_width}x{resized.pixel_height} in {t['ms']}ms"
    )
    return resized
