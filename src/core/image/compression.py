"""
Lossy image compression.

JPEG encoding and decoding using OpenCV, plus byte-size measurement.
Transform helpers report failure as None; measurement helpers report 0.
"""

import logging
from typing import Optional

import cv2
import numpy as np

from common.constants import CompressionConstants, ImageConstants
from common.enums import ColorSpace
from config import get_settings
from core.exceptions import EncodingFailedException, InvalidParameterException, RasterException
from core.image.converters import ensure_bgra, flatten_alpha
from core.image.raster import RasterImage

logger = logging.getLogger(__name__)


def validate_quality(quality: float) -> float:
    """
    Check that a compression quality factor lies in [0, 1].

    Raises:
        InvalidParameterException: If quality is out of range or NaN
    """
    if not (CompressionConstants.MIN_QUALITY <= quality <= CompressionConstants.MAX_QUALITY):
        raise InvalidParameterException("quality", quality, "must be between 0.0 and 1.0")
    return float(quality)


def encode_jpeg(image: RasterImage, quality: float) -> bytes:
    """
    Encode image to JPEG bytes.

    Transparent pixels are flattened over black.

    Args:
        image: Image to encode
        quality: Quality factor in [0, 1]

    Returns:
        JPEG byte stream

    Raises:
        InvalidParameterException: If quality is out of range
        EncodingFailedException: If OpenCV cannot encode the image
    """
    quality = validate_quality(quality)
    if image.is_empty:
        raise EncodingFailedException("JPEG", "image has no pixels")

    params = [
        cv2.IMWRITE_JPEG_QUALITY,
        int(round(quality * CompressionConstants.JPEG_QUALITY_SCALE)),
    ]
    try:
        success, buffer = cv2.imencode(
            CompressionConstants.JPEG_EXTENSION, flatten_alpha(image.pixels), params
        )
    except cv2.error as e:
        raise EncodingFailedException("JPEG", str(e)) from e

    if not success:
        raise EncodingFailedException("JPEG", "encoder returned no data")

    return buffer.tobytes()


def decode_image(data: bytes, scale: float = ImageConstants.DEFAULT_SCALE) -> Optional[RasterImage]:
    """
    Decode an encoded byte stream (JPEG, PNG, ...) into an image.

    Args:
        data: Encoded image bytes
        scale: Scale of the resulting image

    Returns:
        Decoded BGRA image, or None if the data cannot be decoded
    """
    if not data:
        return None

    nparr = np.frombuffer(data, np.uint8)
    try:
        decoded = cv2.imdecode(nparr, cv2.IMREAD_UNCHANGED)
    except cv2.error as e:
        logger.warning(f"Failed to decode image: {e}")
        return None

    if decoded is None:
        logger.warning(f"Failed to decode {len(data)} bytes of image data")
        return None

    # HDR and float TIFF decode to [0, 1] floats
    if np.issubdtype(decoded.dtype, np.floating):
        decoded = np.rint(np.clip(np.nan_to_num(decoded), 0.0, 1.0) * 255.0).astype(np.uint8)

    try:
        pixels = ensure_bgra(decoded)
    except ValueError as e:
        logger.warning(f"Failed to decode image: {e}")
        return None

    return RasterImage(pixels=pixels, scale=scale, color_space=ColorSpace.SRGB)


def compressed_data(image: RasterImage, quality: Optional[float] = None) -> Optional[bytes]:
    """
    Compress image to JPEG bytes.

    Args:
        image: Image to compress
        quality: Quality factor in [0, 1] (configured default if None)

    Returns:
        JPEG bytes, or None if the image cannot be encoded

    Raises:
        InvalidParameterException: If quality is out of range
    """
    if quality is None:
        quality = get_settings().compression.default_quality

    try:
        return encode_jpeg(image, quality)
    except EncodingFailedException as e:
        logger.warning(f"Compression failed for {image!r}: {e}")
        return None


def compressed_image(image: RasterImage, quality: Optional[float] = None) -> Optional[RasterImage]:
    """
    Compress image to JPEG and decode it back.

    Args:
        image: Image to compress
        quality: Quality factor in [0, 1] (configured default if None)

    Returns:
        Re-decoded image with the source scale, or None if either step fails

    Raises:
        InvalidParameterException: If quality is out of range
    """
    data = compressed_data(image, quality)
    if data is None:
        return None
    return decode_image(data, scale=image.scale)


def byte_size(image: RasterImage) -> int:
    """Size of the image as a full-quality JPEG, in bytes (0 if it cannot be encoded)."""
    try:
        data = compressed_data(image, get_settings().compression.measurement_quality)
    except RasterException as e:
        logger.debug(f"Byte size measurement failed: {e}")
        return 0
    return len(data) if data is not None else 0


def kilobyte_size(image: RasterImage) -> int:
    """Size of the image as a full-quality JPEG, in whole kilobytes."""
    return byte_size(image) // CompressionConstants.BYTES_PER_KILOBYTE
