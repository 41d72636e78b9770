"""
Constants and configuration values for Raster Kit.
Centralizes all magic numbers and configuration constants.
"""


# Image Constants
class ImageConstants:
    """Constants related to raster images and drawing surfaces."""

    # Pixel layout (OpenCV BGRA, 8 bits per channel)
    CHANNELS = 4
    CHANNEL_MAX = 255
    ALPHA_CHANNEL = 3

    # Scale
    DEFAULT_SCALE = 1.0

    # Resizing
    DEFAULT_INTERPOLATION = "area"


# Compression Constants
class CompressionConstants:
    """Constants related to lossy (JPEG) encoding."""

    JPEG_EXTENSION = ".jpg"
    DEFAULT_QUALITY = 0.5
    MEASUREMENT_QUALITY = 1.0  # Full quality, used as a size proxy
    MIN_QUALITY = 0.0
    MAX_QUALITY = 1.0
    JPEG_QUALITY_SCALE = 100  # OpenCV expects 0-100
    BYTES_PER_KILOBYTE = 1024


# Color Constants
class ColorConstants:
    """Constants for color averaging and transfer curves."""

    DEFAULT_WORKING_SPACE = "srgb"

    # sRGB transfer function (IEC 61966-2-1)
    SRGB_LINEAR_THRESHOLD = 0.04045
    SRGB_ENCODED_THRESHOLD = 0.0031308
    SRGB_LINEAR_SLOPE = 12.92
    SRGB_GAMMA = 2.4
    SRGB_OFFSET = 0.055


# Symbol Constants
class SymbolConstants:
    """Constants for symbol (icon) image rendering."""

    DEFAULT_POINT_SIZE = 17.0
    DEFAULT_WEIGHT = "regular"

    # Glyph inset from the canvas edge, as a fraction of the canvas side
    GLYPH_INSET = 0.12

    # Stroke width as a fraction of point size, per weight
    STROKE_RATIOS = {
        "ultralight": 0.025,
        "thin": 0.04,
        "light": 0.055,
        "regular": 0.07,
        "medium": 0.085,
        "semibold": 0.1,
        "bold": 0.12,
        "heavy": 0.14,
        "black": 0.16,
    }


# System Constants
class SystemConstants:
    """Constants for system operations."""

    # Logging
    LOG_LEVEL_DEFAULT = "INFO"
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

    # Environments
    VALID_ENVIRONMENTS = ["development", "staging", "production", "test"]


# Color Constants (BGRA format for OpenCV)
class Colors:
    """Standard colors for drawing operations (BGRA format)."""

    BLACK = (0, 0, 0, 255)
    CLEAR = (0, 0, 0, 0)
