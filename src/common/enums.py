"""
Centralized enums for Raster Kit.

This module contains all enumeration types used throughout the library,
providing a single source of truth for enum definitions.
"""

from enum import Enum


# Rendering mode enums
class RenderingMode(str, Enum):
    """How a consumer should draw an image."""

    AUTOMATIC = "automatic"
    ALWAYS_ORIGINAL = "always_original"
    ALWAYS_TEMPLATE = "always_template"


# Resampling enums
class Interpolation(str, Enum):
    """Resampling filters used when an image is drawn stretched."""

    NEAREST = "nearest"
    LINEAR = "linear"
    CUBIC = "cubic"
    AREA = "area"
    LANCZOS4 = "lanczos4"


# Color space enums
class ColorSpace(str, Enum):
    """Color spaces an image's pixel values can be expressed in."""

    SRGB = "srgb"  # Gamma-encoded sRGB
    LINEAR = "linear"  # Linear-light sRGB primaries


# Symbol enums
class SymbolWeight(str, Enum):
    """Stroke weights for symbol images."""

    ULTRALIGHT = "ultralight"
    THIN = "thin"
    LIGHT = "light"
    REGULAR = "regular"
    MEDIUM = "medium"
    SEMIBOLD = "semibold"
    BOLD = "bold"
    HEAVY = "heavy"
    BLACK = "black"
