"""
Types package - fundamental types without external project dependencies.

This package contains basic types that are used throughout the library:
- Enums (RenderingMode, Interpolation, ColorSpace, SymbolWeight)
- Constants (ImageConstants, CompressionConstants, etc.)
- Base models (Size, Rect, Color)

IMPORTANT: This package must NOT import from any other project packages
(core, config) to avoid circular dependencies.
"""

# Export base models
from common.base import Color, Rect, Size

# Export all constants
from common.constants import (
    ColorConstants,
    Colors,
    CompressionConstants,
    ImageConstants,
    SymbolConstants,
    SystemConstants,
)

# Export all enums
from common.enums import ColorSpace, Interpolation, RenderingMode, SymbolWeight

__all__ = [
    # Enums
    "ColorSpace",
    "Interpolation",
    "RenderingMode",
    "SymbolWeight",
    # Constants
    "ColorConstants",
    "Colors",
    "CompressionConstants",
    "ImageConstants",
    "SymbolConstants",
    "SystemConstants",
    # Base models
    "Color",
    "Rect",
    "Size",
]
