"""
Image utilities - functional architecture.

This package provides focused raster image utilities as pure functions over
the RasterImage handle:
- raster: RasterImage type
- surface: Scoped off-screen drawing surfaces
- processors: Solid-color creation and proportional resizing
- compression: JPEG encoding, decoding and byte-size measurement
- colors: Average color and sRGB transfer curve
- appearance: Rendering mode and tint helpers
- symbols: Named symbol images
- converters: Pixel layout conversions

All utilities are re-exported from this module for convenient access.
"""

# Appearance functions
from core.image.appearance import always_original, always_template, rendered, tinted

# Color functions
from core.image.colors import average_color, linear_to_srgb, srgb_to_linear

# Compression functions
from core.image.compression import (
    byte_size,
    compressed_data,
    compressed_image,
    decode_image,
    encode_jpeg,
    kilobyte_size,
)

# Converter functions
from core.image.converters import ensure_bgra, flatten_alpha

# Processor functions
from core.image.processors import create_filled_image, resize_image

# Image type
from core.image.raster import RasterImage

# Surface
from core.image.surface import DrawingSurface, drawing_surface

# Symbol functions
from core.image.symbols import available_symbols, symbol_image, system_symbol

__all__ = [
    # Image type
    "RasterImage",
    # Surface
    "DrawingSurface",
    "drawing_surface",
    # Processor functions
    "create_filled_image",
    "resize_image",
    # Compression functions
    "byte_size",
    "compressed_data",
    "compressed_image",
    "decode_image",
    "encode_jpeg",
    "kilobyte_size",
    # Color functions
    "average_color",
    "linear_to_srgb",
    "srgb_to_linear",
    # Appearance functions
    "always_original",
    "always_template",
    "rendered",
    "tinted",
    # Symbol functions
    "available_symbols",
    "symbol_image",
    "system_symbol",
    # Converter functions
    "ensure_bgra",
    "flatten_alpha",
]
