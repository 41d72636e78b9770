"""
Core modules for Raster Kit
"""

from .exceptions import (
    EncodingFailedException,
    InvalidParameterException,
    RasterException,
    RenderingFailedException,
)

__all__ = [
    "RasterException",
    "InvalidParameterException",
    "RenderingFailedException",
    "EncodingFailedException",
]
