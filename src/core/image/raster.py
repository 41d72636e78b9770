"""
Raster image handle.

RasterImage wraps an 8-bit BGRA pixel array (OpenCV layout) together with a
scale factor, a rendering mode and an optional color space. Instances are
immutable: the pixel array is copied on construction and marked read-only.
"""

from __future__ import annotations

from typing import Optional

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, field_validator

from common.base import Size
from common.constants import ImageConstants
from common.enums import ColorSpace, RenderingMode
from core.image.converters import ensure_bgra


class RasterImage(BaseModel):
    """In-memory raster image with logical size and scale."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    pixels: np.ndarray = Field(..., description="BGRA uint8 array, shape (H, W, 4)")
    scale: float = Field(default=ImageConstants.DEFAULT_SCALE, gt=0)
    rendering_mode: RenderingMode = RenderingMode.AUTOMATIC
    color_space: Optional[ColorSpace] = ColorSpace.SRGB

    @field_validator("pixels")
    @classmethod
    def validate_pixels(cls, v: np.ndarray) -> np.ndarray:
        """Require BGRA uint8 and detach from the caller's buffer."""
        if v.dtype != np.uint8:
            raise ValueError(f"pixels must be uint8, got {v.dtype}")
        if v.ndim != 3 or v.shape[2] != ImageConstants.CHANNELS:
            raise ValueError(f"pixels must have shape (H, W, 4), got {v.shape}")
        pixels = np.ascontiguousarray(v).copy()
        pixels.flags.writeable = False
        return pixels

    @classmethod
    def from_array(
        cls,
        image: np.ndarray,
        scale: float = ImageConstants.DEFAULT_SCALE,
        color_space: Optional[ColorSpace] = ColorSpace.SRGB,
    ) -> "RasterImage":
        """
        Create image from an OpenCV array.

        Args:
            image: Grayscale, BGR or BGRA array
            scale: Pixels per logical unit
            color_space: Color space of the pixel values

        Returns:
            New RasterImage
        """
        return cls(pixels=ensure_bgra(image), scale=scale, color_space=color_space)

    @classmethod
    def empty(cls) -> "RasterImage":
        """Zero-sized placeholder image."""
        return cls(
            pixels=np.zeros((0, 0, ImageConstants.CHANNELS), dtype=np.uint8),
            color_space=None,
        )

    @property
    def pixel_width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def pixel_height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def size(self) -> Size:
        """Logical size (pixel size divided by scale)."""
        return Size(width=self.pixel_width / self.scale, height=self.pixel_height / self.scale)

    @property
    def is_empty(self) -> bool:
        return self.pixel_width == 0 or self.pixel_height == 0

    @property
    def alpha(self) -> np.ndarray:
        """Alpha channel view."""
        return self.pixels[:, :, ImageConstants.ALPHA_CHANNEL]

    def with_rendering_mode(self, mode: RenderingMode) -> "RasterImage":
        """Copy of this image with a different rendering mode."""
        return RasterImage(
            pixels=self.pixels,
            scale=self.scale,
            rendering_mode=mode,
            color_space=self.color_space,
        )

    def to_array(self) -> np.ndarray:
        """Writable BGRA copy of the pixels."""
        return self.pixels.copy()

    def __repr__(self) -> str:
        return (
            f"RasterImage({self.pixel_width}x{self.pixel_height}@{self.scale}x, "
            f"mode={self.rendering_mode.value}, "
            f"color_space={self.color_space.value if self.color_space else None})"
        )
