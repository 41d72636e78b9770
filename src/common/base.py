"""
Base data models - fundamental types without dependencies.

This module contains basic Pydantic models used throughout the library:
- Size: logical width and height
- Rect: rectangle in logical units
- Color: RGBA color with channels in [0, 1]

IMPORTANT: This module must NOT import from core or config
to avoid circular dependencies.
"""

from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class Size(BaseModel):
    """Logical size (width, height)"""

    model_config = ConfigDict(frozen=True)

    width: float = Field(..., ge=0, description="Width in logical units")
    height: float = Field(..., ge=0, description="Height in logical units")

    def to_pixels(self, scale: float = 1.0) -> Tuple[int, int]:
        """
        Convert to a pixel extent at the given scale.

        Args:
            scale: Pixels per logical unit

        Returns:
            (width, height) in whole pixels
        """
        return int(round(self.width * scale)), int(round(self.height * scale))


class Rect(BaseModel):
    """Rectangle in logical units"""

    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0
    width: float = Field(..., ge=0)
    height: float = Field(..., ge=0)

    def to_pixels(self, scale: float = 1.0) -> Tuple[int, int, int, int]:
        """Convert to (x1, y1, x2, y2) pixel edges at the given scale."""
        x1 = int(round(self.x * scale))
        y1 = int(round(self.y * scale))
        x2 = int(round((self.x + self.width) * scale))
        y2 = int(round((self.y + self.height) * scale))
        return x1, y1, x2, y2


class Color(BaseModel):
    """
    RGBA color.

    Channels are floats in [0, 1]. Conversions to 8-bit tuples round to the
    nearest integer.
    """

    model_config = ConfigDict(frozen=True)

    red: float = Field(..., ge=0.0, le=1.0)
    green: float = Field(..., ge=0.0, le=1.0)
    blue: float = Field(..., ge=0.0, le=1.0)
    alpha: float = Field(default=1.0, ge=0.0, le=1.0)

    @classmethod
    def from_rgba8(cls, red: int, green: int, blue: int, alpha: int = 255) -> "Color":
        """Create color from 8-bit channel values."""
        return cls(red=red / 255.0, green=green / 255.0, blue=blue / 255.0, alpha=alpha / 255.0)

    @classmethod
    def black(cls) -> "Color":
        return cls(red=0.0, green=0.0, blue=0.0)

    @classmethod
    def white(cls) -> "Color":
        return cls(red=1.0, green=1.0, blue=1.0)

    @classmethod
    def clear(cls) -> "Color":
        return cls(red=0.0, green=0.0, blue=0.0, alpha=0.0)

    def to_rgba8(self) -> Tuple[int, int, int, int]:
        """Convert to 8-bit (R, G, B, A) tuple."""
        return (
            int(round(self.red * 255)),
            int(round(self.green * 255)),
            int(round(self.blue * 255)),
            int(round(self.alpha * 255)),
        )

    def to_bgra8(self) -> Tuple[int, int, int, int]:
        """Convert to 8-bit (B, G, R, A) tuple for OpenCV."""
        r, g, b, a = self.to_rgba8()
        return (b, g, r, a)

    def is_close(self, other: "Color", tolerance: float = 1 / 255) -> bool:
        """Check if every channel is within tolerance of other."""
        return (
            abs(self.red - other.red) <= tolerance
            and abs(self.green - other.green) <= tolerance
            and abs(self.blue - other.blue) <= tolerance
            and abs(self.alpha - other.alpha) <= tolerance
        )
