"""
Off-screen drawing surfaces.

A DrawingSurface is a BGRA canvas that can be filled, drawn into and captured
as a RasterImage. Surfaces are only handed out through the drawing_surface()
context manager, which releases the canvas on every exit path.
"""

import logging
from contextlib import contextmanager
from typing import Generator, Optional

import cv2
import numpy as np

from common.base import Color, Rect, Size
from common.constants import Colors, ImageConstants
from common.enums import ColorSpace, Interpolation
from core.exceptions import InvalidParameterException, RenderingFailedException
from core.image.raster import RasterImage

logger = logging.getLogger(__name__)

CV_INTERPOLATION = {
    Interpolation.NEAREST: cv2.INTER_NEAREST,
    Interpolation.LINEAR: cv2.INTER_LINEAR,
    Interpolation.CUBIC: cv2.INTER_CUBIC,
    Interpolation.AREA: cv2.INTER_AREA,
    Interpolation.LANCZOS4: cv2.INTER_LANCZOS4,
}


def composite_over(source: np.ndarray, destination: np.ndarray) -> np.ndarray:
    """
    Composite a BGRA source over a BGRA destination (straight alpha).

    Args:
        source: BGRA image
        destination: BGRA image of the same shape

    Returns:
        Composited BGRA image, dtype uint8
    """
    src = source.astype(np.float32) / 255.0
    dst = destination.astype(np.float32) / 255.0

    src_a = src[:, :, 3:4]
    dst_a = dst[:, :, 3:4]
    out_a = src_a + dst_a * (1.0 - src_a)

    premultiplied = src[:, :, :3] * src_a + dst[:, :, :3] * dst_a * (1.0 - src_a)
    out_rgb = np.divide(
        premultiplied, out_a, out=np.zeros_like(premultiplied), where=out_a > 0
    )

    out = np.concatenate([out_rgb, out_a], axis=2)
    return np.clip(np.rint(out * 255.0), 0, 255).astype(np.uint8)


class DrawingSurface:
    """BGRA canvas with a logical coordinate system."""

    def __init__(self, width: int, height: int, scale: float = 1.0, opaque: bool = False):
        self.scale = scale
        self.opaque = opaque
        background = Colors.BLACK if opaque else Colors.CLEAR
        self._canvas: Optional[np.ndarray] = np.empty(
            (height, width, ImageConstants.CHANNELS), dtype=np.uint8
        )
        self._canvas[:] = background

    @property
    def is_released(self) -> bool:
        return self._canvas is None

    @property
    def pixel_size(self) -> tuple[int, int]:
        canvas = self._require_canvas("pixel_size")
        return int(canvas.shape[1]), int(canvas.shape[0])

    @property
    def bounds(self) -> Rect:
        """Whole surface in logical units."""
        width, height = self.pixel_size
        return Rect(x=0.0, y=0.0, width=width / self.scale, height=height / self.scale)

    def _require_canvas(self, operation: str) -> np.ndarray:
        if self._canvas is None:
            raise RenderingFailedException(operation, "drawing surface has been released")
        return self._canvas

    @staticmethod
    def _clip(
        edges: tuple[int, int, int, int], canvas: np.ndarray
    ) -> tuple[int, int, int, int]:
        x1, y1, x2, y2 = edges
        height, width = canvas.shape[:2]
        return max(0, x1), max(0, y1), min(width, x2), min(height, y2)

    def fill(self, color: Color, rect: Optional[Rect] = None) -> None:
        """
        Fill a rectangle with color, replacing the pixels underneath.

        Args:
            color: Fill color (alpha is copied, not blended)
            rect: Area in logical units (whole surface if None)
        """
        canvas = self._require_canvas("fill")
        area = rect if rect is not None else self.bounds
        x1, y1, x2, y2 = self._clip(area.to_pixels(self.scale), canvas)
        if x2 <= x1 or y2 <= y1:
            return

        canvas[y1:y2, x1:x2] = color.to_bgra8()
        if self.opaque:
            canvas[y1:y2, x1:x2, 3] = ImageConstants.CHANNEL_MAX

    def draw_image(
        self,
        image: RasterImage,
        rect: Optional[Rect] = None,
        interpolation: Interpolation = Interpolation.AREA,
    ) -> None:
        """
        Draw an image stretched into a rectangle (source-over).

        Args:
            image: Image to draw
            rect: Destination in logical units (whole surface if None)
            interpolation: Resampling filter
        """
        canvas = self._require_canvas("draw_image")
        if image.is_empty:
            return

        area = rect if rect is not None else self.bounds
        x1, y1, x2, y2 = area.to_pixels(self.scale)
        width, height = x2 - x1, y2 - y1
        if width <= 0 or height <= 0:
            return

        if (width, height) == (image.pixel_width, image.pixel_height):
            stretched = image.pixels
        else:
            stretched = cv2.resize(
                image.pixels, (width, height), interpolation=CV_INTERPOLATION[interpolation]
            )

        # Crop the stretched image to the part that lands on the canvas
        cx1, cy1, cx2, cy2 = self._clip((x1, y1, x2, y2), canvas)
        if cx2 <= cx1 or cy2 <= cy1:
            return
        source = stretched[cy1 - y1 : cy2 - y1, cx1 - x1 : cx2 - x1]
        region = canvas[cy1:cy2, cx1:cx2]

        composited = composite_over(source, region)
        if self.opaque:
            composited[:, :, 3] = ImageConstants.CHANNEL_MAX
        canvas[cy1:cy2, cx1:cx2] = composited

    def snapshot(self) -> Optional[RasterImage]:
        """
        Capture the surface contents.

        Returns:
            New RasterImage, or None if the surface has no pixels
        """
        canvas = self._require_canvas("snapshot")
        if canvas.size == 0:
            return None
        return RasterImage(pixels=canvas, scale=self.scale, color_space=ColorSpace.SRGB)

    def release(self) -> None:
        self._canvas = None


@contextmanager
def drawing_surface(
    size: Size, scale: float = 1.0, opaque: bool = False
) -> Generator[DrawingSurface, None, None]:
    """
    Allocate a drawing surface for the duration of a with-block.

    Usage:
        with drawing_surface(Size(width=10, height=10)) as surface:
            surface.fill(color)
            image = surface.snapshot()

    Args:
        size: Surface size in logical units
        scale: Pixels per logical unit
        opaque: If True, the surface has no transparency

    Yields:
        DrawingSurface, released when the block exits

    Raises:
        InvalidParameterException: If scale is not positive
        RenderingFailedException: If the canvas cannot be allocated
    """
    if not scale > 0:
        raise InvalidParameterException("scale", scale, "must be greater than 0")

    try:
        width, height = size.to_pixels(scale)
        surface = DrawingSurface(width, height, scale=scale, opaque=opaque)
    except (MemoryError, OverflowError, ValueError) as e:
        raise RenderingFailedException(
            "allocate surface", f"{size.width}x{size.height}@{scale}x: {e}"
        ) from e

    logger.debug(f"Allocated {width}x{height} drawing surface at {scale}x")
    try:
        yield surface
    finally:
        surface.release()
        logger.debug(f"Released {width}x{height} drawing surface")
