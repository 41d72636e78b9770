"""
Symbol (icon) images.

Named glyphs drawn with OpenCV primitives onto a transparent square canvas.
Symbols are black and use the template rendering mode, so consumers draw
them in their own tint color.
"""

import logging
import warnings
from typing import Callable, Dict, List, Optional, Sequence, Tuple

import cv2
import numpy as np

from common.constants import Colors, ImageConstants, SymbolConstants
from common.enums import ColorSpace, RenderingMode, SymbolWeight
from config import get_settings
from core.exceptions import InvalidParameterException
from core.image.raster import RasterImage

logger = logging.getLogger(__name__)

GlyphRenderer = Callable[[np.ndarray, int], None]


def _points(canvas: np.ndarray, coords: Sequence[Tuple[float, float]]) -> np.ndarray:
    """Map unit coordinates inside the glyph box to pixel coordinates."""
    side = canvas.shape[0]
    inset = side * SymbolConstants.GLYPH_INSET
    extent = side - 2 * inset - 1
    return np.array(
        [[int(round(inset + x * extent)), int(round(inset + y * extent))] for x, y in coords],
        dtype=np.int32,
    )


def _stroke(coords: Sequence[Tuple[float, float]], closed: bool = False) -> GlyphRenderer:
    def render(canvas: np.ndarray, thickness: int) -> None:
        cv2.polylines(
            canvas, [_points(canvas, coords)], closed, Colors.BLACK, thickness, cv2.LINE_AA
        )

    return render


def _filled(coords: Sequence[Tuple[float, float]]) -> GlyphRenderer:
    def render(canvas: np.ndarray, thickness: int) -> None:
        cv2.fillPoly(canvas, [_points(canvas, coords)], Colors.BLACK, cv2.LINE_AA)

    return render


def _strokes(*paths: Sequence[Tuple[float, float]]) -> GlyphRenderer:
    renderers = [_stroke(path) for path in paths]

    def render(canvas: np.ndarray, thickness: int) -> None:
        for renderer in renderers:
            renderer(canvas, thickness)

    return render


def _circle(filled: bool) -> GlyphRenderer:
    def render(canvas: np.ndarray, thickness: int) -> None:
        (cx, cy), (edge, _) = _points(canvas, [(0.5, 0.5), (1.0, 0.5)])
        radius = max(1, int(edge - cx))
        cv2.circle(
            canvas, (int(cx), int(cy)), radius, Colors.BLACK, -1 if filled else thickness,
            cv2.LINE_AA,
        )

    return render


SQUARE = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]
TRIANGLE = [(0.5, 0.0), (1.0, 1.0), (0.0, 1.0)]

SYMBOL_RENDERERS: Dict[str, GlyphRenderer] = {
    "circle": _circle(filled=False),
    "circle.fill": _circle(filled=True),
    "square": _stroke(SQUARE, closed=True),
    "square.fill": _filled(SQUARE),
    "triangle": _stroke(TRIANGLE, closed=True),
    "triangle.fill": _filled(TRIANGLE),
    "plus": _strokes([(0.5, 0.0), (0.5, 1.0)], [(0.0, 0.5), (1.0, 0.5)]),
    "minus": _strokes([(0.0, 0.5), (1.0, 0.5)]),
    "xmark": _strokes([(0.0, 0.0), (1.0, 1.0)], [(1.0, 0.0), (0.0, 1.0)]),
    "checkmark": _stroke([(0.0, 0.55), (0.35, 0.9), (1.0, 0.1)]),
    "chevron.left": _stroke([(0.7, 0.0), (0.25, 0.5), (0.7, 1.0)]),
    "chevron.right": _stroke([(0.3, 0.0), (0.75, 0.5), (0.3, 1.0)]),
    "chevron.up": _stroke([(0.0, 0.7), (0.5, 0.25), (1.0, 0.7)]),
    "chevron.down": _stroke([(0.0, 0.3), (0.5, 0.75), (1.0, 0.3)]),
}


def available_symbols() -> List[str]:
    """Get list of all available symbol names."""
    return sorted(SYMBOL_RENDERERS.keys())


def stroke_width(point_size: float, weight: SymbolWeight, scale: float = 1.0) -> int:
    """Stroke width in pixels for a point size and weight."""
    ratio = SymbolConstants.STROKE_RATIOS[weight.value]
    return max(1, int(round(point_size * scale * ratio)))


def system_symbol(
    name: str,
    point_size: Optional[float] = None,
    weight: Optional[SymbolWeight] = None,
    scale: float = ImageConstants.DEFAULT_SCALE,
) -> RasterImage:
    """
    Render a named symbol.

    Args:
        name: Symbol name (see available_symbols())
        point_size: Side of the square image in logical points
        weight: Stroke weight
        scale: Pixels per logical point

    Returns:
        Symbol image, or an empty image if the name is unknown

    Raises:
        InvalidParameterException: If point_size or scale is not positive
    """
    settings = get_settings().symbols
    point_size = settings.default_point_size if point_size is None else point_size
    weight = weight or settings.default_weight

    if not point_size > 0:
        raise InvalidParameterException("point_size", point_size, "must be greater than 0")
    if not scale > 0:
        raise InvalidParameterException("scale", scale, "must be greater than 0")

    renderer = SYMBOL_RENDERERS.get(name)
    if renderer is None:
        logger.debug(f"Unknown symbol '{name}', returning empty image")
        return RasterImage.empty()

    side = max(1, int(round(point_size * scale)))
    canvas = np.zeros((side, side, ImageConstants.CHANNELS), dtype=np.uint8)
    renderer(canvas, stroke_width(point_size, weight, scale))

    return RasterImage(
        pixels=canvas,
        scale=scale,
        rendering_mode=RenderingMode.ALWAYS_TEMPLATE,
        color_space=ColorSpace.SRGB,
    )


def symbol_image(name: str, point_size: float, weight: SymbolWeight) -> Optional[RasterImage]:
    """
    Render a named symbol, or None if the name is unknown.

    Deprecated: use system_symbol().
    """
    warnings.warn(
        "symbol_image() is deprecated, use system_symbol()", DeprecationWarning, stacklevel=2
    )
    if name not in SYMBOL_RENDERERS:
        return None
    return system_symbol(name, point_size=point_size, weight=weight)
