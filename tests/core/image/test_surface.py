"""
Tests for core.image.surface module.

Tests drawing surface lifecycle, filling, image drawing and compositing.
"""

import math

import numpy as np
import pytest

from common.base import Color, Rect, Size
from core.exceptions import InvalidParameterException, RenderingFailedException
from core.image.raster import RasterImage
from core.image.surface import composite_over, drawing_surface


class TestDrawingSurfaceLifecycle:
    """Tests for drawing_surface context manager."""

    def test_surface_released_after_block(self):
        """Test that the surface is released when the block exits."""
        with drawing_surface(Size(width=10, height=10)) as surface:
            assert not surface.is_released

        assert surface.is_released

    def test_surface_released_after_exception(self):
        """Test that the surface is released when the block raises."""
        with pytest.raises(RuntimeError):
            with drawing_surface(Size(width=10, height=10)) as surface:
                raise RuntimeError("boom")

        assert surface.is_released

    def test_use_after_release_raises(self):
        """Test that a released surface cannot be drawn into."""
        with drawing_surface(Size(width=10, height=10)) as surface:
            pass

        with pytest.raises(RenderingFailedException):
            surface.fill(Color.black())
        with pytest.raises(RenderingFailedException):
            surface.snapshot()

    def test_invalid_scale(self):
        """Test that a non-positive scale is rejected."""
        with pytest.raises(InvalidParameterException):
            with drawing_surface(Size(width=10, height=10), scale=0):
                pass

    def test_unallocatable_size(self):
        """Test that an infinite size raises RenderingFailed."""
        with pytest.raises(RenderingFailedException):
            with drawing_surface(Size(width=math.inf, height=10)):
                pass

    def test_new_surface_is_transparent(self):
        """Test that a fresh surface is fully transparent."""
        with drawing_surface(Size(width=4, height=3)) as surface:
            image = surface.snapshot()

        assert image.pixels.shape == (3, 4, 4)
        assert np.all(image.pixels == 0)

    def test_opaque_surface(self):
        """Test that an opaque surface starts black and stays opaque."""
        with drawing_surface(Size(width=4, height=4), opaque=True) as surface:
            surface.fill(Color(red=1.0, green=1.0, blue=1.0, alpha=0.0))
            image = surface.snapshot()

        assert np.all(image.alpha == 255)

    def test_scaled_surface(self):
        """Test that scale multiplies the pixel size."""
        with drawing_surface(Size(width=10, height=5), scale=2.0) as surface:
            assert surface.pixel_size == (20, 10)
            image = surface.snapshot()

        assert image.scale == 2.0
        assert image.size == Size(width=10, height=5)

    def test_empty_surface_snapshot_is_none(self):
        """Test that a zero-pixel surface captures no image."""
        with drawing_surface(Size(width=0, height=5)) as surface:
            assert surface.snapshot() is None


class TestFill:
    """Tests for DrawingSurface.fill."""

    def test_fill_rect(self):
        """Test filling part of the surface."""
        with drawing_surface(Size(width=10, height=10)) as surface:
            surface.fill(Color.white(), Rect(x=2, y=3, width=4, height=5))
            image = surface.snapshot()

        assert np.all(image.pixels[3:8, 2:6] == 255)
        assert image.alpha.sum() == 20 * 255

    def test_fill_rect_clipped(self):
        """Test that rectangles outside the surface are clipped."""
        with drawing_surface(Size(width=10, height=10)) as surface:
            surface.fill(Color.white(), Rect(x=-5, y=8, width=20, height=20))
            image = surface.snapshot()

        assert np.all(image.alpha[8:, :] == 255)
        assert np.all(image.alpha[:8, :] == 0)

    def test_fill_rect_scaled(self):
        """Test that fill rectangles are in logical units."""
        with drawing_surface(Size(width=4, height=4), scale=2.0) as surface:
            surface.fill(Color.white(), Rect(x=0, y=0, width=2, height=2))
            image = surface.snapshot()

        assert np.all(image.alpha[:4, :4] == 255)
        assert np.all(image.alpha[4:, :] == 0)


class TestDrawImage:
    """Tests for DrawingSurface.draw_image."""

    def test_draw_image_same_size_is_exact(self, test_image):
        """Test that drawing an opaque image at its own size copies it."""
        with drawing_surface(test_image.size) as surface:
            surface.draw_image(test_image)
            image = surface.snapshot()

        assert np.array_equal(image.pixels, test_image.pixels)

    def test_draw_image_into_rect(self):
        """Test drawing an image into a sub-rectangle."""
        source = RasterImage.from_array(np.full((2, 2, 3), 255, dtype=np.uint8))

        with drawing_surface(Size(width=10, height=10)) as surface:
            surface.draw_image(source, Rect(x=5, y=5, width=4, height=4))
            image = surface.snapshot()

        assert np.all(image.alpha[5:9, 5:9] == 255)
        assert image.alpha[:5, :].max() == 0

    def test_draw_image_partially_outside(self):
        """Test that images drawn past the edge are cropped."""
        source = RasterImage.from_array(np.full((4, 4, 3), 200, dtype=np.uint8))

        with drawing_surface(Size(width=6, height=6)) as surface:
            surface.draw_image(source, Rect(x=4, y=4, width=4, height=4))
            image = surface.snapshot()

        assert np.all(image.pixels[4:, 4:, 0] == 200)
        assert image.alpha[:4, :].max() == 0

    def test_draw_empty_image_is_noop(self):
        """Test that drawing an empty image changes nothing."""
        with drawing_surface(Size(width=3, height=3)) as surface:
            surface.draw_image(RasterImage.empty())
            image = surface.snapshot()

        assert np.all(image.pixels == 0)


class TestCompositeOver:
    """Tests for composite_over function."""

    def test_opaque_source_replaces(self):
        """Test that an opaque source hides the destination."""
        source = np.full((2, 2, 4), (10, 20, 30, 255), dtype=np.uint8)
        destination = np.full((2, 2, 4), (200, 200, 200, 255), dtype=np.uint8)

        assert np.array_equal(composite_over(source, destination), source)

    def test_transparent_source_keeps_destination(self):
        """Test that a transparent source leaves the destination."""
        source = np.zeros((2, 2, 4), dtype=np.uint8)
        destination = np.full((2, 2, 4), (1, 2, 3, 255), dtype=np.uint8)

        assert np.array_equal(composite_over(source, destination), destination)

    def test_half_alpha_blend(self):
        """Test a half-transparent red over opaque blue."""
        source = np.full((1, 1, 4), (0, 0, 255, 128), dtype=np.uint8)
        destination = np.full((1, 1, 4), (255, 0, 0, 255), dtype=np.uint8)

        result = composite_over(source, destination)[0, 0]

        assert abs(int(result[0]) - 127) <= 1
        assert abs(int(result[2]) - 128) <= 1
        assert result[3] == 255

    def test_both_transparent(self):
        """Test that two transparent pixels stay transparent black."""
        zeros = np.zeros((1, 1, 4), dtype=np.uint8)

        assert np.array_equal(composite_over(zeros, zeros), zeros)
