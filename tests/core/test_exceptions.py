"""
Tests for core.exceptions module.
"""

import pytest

from core.exceptions import (
    EncodingFailedException,
    InvalidParameterException,
    RasterException,
    RenderingFailedException,
)


class TestExceptions:
    """Tests for the exception hierarchy."""

    @pytest.mark.parametrize(
        "exc",
        [
            InvalidParameterException("width", 0, "must be greater than 0"),
            RenderingFailedException("resize", "no image"),
            EncodingFailedException("JPEG", "no data"),
        ],
    )
    def test_all_derive_from_base(self, exc):
        """Test that every exception is a RasterException."""
        assert isinstance(exc, RasterException)
        assert str(exc) == exc.message

    def test_invalid_parameter_details(self):
        """Test InvalidParameterException message and details."""
        exc = InvalidParameterException("quality", 1.5, "must be between 0.0 and 1.0")

        assert exc.message == "Invalid quality=1.5: must be between 0.0 and 1.0"
        assert exc.details == {
            "parameter": "quality",
            "value": 1.5,
            "reason": "must be between 0.0 and 1.0",
        }

    def test_rendering_failed_details(self):
        """Test RenderingFailedException message and details."""
        exc = RenderingFailedException("resize", "no image")

        assert exc.message == "Rendering failed for resize: no image"
        assert exc.details["operation"] == "resize"

    def test_base_default_details(self):
        """Test that details default to an empty dict."""
        assert RasterException("oops").details == {}
