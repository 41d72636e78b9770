"""
Custom exceptions for Raster Kit.
Provides a consistent error taxonomy across all image operations.
"""

from typing import Any, Dict, Optional


class RasterException(Exception):
    """Base exception for Raster Kit."""

    def __init__(self, message: str, details: Optional[Dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidParameterException(RasterException):
    """Exception raised when an argument is outside its valid range."""

    def __init__(self, parameter: str, value: Any, reason: str):
        super().__init__(
            message=f"Invalid {parameter}={value!r}: {reason}",
            details={"parameter": parameter, "value": value, "reason": reason},
        )


class RenderingFailedException(RasterException):
    """Exception raised when a drawing surface or its image cannot be produced."""

    def __init__(self, operation: str, reason: str):
        super().__init__(
            message=f"Rendering failed for {operation}: {reason}",
            details={"operation": operation, "reason": reason},
        )


class EncodingFailedException(RasterException):
    """Exception raised when an image cannot be encoded."""

    def __init__(self, format: str, reason: str):
        super().__init__(
            message=f"Failed to encode image to {format}: {reason}",
            details={"format": format, "reason": reason},
        )
