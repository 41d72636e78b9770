"""
Utility modules for core functionality - functional architecture.

Modules:
- decorators: Utility decorators (timer, etc.)
"""

# Decorators
from .decorators import timer

__all__ = [
    "timer",
]
