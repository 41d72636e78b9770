"""
Utility decorators and helpers for common patterns.
"""

import time
from contextlib import contextmanager
from typing import Dict, Generator


@contextmanager
def timer() -> Generator[Dict[str, float], None, None]:
    """
    Context manager to measure wall-clock time of a block.

    Usage:
        with timer() as t:
            resized = surface.snapshot()
        logger.debug(f"Snapshot took {t['ms']}ms")

    Yields:
        Dictionary whose 'ms' key is filled in with elapsed milliseconds on exit
    """
    elapsed = {"ms": 0.0}
    start = time.perf_counter()
    try:
        yield elapsed
    finally:
        elapsed["ms"] = round((time.perf_counter() - start) * 1000, 3)
