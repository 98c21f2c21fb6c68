"""Timing helpers for model building."""

import functools
import logging
import time
from typing import Callable

log = logging.getLogger(__name__)


def measure_time(func: Callable) -> Callable:
    """
    Log how long ``func`` took and, for builds, its token throughput.

    When the call returns an object with an ``n_tokens`` attribute (a built
    model), the log line also reports tokens per second. Timing is logged even
    when ``func`` raises.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        start = time.perf_counter()
        result = None
        try:
            result = func(*args, **kwargs)
            return result
        finally:
            elapsed = time.perf_counter() - start
            n_tokens = getattr(result, "n_tokens", None)
            if n_tokens is None:
                log.info("%s completed in %.3f s", func.__qualname__, elapsed)
            else:
                rate = n_tokens / elapsed if elapsed > 0 else float("inf")
                log.info(
                    "%s completed in %.3f s (%d tokens, %.0f tokens/s)",
                    func.__qualname__,
                    elapsed,
                    n_tokens,
                    rate,
                )

    return wrapper
