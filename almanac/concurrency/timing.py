"""Wall-clock timing of sequential versus parallel work.

``double_it`` stands in for a slow call; summing doubled values one at a
time takes ``len(values) * delay`` seconds, while the thread-pool version
takes about ``delay`` when there are enough workers.
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Iterable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_DELAY = 0.1


def double_it(n: int, delay: float = DEFAULT_DELAY) -> int:
    """Sleep for ``delay`` seconds, then return ``n * 2``."""
    time.sleep(delay)
    return n * 2


def double_and_sum_sequential(values: Iterable[int], delay: float = DEFAULT_DELAY) -> int:
    """Double each value in turn and sum the results.

    Examples:
        >>> double_and_sum_sequential((3, 1, 4, 1, 5, 9), delay=0)
        46
    """
    return sum(double_it(n, delay) for n in values)


def double_and_sum_parallel(
    values: Iterable[int], delay: float = DEFAULT_DELAY, workers: int | None = None
) -> int:
    """Double the values on a thread pool and sum the results.

    Args:
        values: Numbers to double.
        delay: Seconds each call sleeps.
        workers: Pool size (default: one thread per value).
    """
    values = list(values)
    if not values:
        return 0
    with ThreadPoolExecutor(max_workers=workers or len(values)) as pool:
        return sum(pool.map(lambda n: double_it(n, delay), values))


def timed(fn: Callable[..., T], *args: Any, **kwargs: Any) -> tuple[T, float]:
    """Call ``fn`` and return its result with the elapsed seconds.

    Examples:
        >>> result, seconds = timed(sum, [1, 2, 3])
        >>> result
        6
    """
    start = time.perf_counter()
    result = fn(*args, **kwargs)
    elapsed = time.perf_counter() - start
    logger.debug("%s took %.4f s", getattr(fn, "__name__", fn), elapsed)
    return result, elapsed


__all__ = [
    "DEFAULT_DELAY",
    "double_it",
    "double_and_sum_sequential",
    "double_and_sum_parallel",
    "timed",
]
