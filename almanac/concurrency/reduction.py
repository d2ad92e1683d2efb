"""Sequential and parallel reduction over 1..n.

Every function here returns n * (n + 1) / 2; they differ only in how the
work is spread. The element-wise variants trace each element with the
name of the thread that handled it, at DEBUG level.

Examples:
    >>> sequential_sum(100)
    5050
    >>> sequential_range_sum(1_000_000)
    500000500000
"""

from __future__ import annotations

import functools
import itertools
import logging
import operator
import threading
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor

from almanac._internal.validation import validate_non_negative
from almanac.config import default_workers

logger = logging.getLogger(__name__)


def _trace(value: int) -> int:
    logger.debug("%s -> %d", threading.current_thread().name, value)
    return value


def sequential_sum(n: int) -> int:
    """Iterate 1, 2, 3, ... n one element at a time and add them up.

    Raises:
        ValidationError: If n is negative.
    """
    validate_non_negative("n", n)
    numbers = itertools.islice(itertools.count(1), n)
    return functools.reduce(operator.add, map(_trace, numbers), 0)


def parallel_sum(n: int, executor: Executor | None = None) -> int:
    """Hand each element of 1..n to a thread pool, then add them up.

    Dispatching single numbers costs far more than adding them, so this
    is slower than ``sequential_sum``; use ``parallel_range_sum`` instead.

    Raises:
        ValidationError: If n is negative.
    """
    validate_non_negative("n", n)
    logger.info("Parallel version")
    numbers = itertools.islice(itertools.count(1), n)
    if executor is not None:
        return functools.reduce(operator.add, executor.map(_trace, numbers), 0)
    with ThreadPoolExecutor(max_workers=default_workers()) as pool:
        return functools.reduce(operator.add, pool.map(_trace, numbers), 0)


def sequential_range_sum(n: int) -> int:
    """Sum the range 1..n directly.

    Raises:
        ValidationError: If n is negative.
    """
    validate_non_negative("n", n)
    return sum(range(1, n + 1))


def _chunk_sum(bounds: tuple[int, int]) -> int:
    start, stop = bounds
    return sum(range(start, stop))


def chunk_bounds(n: int, chunks: int) -> list[tuple[int, int]]:
    """Split 1..n into at most ``chunks`` half-open [start, stop) ranges.

    Examples:
        >>> chunk_bounds(10, 3)
        [(1, 5), (5, 9), (9, 11)]
        >>> chunk_bounds(0, 4)
        []
    """
    if n <= 0:
        return []
    size = -(-n // max(chunks, 1))
    return [(start, min(start + size, n + 1)) for start in range(1, n + 1, size)]


def parallel_range_sum(
    n: int, workers: int | None = None, executor: Executor | None = None
) -> int:
    """Sum 1..n by summing chunks of the range on a process pool.

    Args:
        n: Upper bound, inclusive.
        workers: Number of chunks and pool workers (default: CPU count).
        executor: Pool to use instead of a fresh ProcessPoolExecutor.

    Raises:
        ValidationError: If n is negative.
    """
    validate_non_negative("n", n)
    workers = workers or default_workers()
    bounds = chunk_bounds(n, workers)
    logger.info("Parallel version: %d chunks", len(bounds))
    if executor is not None:
        return sum(executor.map(_chunk_sum, bounds))
    with ProcessPoolExecutor(max_workers=workers) as pool:
        return sum(pool.map(_chunk_sum, bounds))


__all__ = [
    "sequential_sum",
    "parallel_sum",
    "sequential_range_sum",
    "parallel_range_sum",
    "chunk_bounds",
]
