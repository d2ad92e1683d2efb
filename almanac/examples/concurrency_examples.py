"""Printable walk-throughs of the concurrency helpers.

Each function takes the active ``Settings`` and prints to stdout.
"""

from __future__ import annotations

import asyncio
import datetime as _dt
import logging
from concurrent.futures import ThreadPoolExecutor

from almanac.arithmetic import elapsed_seconds
from almanac.concurrency import (
    ProductCatalog,
    coordinate_tasks,
    double_and_sum_parallel,
    double_and_sum_sequential,
    get_if_not_cancelled,
    parallel_range_sum,
    parallel_sum,
    parse_or_default,
    sequential_range_sum,
    sequential_sum,
    submit_hello,
    then_combine,
    then_compose,
    timed,
)
from almanac.config import Settings
from almanac.errors import ProductLookupError

logger = logging.getLogger(__name__)

VALUES = (3, 1, 4, 1, 5, 9)


def sums_example(settings: Settings) -> None:
    """Sequential and parallel sums over 1..n."""
    start = _dt.datetime.now(_dt.timezone.utc)
    print(sequential_sum(1_000))
    with ThreadPoolExecutor(max_workers=settings.workers) as pool:
        print(parallel_sum(1_000, executor=pool))
    print(sequential_range_sum(10_000_000))
    print(parallel_range_sum(10_000_000, workers=settings.workers))
    end = _dt.datetime.now(_dt.timezone.utc)
    print(f"{elapsed_seconds(start, end)} seconds")


def timing_example(settings: Settings) -> None:
    """Time doubling and summing, one value at a time and in parallel."""
    result, seconds = timed(double_and_sum_sequential, VALUES)
    print(f"sequential: {result} in {seconds:.3f} s")
    result, seconds = timed(double_and_sum_parallel, VALUES, workers=settings.workers)
    print(f"parallel:   {result} in {seconds:.3f} s")


def future_example(settings: Settings) -> None:
    """Submit a task, keep working, then wait for it."""
    with ThreadPoolExecutor(max_workers=settings.workers) as pool:
        future = submit_hello(pool, 1.0)
        print("Even more processing...")
        print(get_if_not_cancelled(future))


def products_example(settings: Settings) -> None:
    """Cached, remote and failing product lookups."""
    with ProductCatalog() as catalog:
        first = catalog.get_product(1)
        print(f"remote: {first.result()}")
        again = catalog.get_product(1)
        print(f"cached (done={again.done()}): {again.result()}")
        try:
            catalog.get_product(666).result()
        except ProductLookupError as exc:
            print(f"666 failed: {exc}")


def coordinate_example(settings: Settings) -> None:
    """Parse, double and print a slowly supplied value."""
    with ThreadPoolExecutor(max_workers=settings.workers) as pool:
        asyncio.run(coordinate_tasks(executor=pool, delay=1.0))
    print("Running...")


def compose_example(settings: Settings) -> None:
    """Chain a second stage onto the first stage's result."""
    print(asyncio.run(then_compose(3, 2)) == 5)


def combine_example(settings: Settings) -> None:
    """Join two independent stages."""
    print(asyncio.run(then_combine(3, 2)) == 5)


def handle_example(settings: Settings) -> None:
    """Recover a failed parse with a default value."""
    print(parse_or_default("abc") == 0)
    print(parse_or_default("42") == 42)


__all__ = [
    "sums_example",
    "timing_example",
    "future_example",
    "products_example",
    "coordinate_example",
    "compose_example",
    "combine_example",
    "handle_example",
]
