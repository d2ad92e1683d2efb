"""Concurrency examples: reductions, timing, futures and async composition."""

from almanac.concurrency.composition import (
    coordinate_tasks,
    handle,
    parse_int,
    parse_or_default,
    sleep_then_return_string,
    supply_async,
    then_combine,
    then_compose,
)
from almanac.concurrency.futures import (
    CANCELLED,
    HELLO,
    Product,
    ProductCatalog,
    get_if_not_cancelled,
    hello_after,
    submit_hello,
)
from almanac.concurrency.reduction import (
    chunk_bounds,
    parallel_range_sum,
    parallel_sum,
    sequential_range_sum,
    sequential_sum,
)
from almanac.concurrency.timing import (
    DEFAULT_DELAY,
    double_and_sum_parallel,
    double_and_sum_sequential,
    double_it,
    timed,
)

__all__ = [
    "sequential_sum",
    "parallel_sum",
    "sequential_range_sum",
    "parallel_range_sum",
    "chunk_bounds",
    "DEFAULT_DELAY",
    "double_it",
    "double_and_sum_sequential",
    "double_and_sum_parallel",
    "timed",
    "HELLO",
    "CANCELLED",
    "hello_after",
    "submit_hello",
    "get_if_not_cancelled",
    "Product",
    "ProductCatalog",
    "supply_async",
    "handle",
    "sleep_then_return_string",
    "coordinate_tasks",
    "then_compose",
    "then_combine",
    "parse_int",
    "parse_or_default",
]
