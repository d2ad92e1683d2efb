"""Composing asynchronous stages with asyncio.

Blocking callables run on an executor through ``supply_async`` and come
back as awaitables, so stages can be chained (one feeds the next) or
combined (independent stages joined at the end).

Examples:
    >>> import asyncio
    >>> asyncio.run(then_compose(3, 2))
    5
    >>> asyncio.run(then_combine(3, 2))
    5
"""

from __future__ import annotations

import asyncio
import functools
import logging
import re
import time
from concurrent.futures import Executor
from typing import Any, Awaitable, Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")

_INTEGER = re.compile(r"[+-]?[0-9]+")


def supply_async(fn: Callable[..., T], *args: Any, executor: Executor | None = None) -> asyncio.Future:
    """Run ``fn(*args)`` on ``executor`` (default: the loop's) and return an awaitable.

    Must be called while an event loop is running.
    """
    loop = asyncio.get_running_loop()
    return loop.run_in_executor(executor, functools.partial(fn, *args))


async def handle(
    awaitable: Awaitable[T], fn: Callable[[T | None, BaseException | None], R]
) -> R:
    """Await ``awaitable`` and pass the outcome to ``fn``.

    ``fn(value, None)`` is called on success and ``fn(None, exc)`` on
    failure, so ``fn`` can recover with a default.
    """
    try:
        value = await awaitable
    except Exception as exc:
        logger.debug("handling %r", exc)
        return fn(None, exc)
    return fn(value, None)


def sleep_then_return_string(delay: float = 0.1) -> str:
    time.sleep(delay)
    return "42"


async def coordinate_tasks(
    executor: Executor | None = None,
    consumer: Callable[[int], Any] = print,
    delay: float = 0.1,
) -> int:
    """Fetch "42" slowly, parse it, double it and hand the result to ``consumer``."""
    text = await supply_async(sleep_then_return_string, delay, executor=executor)
    value = int(text) * 2
    consumer(value)
    return value


def _slow_value(value: int, delay: float) -> int:
    time.sleep(delay)
    return value


async def then_compose(x: int = 3, y: int = 2, delay: float = 0.0) -> int:
    """Chain two stages; the second sees the first stage's result."""
    first = await supply_async(_slow_value, x, delay)
    return await supply_async(lambda: first + y)


async def then_combine(x: int = 3, y: int = 2, delay: float = 0.0) -> int:
    """Run two independent stages together and add their results."""
    first, second = await asyncio.gather(
        supply_async(_slow_value, x, delay),
        supply_async(_slow_value, y, delay),
    )
    return first + second


def parse_int(text: str) -> int:
    """Parse a plain signed decimal integer.

    Unlike ``int()``, surrounding whitespace and digit-group underscores
    are rejected.

    Raises:
        ValueError: If ``text`` is not an optional sign followed by digits.
    """
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"invalid integer: {text!r}")
    return int(text)


def parse_or_default(text: str, default: int = 0) -> int:
    """Parse ``text`` as an integer in a worker, falling back to ``default``.

    Examples:
        >>> parse_or_default("42")
        42
        >>> parse_or_default("abc")
        0
    """

    async def run() -> int:
        return await handle(
            supply_async(parse_int, text),
            lambda value, exc: default if exc is not None else value,
        )

    return asyncio.run(run())


__all__ = [
    "supply_async",
    "handle",
    "sleep_then_return_string",
    "coordinate_tasks",
    "then_compose",
    "then_combine",
    "parse_int",
    "parse_or_default",
]
