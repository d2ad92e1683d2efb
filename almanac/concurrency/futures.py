"""Futures from a thread pool, including pre-completed and failed ones.

``ProductCatalog`` answers from an in-memory cache when it can and falls
back to a slow remote lookup on a worker thread. Either way the caller
gets a ``concurrent.futures.Future``.

Examples:
    >>> with ProductCatalog(remote_delay=0) as catalog:
    ...     catalog.get_product(1).result().name
    'Product 1'
"""

from __future__ import annotations

import logging
import threading
import time
from concurrent.futures import CancelledError, Executor, Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any

from almanac.errors import ProductLookupError, ValidationError

logger = logging.getLogger(__name__)

HELLO = "Hello, World!"
CANCELLED = "Cancelled"
EVIL_ID = 666


def hello_after(delay: float) -> str:
    """Sleep for ``delay`` seconds and return a greeting."""
    time.sleep(delay)
    return HELLO


def submit_hello(executor: Executor, delay: float) -> Future:
    """Schedule ``hello_after`` on ``executor``."""
    return executor.submit(hello_after, delay)


def get_if_not_cancelled(future: Future) -> Any:
    """Wait for ``future`` and return its result.

    Returns "Cancelled" for a cancelled future. A task that raised is
    logged with its traceback and yields None.
    """
    if future.cancelled():
        return CANCELLED
    try:
        return future.result()
    except CancelledError:
        return CANCELLED
    except Exception:
        logger.exception("Task failed")
        return None


@dataclass(frozen=True)
class Product:
    id: int
    name: str


class ProductCatalog:
    """Product lookups that return futures.

    Args:
        cache: Initial id -> Product mapping (default: empty).
        executor: Executor for remote lookups. When omitted the catalog
            creates a thread pool and shuts it down on ``close()``.
        remote_delay: Seconds a remote lookup takes.
    """

    def __init__(
        self,
        cache: dict[int, Product] | None = None,
        executor: Executor | None = None,
        remote_delay: float = 0.1,
    ) -> None:
        self._cache: dict[int, Product] = dict(cache or {})
        self._lock = threading.Lock()
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(thread_name_prefix="catalog")
        self.remote_delay = remote_delay

    def __enter__(self) -> ProductCatalog:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_executor:
            self._executor.shutdown(wait=True)

    def get_local(self, product_id: int) -> Product | None:
        """Return the cached product, or None.

        Raises:
            ValidationError: If product_id is not an integer.
        """
        if not isinstance(product_id, int) or isinstance(product_id, bool):
            raise ValidationError(f"product id must be an integer, got {product_id!r}")
        with self._lock:
            return self._cache.get(product_id)

    def get_remote(self, product_id: int) -> Product:
        """Fetch a product slowly and store it in the cache.

        Raises:
            ProductLookupError: For the forbidden id 666.
        """
        time.sleep(self.remote_delay)
        if product_id == EVIL_ID:
            raise ProductLookupError("Evil request")
        product = Product(product_id, f"Product {product_id}")
        with self._lock:
            self._cache[product_id] = product
        logger.debug("cached %r", product)
        return product

    def get_product(self, product_id: int) -> Future:
        """Return a future for the product with ``product_id``.

        A cache hit returns a future that is already done. A miss submits
        ``get_remote`` to the executor. If the local lookup raises, the
        returned future holds that exception.
        """
        try:
            product = self.get_local(product_id)
        except Exception as exc:
            failed: Future = Future()
            failed.set_exception(exc)
            return failed

        if product is not None:
            logger.debug("cache hit for %d", product_id)
            done: Future = Future()
            done.set_result(product)
            return done

        logger.debug("cache miss for %d", product_id)
        return self._executor.submit(self.get_remote, product_id)

    def __contains__(self, product_id: object) -> bool:
        with self._lock:
            return product_id in self._cache

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)


__all__ = [
    "HELLO",
    "CANCELLED",
    "hello_after",
    "submit_hello",
    "get_if_not_cancelled",
    "Product",
    "ProductCatalog",
]
