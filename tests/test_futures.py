"""Tests for futures and the product catalog."""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor

import pytest

from almanac import ProductLookupError, ValidationError
from almanac.concurrency import (
    CANCELLED,
    HELLO,
    Product,
    ProductCatalog,
    get_if_not_cancelled,
    hello_after,
    submit_hello,
)


# =============================================================================
# Future Tests
# =============================================================================


class TestFutures:
    """Tests for submitting and reading futures."""

    def test_hello(self):
        """Test the submitted task's result."""
        with ThreadPoolExecutor(max_workers=1) as pool:
            future = submit_hello(pool, 0)
            assert get_if_not_cancelled(future) == HELLO
        assert hello_after(0) == "Hello, World!"

    def test_cancelled_before_start(self):
        """Test a future cancelled while queued reports Cancelled."""
        gate = threading.Event()
        with ThreadPoolExecutor(max_workers=1) as pool:
            blocker = pool.submit(gate.wait)
            queued = submit_hello(pool, 0)
            assert queued.cancel()
            gate.set()
            blocker.result()
        assert get_if_not_cancelled(queued) == CANCELLED

    def test_failure_logged(self, caplog):
        """Test a failed task is logged and yields None."""
        future: Future = Future()
        future.set_exception(RuntimeError("boom"))
        with caplog.at_level(logging.ERROR, logger="almanac.concurrency.futures"):
            assert get_if_not_cancelled(future) is None
        assert caplog.records[0].exc_info is not None


# =============================================================================
# Product Catalog Tests
# =============================================================================


class TestProductCatalog:
    """Tests for cached and remote product lookups."""

    def test_cache_hit_is_completed(self):
        """Test a cached product comes back already done."""
        product = Product(1, "Widget")
        with ProductCatalog(cache={1: product}, remote_delay=0) as catalog:
            future = catalog.get_product(1)
            assert future.done()
            assert future.result() is product

    def test_miss_fills_cache(self):
        """Test a remote lookup stores its result."""
        with ProductCatalog(remote_delay=0) as catalog:
            assert 2 not in catalog
            product = catalog.get_product(2).result()
            assert product == Product(2, "Product 2")
            assert 2 in catalog
            assert len(catalog) == 1
            assert catalog.get_product(2).done()

    def test_evil_request(self):
        """Test id 666 completes exceptionally."""
        with ProductCatalog(remote_delay=0) as catalog:
            future = catalog.get_product(666)
            with pytest.raises(ProductLookupError, match="Evil request"):
                future.result()
            assert 666 not in catalog

    def test_local_failure_is_failed_future(self):
        """Test a bad id gives a failed future instead of raising."""
        with ProductCatalog(remote_delay=0) as catalog:
            future = catalog.get_product("seven")
            assert future.done()
            assert isinstance(future.exception(), ValidationError)

    def test_get_local(self):
        """Test the local lookup alone."""
        catalog = ProductCatalog(cache={1: Product(1, "Widget")}, remote_delay=0)
        try:
            assert catalog.get_local(1) == Product(1, "Widget")
            assert catalog.get_local(2) is None
            with pytest.raises(ValidationError):
                catalog.get_local(True)
        finally:
            catalog.close()

    def test_external_executor_left_running(self):
        """Test closing the catalog leaves a supplied executor alone."""
        with ThreadPoolExecutor(max_workers=1) as pool:
            with ProductCatalog(executor=pool, remote_delay=0) as catalog:
                catalog.get_product(3).result()
            assert pool.submit(lambda: 1).result() == 1
