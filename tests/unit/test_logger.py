"""
Unit tests for logger module.
"""

import structlog

from price_reconcile.utils.logger import (
    bind_request_context,
    clear_request_context,
    get_logger,
)


class TestRequestContext:
    """Tests for request-scoped log fields."""

    def test_bind_and_clear(self) -> None:
        """Bound fields are visible until cleared."""
        bind_request_context("req-1", path="/reconcile/analyze")
        assert structlog.contextvars.get_contextvars() == {
            "request_id": "req-1",
            "path": "/reconcile/analyze",
        }

        clear_request_context()
        assert structlog.contextvars.get_contextvars() == {}

    def test_rebinding_replaces_previous_request(self) -> None:
        """A new request does not inherit fields from the last one."""
        bind_request_context("req-1", path="/a")
        bind_request_context("req-2")

        assert structlog.contextvars.get_contextvars() == {"request_id": "req-2"}
        clear_request_context()


class TestGetLogger:
    """Tests for get_logger function."""

    def test_returns_bindable_logger(self) -> None:
        """Loggers accept key/value binding."""
        logger = get_logger(__name__)
        assert logger.bind(batch="x") is not None
