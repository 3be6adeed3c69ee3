"""
Structured Logging Configuration
================================

structlog setup for the reconciliation service.

Pipeline modules log key/value events (header merges, readiness counts,
import summaries). The API binds a request id into structlog's context
variables so every event emitted while serving a request carries it.
"""

import logging
import sys
from typing import Any

import structlog

from price_reconcile.config.settings import get_settings


def _renderer(json_output: bool) -> Any:
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=True)


def configure_logging(level: str | None = None) -> None:
    """
    Configure structured logging for the application.

    Production renders one JSON object per line; other environments get
    the coloured console renderer.

    Args:
        level: Override for the configured log level (e.g. "DEBUG" to see
            per-group header merges)
    """
    settings = get_settings()
    level_name = (level or settings.log_level).upper()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level_name, logging.INFO),
    )

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if settings.is_production:
        processors.append(structlog.processors.format_exc_info)
    processors.append(_renderer(json_output=settings.is_production))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Logger for a module, typically called with __name__."""
    return structlog.get_logger(name)


def bind_request_context(request_id: str, **fields: Any) -> None:
    """Attach a request id (and any extra fields) to subsequent log events."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(request_id=request_id, **fields)


def clear_request_context() -> None:
    """Drop request-scoped log fields."""
    structlog.contextvars.clear_contextvars()
