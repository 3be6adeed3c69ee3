"""
Custom Exception Classes
========================

Application-specific exceptions for the reconciliation service.

Row-level problems (missing cells, junk prices, unresolved rows) are never
raised; they degrade to empty values and a per-row reason. These exceptions
cover caller-level preconditions only.
"""

from typing import Any


class ReconcileError(Exception):
    """Base exception for price-reconcile."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class MappingValidationError(ReconcileError):
    """Raised when a field mapping cannot be submitted for import."""

    pass


class ExtractionPayloadError(ReconcileError):
    """Raised when extractor output cannot be decoded into rows."""

    pass
