"""
Schemas Package
===============

Pydantic models for domain objects and API requests/responses.
"""

from price_reconcile.schemas.domain import (
    CellValue,
    FieldMapping,
    FieldTarget,
    HeaderGroup,
    ImportRecord,
    ManualRetag,
    RawRow,
    ReadinessReport,
    ResolvedRow,
    UnresolvedReason,
)
from price_reconcile.schemas.requests import BatchRequest, ReconcileRequest
from price_reconcile.schemas.responses import (
    HarmonizeResponse,
    ImportRecordsResponse,
    ReadinessResponse,
)

__all__ = [
    # Domain
    "CellValue",
    "FieldMapping",
    "FieldTarget",
    "HeaderGroup",
    "ImportRecord",
    "ManualRetag",
    "RawRow",
    "ReadinessReport",
    "ResolvedRow",
    "UnresolvedReason",
    # Requests
    "BatchRequest",
    "ReconcileRequest",
    # Responses
    "HarmonizeResponse",
    "ImportRecordsResponse",
    "ReadinessResponse",
]
