"""
Pydantic Response Models
========================

API response schemas for the reconciliation endpoints.
Ensures consistent response structure across all endpoints.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from price_reconcile.schemas.domain import (
    HeaderGroup,
    ImportRecord,
    RawRow,
    ReadinessReport,
    ResolvedRow,
)

_RESPONSE_CONFIG = ConfigDict(populate_by_name=True, alias_generator=to_camel)


class HarmonizeResponse(BaseModel):
    """
    Response for POST /reconcile/harmonize.

    Attributes:
        rows: Rows rewritten onto canonical headers
        groups: Header groups used for the rewrite
    """

    model_config = _RESPONSE_CONFIG

    rows: list[RawRow]
    groups: list[HeaderGroup]


class ReadinessResponse(BaseModel):
    """
    Response for POST /reconcile/analyze.

    Attributes:
        total: Rows in the batch
        ready: Rows ready for import
        unresolved_count: Rows still needing attention
        rows: Resolution result per row
        unresolved: Unresolved rows in batch order
    """

    model_config = _RESPONSE_CONFIG

    total: Annotated[int, Field(ge=0)]
    ready: Annotated[int, Field(ge=0)]
    unresolved_count: Annotated[int, Field(ge=0)]
    rows: list[ResolvedRow]
    unresolved: list[ResolvedRow]

    @classmethod
    def from_report(cls, report: ReadinessReport) -> "ReadinessResponse":
        """Build the response from a readiness report."""
        return cls(
            total=report.total,
            ready=report.ready,
            unresolved_count=report.unresolved_count,
            rows=report.rows,
            unresolved=report.unresolved,
        )


class ImportRecordsResponse(BaseModel):
    """
    Response for POST /reconcile/import-records.

    Attributes:
        records: Product records for the ready rows
        total: Rows in the batch
        ready: Records produced
        skipped: Rows left out as unresolved
    """

    model_config = _RESPONSE_CONFIG

    records: list[ImportRecord]
    total: Annotated[int, Field(ge=0)]
    ready: Annotated[int, Field(ge=0)]
    skipped: Annotated[int, Field(ge=0)]
