"""
Reconcile Routes
================

API endpoints over the reconciliation pipeline.

Endpoints:
- POST /reconcile/harmonize - Rewrite rows onto canonical headers
- POST /reconcile/guess-mapping - Propose primary columns
- POST /reconcile/analyze - Import readiness for a mapping
- POST /reconcile/import-records - Product records for ready rows

All endpoints are stateless; the client resubmits the batch and the
current mapping on every change.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from price_reconcile.config.settings import Settings, get_settings
from price_reconcile.schemas.domain import FieldMapping, RawRow
from price_reconcile.schemas.requests import BatchRequest, ReconcileRequest
from price_reconcile.schemas.responses import (
    HarmonizeResponse,
    ImportRecordsResponse,
    ReadinessResponse,
)
from price_reconcile.services.column_harmonizer import harmonize_batch, harmonize_rows
from price_reconcile.services.import_builder import build_import_records
from price_reconcile.services.mapping_service import guess_mapping
from price_reconcile.services.readiness_analyzer import analyze_readiness
from price_reconcile.utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter()


def _prepare_rows(request: ReconcileRequest, settings: Settings) -> list[RawRow]:
    """Harmonize the batch when the request (or the service default) asks for it."""
    harmonize = (
        settings.harmonize_by_default if request.harmonize is None else request.harmonize
    )
    if not harmonize:
        return request.rows
    return harmonize_rows(request.rows, threshold=settings.header_similarity_threshold)


@router.post(
    "/harmonize",
    response_model=HarmonizeResponse,
    summary="Harmonize column headers",
    description=(
        "Group header keys that denote the same column across the batch and "
        "rewrite every row onto the canonical key of each group."
    ),
)
async def harmonize(
    request: BatchRequest,
    settings: Annotated[Settings, Depends(get_settings)],
) -> HarmonizeResponse:
    """Rewrite a batch onto canonical headers."""
    rows, groups = harmonize_batch(
        request.rows, threshold=settings.header_similarity_threshold
    )
    logger.info(
        "Batch harmonized",
        rows=len(rows),
        groups=len(groups),
        merged_groups=sum(1 for group in groups if group.is_merged),
    )
    return HarmonizeResponse(rows=rows, groups=groups)


@router.post(
    "/guess-mapping",
    response_model=FieldMapping,
    summary="Guess field mapping",
    description="Propose name, cost and SRP columns from the batch's header names.",
)
async def guess(request: BatchRequest) -> FieldMapping:
    """Propose a starting mapping for the batch."""
    return guess_mapping(request.rows)


@router.post(
    "/analyze",
    response_model=ReadinessResponse,
    summary="Analyze import readiness",
    description=(
        "Resolve name, cost and SRP for every row under the given mapping and "
        "report which rows are ready for import and why the others are not."
    ),
)
async def analyze(
    request: ReconcileRequest,
    settings: Annotated[Settings, Depends(get_settings)],
) -> ReadinessResponse:
    """Report import readiness for the batch."""
    rows = _prepare_rows(request, settings)
    report = analyze_readiness(rows, request.mapping)
    logger.info(
        "Readiness analyzed",
        total=report.total,
        ready=report.ready,
        unresolved=report.unresolved_count,
    )
    return ReadinessResponse.from_report(report)


@router.post(
    "/import-records",
    response_model=ImportRecordsResponse,
    summary="Build import records",
    description=(
        "Validate the mapping and return product records for every ready row. "
        "Responds 400 when the name or cost column is unmapped or the brand is blank."
    ),
    responses={
        400: {"description": "Mapping failed submission checks"},
    },
)
async def import_records(
    request: ReconcileRequest,
    settings: Annotated[Settings, Depends(get_settings)],
) -> ImportRecordsResponse:
    """Build product records for the ready rows of the batch."""
    rows = _prepare_rows(request, settings)
    records = build_import_records(rows, request.mapping)
    return ImportRecordsResponse(
        records=records,
        total=len(rows),
        ready=len(records),
        skipped=len(rows) - len(records),
    )
