"""
Readiness Analyzer
==================

Runs the field resolver over a batch and reports which rows can be
imported.

A row is ready when it resolves to a non-empty name and a cost above
zero. Unresolved rows carry a reason so a reviewer can retag them or add
a fallback column. The report is a pure projection of (rows, mapping);
callers recompute it whenever the mapping or a manual retag changes.
"""

from collections.abc import Mapping, Sequence

from price_reconcile.schemas.domain import (
    CellValue,
    FieldMapping,
    ReadinessReport,
    ResolvedRow,
    UnresolvedReason,
)
from price_reconcile.services.field_resolver import resolve_cost, resolve_name, resolve_srp
from price_reconcile.utils.logger import get_logger
from price_reconcile.utils.name_parser import normalize_text

logger = get_logger(__name__)


def unresolved_reason(name: str, cost: int) -> UnresolvedReason | None:
    """
    Explain why a row is not ready.

    Args:
        name: Resolved product name
        cost: Resolved cost price

    Returns:
        Reason, or None when the row is ready
    """
    if not name and cost <= 0:
        return UnresolvedReason.MISSING_NAME_AND_COST
    if not name:
        return UnresolvedReason.MISSING_NAME
    if cost <= 0:
        return UnresolvedReason.MISSING_COST
    return None


def populated_columns(row: Mapping[str, CellValue]) -> list[str]:
    """Headers whose cell holds usable text, in row order."""
    return [key for key, value in row.items() if normalize_text(value)]


def analyze_row(
    row: Mapping[str, CellValue],
    row_index: int,
    mapping: FieldMapping,
) -> ResolvedRow:
    """
    Resolve and classify one row.

    Args:
        row: Raw extracted row
        row_index: Zero-based position in the batch
        mapping: Field mapping including manual retags

    Returns:
        ResolvedRow with status and diagnostics
    """
    name = resolve_name(row, row_index, mapping)
    cost = resolve_cost(row, row_index, mapping)
    srp = resolve_srp(row, row_index, mapping)

    has_name = bool(name)
    has_cost = cost > 0

    return ResolvedRow(
        index=row_index,
        row=dict(row),
        name=name,
        cost_price=cost,
        srp_price=srp,
        has_name=has_name,
        has_cost=has_cost,
        is_resolved=has_name and has_cost,
        reason=unresolved_reason(name, cost),
        populated_columns=populated_columns(row),
    )


def analyze_readiness(
    rows: Sequence[Mapping[str, CellValue]],
    mapping: FieldMapping,
) -> ReadinessReport:
    """
    Classify every row of a batch as ready or unresolved.

    Args:
        rows: Extracted rows in batch order
        mapping: Field mapping including manual retags

    Returns:
        ReadinessReport with per-row results, ready count and the
        unresolved rows in batch order

    Example:
        >>> rows = [{"Desc": "Sony A7C", "Net": "24.845"}, {"Desc": "", "Net": "91.199"}]
        >>> report = analyze_readiness(rows, FieldMapping(name_field="Desc", cost_field="Net"))
        >>> (report.total, report.ready, report.unresolved_indices())
        (2, 1, [1])
    """
    resolved_rows = [analyze_row(row, index, mapping) for index, row in enumerate(rows)]
    unresolved = [resolved for resolved in resolved_rows if not resolved.is_resolved]

    report = ReadinessReport(
        total=len(resolved_rows),
        ready=len(resolved_rows) - len(unresolved),
        rows=resolved_rows,
        unresolved=unresolved,
    )

    logger.debug(
        "Readiness analyzed",
        total=report.total,
        ready=report.ready,
        unresolved=report.unresolved_count,
    )

    return report
