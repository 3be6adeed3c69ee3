"""
Import Builder
==============

Turns a reviewed batch into product records for the product store.

Only ready rows (name present, cost above zero) become records. The
brand entered for the batch is applied to every record, and the raw row
is carried along for audit.
"""

from collections.abc import Mapping, Sequence

from price_reconcile.schemas.domain import CellValue, FieldMapping, ImportRecord
from price_reconcile.services.mapping_service import validate_mapping
from price_reconcile.services.readiness_analyzer import analyze_readiness
from price_reconcile.utils.logger import get_logger
from price_reconcile.utils.name_parser import build_search_keywords, format_brand_name

logger = get_logger(__name__)


def build_import_records(
    rows: Sequence[Mapping[str, CellValue]],
    mapping: FieldMapping,
) -> list[ImportRecord]:
    """
    Build product records for every import-ready row.

    Args:
        rows: Extracted rows in batch order (harmonized or not)
        mapping: Submitted field mapping

    Returns:
        Records in batch order

    Raises:
        MappingValidationError: If the mapping fails the submission gate
    """
    validate_mapping(mapping)

    brand = format_brand_name(mapping.brand_name)
    report = analyze_readiness(rows, mapping)

    records = [
        ImportRecord(
            name=resolved.name,
            brand=brand,
            cost_price=resolved.cost_price,
            srp_price=resolved.srp_price,
            raw_json=dict(resolved.row),
            search_keywords=build_search_keywords(resolved.name, brand),
        )
        for resolved in report.rows
        if resolved.is_resolved
    ]

    logger.info(
        "Import records built",
        brand=brand,
        total=report.total,
        ready=len(records),
        skipped=report.total - len(records),
    )

    return records
