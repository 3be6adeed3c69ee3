"""
Services Package
================

Reconciliation pipeline: header scoring and harmonization, field
resolution, readiness analysis, mapping edits and import records.
"""

from price_reconcile.services.column_harmonizer import (
    collect_header_keys,
    group_headers,
    harmonize_batch,
    harmonize_rows,
)
from price_reconcile.services.extraction_payload import (
    merge_page_rows,
    parse_extraction_payload,
)
from price_reconcile.services.field_resolver import resolve_cost, resolve_name, resolve_srp
from price_reconcile.services.header_scorer import (
    SAME_COLUMN_THRESHOLD,
    classify_header,
    similarity_score,
)
from price_reconcile.services.import_builder import build_import_records
from price_reconcile.services.mapping_service import (
    apply_quick_fallback,
    clear_manual_retag,
    guess_mapping,
    quick_fallback_eligible_count,
    toggle_fallback_field,
    update_manual_retag,
    validate_mapping,
)
from price_reconcile.services.readiness_analyzer import analyze_readiness

__all__ = [
    "SAME_COLUMN_THRESHOLD",
    "analyze_readiness",
    "apply_quick_fallback",
    "build_import_records",
    "classify_header",
    "clear_manual_retag",
    "collect_header_keys",
    "group_headers",
    "guess_mapping",
    "harmonize_batch",
    "harmonize_rows",
    "merge_page_rows",
    "parse_extraction_payload",
    "quick_fallback_eligible_count",
    "resolve_cost",
    "resolve_name",
    "resolve_srp",
    "similarity_score",
    "toggle_fallback_field",
    "update_manual_retag",
    "validate_mapping",
]
