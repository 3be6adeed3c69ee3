"""
Mapping Service
===============

Builds and edits the field mapping a reviewer submits for a batch.

Mappings are immutable; every edit returns a new FieldMapping so the
readiness report can be recomputed from a consistent snapshot.

Example:
    mapping = guess_mapping(rows)
    mapping = toggle_fallback_field(mapping, FieldTarget.NAME, "Item", True)
    mapping = update_manual_retag(mapping, 3, name="Unknown Item")
    validate_mapping(mapping.model_copy(update={"brand_name": "Sony"}))
"""

import re
from collections.abc import Mapping, Sequence
from typing import Final

from price_reconcile.schemas.domain import (
    CellValue,
    FieldMapping,
    FieldTarget,
    ManualRetag,
)
from price_reconcile.services.column_harmonizer import collect_header_keys
from price_reconcile.services.field_resolver import cell_is_usable
from price_reconcile.services.readiness_analyzer import analyze_readiness
from price_reconcile.utils.errors import MappingValidationError
from price_reconcile.utils.logger import get_logger

logger = get_logger(__name__)

# First header matching each pattern is proposed for the target
GUESS_PATTERNS: Final[dict[FieldTarget, re.Pattern[str]]] = {
    FieldTarget.NAME: re.compile(r"desc|name|product|item|model", re.IGNORECASE),
    FieldTarget.COST: re.compile(r"price|cost|dealer|net|wholesale", re.IGNORECASE),
    FieldTarget.SRP: re.compile(
        r"srp|retail|sell|suggested.*price|base.*price", re.IGNORECASE
    ),
}

MISSING_COLUMNS_MESSAGE: Final[str] = "Please map the Product Name and Cost Price columns."
MISSING_BRAND_MESSAGE: Final[str] = "Please enter a Brand Name for this price list."

_FALLBACK_ATTRIBUTES: Final[dict[FieldTarget, str]] = {
    FieldTarget.NAME: "name_fallback_fields",
    FieldTarget.COST: "cost_fallback_fields",
    FieldTarget.SRP: "srp_fallback_fields",
}


def guess_mapping(rows: Sequence[Mapping[str, CellValue]]) -> FieldMapping:
    """
    Propose primary columns from header names.

    Args:
        rows: Extracted rows in batch order

    Returns:
        FieldMapping with whatever targets could be guessed; brand,
        fallbacks and retags empty
    """
    keys = collect_header_keys(rows)

    def first_match(target: FieldTarget) -> str | None:
        pattern = GUESS_PATTERNS[target]
        return next((key for key in keys if pattern.search(key)), None)

    name_key = first_match(FieldTarget.NAME)
    cost_key = first_match(FieldTarget.COST)
    srp_key = first_match(FieldTarget.SRP)

    logger.debug(
        "Mapping guessed",
        header_keys=len(keys),
        name_field=name_key,
        cost_field=cost_key,
        srp_field=srp_key,
    )

    return FieldMapping(
        name_field=name_key or "",
        cost_field=cost_key or "",
        srp_field=srp_key,
    )


def toggle_fallback_field(
    mapping: FieldMapping,
    target: FieldTarget,
    field: str,
    checked: bool,
) -> FieldMapping:
    """
    Add or remove a fallback column for a target.

    Added columns go to the end of the list; duplicates collapse onto
    their first position.
    """
    attribute = _FALLBACK_ATTRIBUTES[target]
    current = mapping.fallback_fields(target)

    if checked:
        updated = tuple(dict.fromkeys([*current, field]))
    else:
        updated = tuple(key for key in current if key != field)

    return mapping.model_copy(update={attribute: updated})


def update_manual_retag(
    mapping: FieldMapping,
    row_index: int,
    *,
    name: str | None = None,
    cost_price: int | None = None,
    srp_price: int | None = None,
) -> FieldMapping:
    """
    Merge a manual correction into the retag for one row.

    Only the values passed are replaced; earlier values for the other
    fields of the same row are kept.
    """
    partial = {
        key: value
        for key, value in (
            ("name", name),
            ("cost_price", cost_price),
            ("srp_price", srp_price),
        )
        if value is not None
    }
    current = mapping.manual_retag(row_index) or ManualRetag()
    merged = current.model_copy(update=partial)

    retags = {**mapping.manual_retag_by_row, row_index: merged}
    return mapping.model_copy(update={"manual_retag_by_row": retags})


def clear_manual_retag(mapping: FieldMapping, row_index: int) -> FieldMapping:
    """Drop the manual correction for one row."""
    retags = {
        index: retag
        for index, retag in mapping.manual_retag_by_row.items()
        if index != row_index
    }
    return mapping.model_copy(update={"manual_retag_by_row": retags})


def quick_fallback_eligible_count(
    rows: Sequence[Mapping[str, CellValue]],
    mapping: FieldMapping,
    column: str,
    target: FieldTarget,
) -> int:
    """
    Count unresolved rows that a fallback column would help.

    Args:
        rows: Extracted rows in batch order
        mapping: Current mapping
        column: Candidate fallback header
        target: FieldTarget.NAME or FieldTarget.COST

    Returns:
        Number of unresolved rows whose cell in ``column`` is usable
    """
    if not column:
        return 0

    report = analyze_readiness(rows, mapping)
    return sum(
        1 for resolved in report.unresolved if cell_is_usable(resolved.row.get(column), target)
    )


def apply_quick_fallback(
    rows: Sequence[Mapping[str, CellValue]],
    mapping: FieldMapping,
    column: str,
    target: FieldTarget,
) -> FieldMapping:
    """
    Add a column as fallback for the unresolved rows it can fill.

    Raises:
        MappingValidationError: No column given, or the column holds
            nothing usable for any unresolved row
    """
    if not column:
        raise MappingValidationError("Please select a column first.")

    eligible = quick_fallback_eligible_count(rows, mapping, column, target)
    if eligible == 0:
        raise MappingValidationError(
            "Selected column has no usable data for unresolved rows.",
            details={"column": column, "target": target.value},
        )

    logger.info(
        "Quick fallback applied",
        column=column,
        target=target.value,
        eligible_rows=eligible,
    )
    return toggle_fallback_field(mapping, target, column, True)


def validate_mapping(mapping: FieldMapping) -> None:
    """
    Check that a mapping can be submitted for import.

    Raises:
        MappingValidationError: Name or cost column unmapped, or brand blank
    """
    if not mapping.name_field or not mapping.cost_field:
        raise MappingValidationError(
            MISSING_COLUMNS_MESSAGE,
            details={
                "name_field": mapping.name_field,
                "cost_field": mapping.cost_field,
            },
        )
    if not mapping.brand_name.strip():
        raise MappingValidationError(MISSING_BRAND_MESSAGE)
