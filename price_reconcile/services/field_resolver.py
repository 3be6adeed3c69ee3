"""
Field Resolver
==============

Resolves product name, cost price and SRP price for a single row.

Priority, identical for every target:
    1. Manual retag for the row (name non-empty / price > 0)
    2. Primary mapped column
    3. Fallback columns in configured order
    4. "" / 0

SRP is optional: without an ``srp_field`` it resolves to 0 unless a
manual SRP was entered.

All functions are pure: same row, index and mapping give the same result,
and neither the row nor the mapping is modified.
"""

from collections.abc import Mapping

from price_reconcile.schemas.domain import CellValue, FieldMapping, FieldTarget
from price_reconcile.utils.name_parser import normalize_text
from price_reconcile.utils.price_parser import normalize_price


def _manual_price(value: int | None) -> int:
    return value if value and value > 0 else 0


def _first_text(row: Mapping[str, CellValue], keys: list[str]) -> str:
    for key in keys:
        value = normalize_text(row.get(key))
        if value:
            return value
    return ""


def _first_price(row: Mapping[str, CellValue], keys: list[str]) -> int:
    for key in keys:
        value = normalize_price(row.get(key))
        if value > 0:
            return value
    return 0


def resolve_name(row: Mapping[str, CellValue], row_index: int, mapping: FieldMapping) -> str:
    """
    Resolve the product name of a row.

    Args:
        row: Raw extracted row
        row_index: Zero-based position of the row in the batch
        mapping: Field mapping including manual retags

    Returns:
        Product name, "" when no source yields one
    """
    retag = mapping.manual_retag(row_index)
    if retag is not None:
        manual_name = normalize_text(retag.name)
        if manual_name:
            return manual_name

    return _first_text(row, mapping.candidate_fields(FieldTarget.NAME))


def resolve_cost(row: Mapping[str, CellValue], row_index: int, mapping: FieldMapping) -> int:
    """
    Resolve the cost price of a row.

    Args:
        row: Raw extracted row
        row_index: Zero-based position of the row in the batch
        mapping: Field mapping including manual retags

    Returns:
        Cost price, 0 when no source yields a positive price
    """
    retag = mapping.manual_retag(row_index)
    if retag is not None:
        manual_cost = _manual_price(retag.cost_price)
        if manual_cost > 0:
            return manual_cost

    return _first_price(row, mapping.candidate_fields(FieldTarget.COST))


def resolve_srp(row: Mapping[str, CellValue], row_index: int, mapping: FieldMapping) -> int:
    """
    Resolve the SRP price of a row.

    Args:
        row: Raw extracted row
        row_index: Zero-based position of the row in the batch
        mapping: Field mapping including manual retags

    Returns:
        SRP price, 0 when unmapped or no source yields a positive price
    """
    retag = mapping.manual_retag(row_index)
    if retag is not None:
        manual_srp = _manual_price(retag.srp_price)
        if manual_srp > 0:
            return manual_srp

    if not mapping.srp_field:
        return 0

    return _first_price(row, mapping.candidate_fields(FieldTarget.SRP))


def resolve_value(
    row: Mapping[str, CellValue],
    row_index: int,
    mapping: FieldMapping,
    target: FieldTarget,
) -> str | int:
    """Resolve any target; name gives text, prices give integers."""
    if target is FieldTarget.NAME:
        return resolve_name(row, row_index, mapping)
    if target is FieldTarget.COST:
        return resolve_cost(row, row_index, mapping)
    return resolve_srp(row, row_index, mapping)


def cell_is_usable(value: CellValue, target: FieldTarget) -> bool:
    """Whether a single cell would satisfy a target on its own."""
    if target is FieldTarget.NAME:
        return bool(normalize_text(value))
    return normalize_price(value) > 0
