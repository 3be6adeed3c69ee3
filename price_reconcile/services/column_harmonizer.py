"""
Column Harmonizer
=================

Merges differently named columns of one extraction batch onto canonical
header keys.

Grouping is greedy over the ordered header list: the first unassigned key
opens a group and pulls in every later unassigned key that scores at or
above the threshold against that opening key. Members are compared with
the canonical key only, never with each other, so a group may hold keys
that would not match pairwise. That looseness is relied upon by existing
batches and is kept as is.

Example:
    rows = [
        {"Cost Price": "100", "Product Name": "A"},
        {"Dealer Price": "90", "Item": "B"},
    ]
    harmonize_rows(rows)
    # [{"Cost Price": "100", "Product Name": "A"},
    #  {"Cost Price": "90", "Product Name": "B"}]
"""

from collections.abc import Mapping, Sequence

from price_reconcile.schemas.domain import CellValue, HeaderGroup, RawRow
from price_reconcile.services.header_scorer import SAME_COLUMN_THRESHOLD, similarity_score
from price_reconcile.utils.logger import get_logger

logger = get_logger(__name__)


def collect_header_keys(rows: Sequence[Mapping[str, CellValue]]) -> list[str]:
    """
    Union of all header keys across a batch, in first-seen order.

    Args:
        rows: Extracted rows in batch order

    Returns:
        Distinct header keys
    """
    seen: dict[str, None] = {}
    for row in rows:
        for key in row:
            seen.setdefault(key, None)
    return list(seen)


def group_headers(
    keys: Sequence[str],
    threshold: float = SAME_COLUMN_THRESHOLD,
) -> list[HeaderGroup]:
    """
    Partition an ordered header list into equivalence groups.

    Every key lands in exactly one group. Group order and member order
    follow the input order.

    Args:
        keys: Distinct header keys in first-seen order
        threshold: Minimum similarity to join a group

    Returns:
        Header groups, canonical key first in each
    """
    assigned: set[str] = set()
    groups: list[HeaderGroup] = []

    for canonical in keys:
        if canonical in assigned:
            continue

        variants = [canonical]
        assigned.add(canonical)

        for candidate in keys:
            if candidate in assigned:
                continue
            if similarity_score(canonical, candidate) >= threshold:
                variants.append(candidate)
                assigned.add(candidate)

        groups.append(HeaderGroup(canonical=canonical, variants=tuple(variants)))

    return groups


def rewrite_row(row: Mapping[str, CellValue], groups: Sequence[HeaderGroup]) -> RawRow:
    """
    Rewrite one row onto canonical keys.

    For each group the first variant present on the row supplies the value.
    Groups with no variant on the row are left out.

    Args:
        row: Raw extracted row
        groups: Header groups for the batch

    Returns:
        New row keyed by canonical headers
    """
    rewritten: RawRow = {}
    for group in groups:
        for variant in group.variants:
            if variant in row:
                rewritten[group.canonical] = row[variant]
                break
    return rewritten


def harmonize_batch(
    rows: Sequence[Mapping[str, CellValue]],
    threshold: float = SAME_COLUMN_THRESHOLD,
) -> tuple[list[RawRow], list[HeaderGroup]]:
    """
    Rewrite a whole batch onto canonical header keys.

    Args:
        rows: Extracted rows in batch order
        threshold: Minimum similarity to merge two headers

    Returns:
        Tuple of (same-length, same-order list of new rows, header groups)
    """
    keys = collect_header_keys(rows)
    if not keys:
        return [dict(row) for row in rows], []

    groups = group_headers(keys, threshold=threshold)

    logger.debug(
        "Harmonizing batch headers",
        rows=len(rows),
        header_keys=len(keys),
        groups=len(groups),
    )
    for group in groups:
        if group.is_merged:
            logger.debug(
                "Merged header variants",
                canonical=group.canonical,
                variants=list(group.variants),
            )

    return [rewrite_row(row, groups) for row in rows], groups


def harmonize_rows(
    rows: Sequence[Mapping[str, CellValue]],
    threshold: float = SAME_COLUMN_THRESHOLD,
) -> list[RawRow]:
    """Rewrite a whole batch onto canonical header keys, dropping the groups."""
    harmonized, _ = harmonize_batch(rows, threshold=threshold)
    return harmonized
