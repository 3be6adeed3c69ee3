"""
Extraction Payload Decoder
==========================

Decodes the JSON text returned by the page extractor into raw rows.

The extractor is asked for a flat JSON array of row objects but does not
always comply: it may wrap the array in an object ({"products": [...]})
or surround it with markdown code fences. Decoding tolerates both.

Example:
    parse_extraction_payload('```json\\n[{"Desc": "A7C", "Net": 24845}]\\n```')
    # [{"Desc": "A7C", "Net": 24845}]
"""

import json
import re
from collections.abc import Iterable
from typing import Any, Final

from price_reconcile.schemas.domain import CellValue, RawRow
from price_reconcile.utils.errors import ExtractionPayloadError
from price_reconcile.utils.logger import get_logger

logger = get_logger(__name__)

_FENCE_PATTERN: Final[re.Pattern[str]] = re.compile(r"```(?:json)?", re.IGNORECASE)


def _coerce_cell(value: Any) -> CellValue:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return value
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def coerce_row(item: dict[str, Any]) -> RawRow:
    """
    Coerce one decoded object onto the raw row scalar domain.

    Nulls are dropped, booleans become "true"/"false" and nested values
    are kept as compact JSON text.
    """
    return {
        str(key): _coerce_cell(value)
        for key, value in item.items()
        if value is not None
    }


def _rows_from_json(decoded: Any) -> list[RawRow]:
    items: Any = []
    if isinstance(decoded, list):
        items = decoded
    elif isinstance(decoded, dict):
        items = next((value for value in decoded.values() if isinstance(value, list)), [])

    return [coerce_row(item) for item in items if isinstance(item, dict)]


def parse_extraction_payload(text: str | None) -> list[RawRow]:
    """
    Decode extractor output into rows.

    Args:
        text: Raw model response text

    Returns:
        Rows in document order; [] when the payload holds no rows

    Raises:
        ExtractionPayloadError: If the text is not JSON even after
            stripping code fences
    """
    if not text or not text.strip():
        return []

    try:
        decoded = json.loads(text)
    except json.JSONDecodeError:
        logger.warning("Extractor payload is not plain JSON, stripping code fences")
        cleaned = _FENCE_PATTERN.sub("", text)
        try:
            decoded = json.loads(cleaned)
        except json.JSONDecodeError as e:
            raise ExtractionPayloadError(
                "Extractor payload is not valid JSON",
                details={"error": str(e), "preview": text[:200]},
            ) from e

    return _rows_from_json(decoded)


def merge_page_rows(pages: Iterable[list[RawRow]]) -> list[RawRow]:
    """Concatenate per-page rows into one batch, preserving page order."""
    batch: list[RawRow] = []
    for page_rows in pages:
        batch.extend(page_rows)
    return batch
