"""
Cell Text and Brand Name Parser
===============================

Utility module for reading text out of extracted cells and for shaping
the brand and search fields written alongside imported products.

Example inputs:
- "  Sony A7C  " → "Sony A7C"
- "N/A" → ""
- 24845.0 → "24845"
- "  sony   indonesia " (brand) → "SONY INDONESIA"

Follows:
- Single Responsibility: Only handles text cleanup
- KISS: Regex-based, no external dependencies
"""

import re
from typing import Final

# Whole-cell values the extractor emits when it has nothing to report
PLACEHOLDER_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(undefined|null|n/a|na|-)$", re.IGNORECASE
)

_KEYWORD_STRIP_PATTERN: Final[re.Pattern[str]] = re.compile(r"[^a-z0-9\s]")
_WHITESPACE_PATTERN: Final[re.Pattern[str]] = re.compile(r"\s+")


def cell_to_text(value: object) -> str:
    """
    Render a scalar cell the way it reads in the source document.

    Whole floats lose their trailing ".0" and booleans are lower-cased,
    so numeric cells compare equal to their printed form.

    Args:
        value: Raw cell value (string, number or None)

    Returns:
        Untrimmed text, "" for None
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def normalize_text(value: object) -> str:
    """
    Normalize a cell to usable text.

    Trims whitespace and collapses placeholder tokens to empty.

    Args:
        value: Raw cell value

    Returns:
        Cleaned text, or "" when the cell holds nothing usable

    Examples:
        >>> normalize_text("  Sony A7C ")
        'Sony A7C'

        >>> normalize_text("N/A")
        ''

        >>> normalize_text(None)
        ''

        >>> normalize_text(1500.0)
        '1500'
    """
    text = cell_to_text(value).strip()
    if not text:
        return ""
    if PLACEHOLDER_PATTERN.match(text):
        return ""
    return text


def format_brand_name(value: str | None) -> str:
    """
    Format a user-entered brand for storage.

    Examples:
        >>> format_brand_name("  sony   indonesia ")
        'SONY INDONESIA'

        >>> format_brand_name("   ")
        'UNKNOWN'
    """
    compacted = _WHITESPACE_PATTERN.sub(" ", (value or "").strip())
    return compacted.upper() if compacted else "UNKNOWN"


def normalize_brand(value: str | None) -> str:
    """Comparison key for brand names (lowercase, blank → "unknown")."""
    normalized = (value or "Unknown").strip().lower()
    return normalized or "unknown"


def build_search_keywords(name: str, brand: str) -> list[str]:
    """
    Build prefix keywords for product search.

    Every word of "name brand" is emitted together with each of its
    prefixes of two or more characters, in first-seen order.

    Args:
        name: Product name
        brand: Brand name

    Returns:
        De-duplicated keyword list

    Example:
        >>> build_search_keywords("A7C", "Sony")
        ['a7c', 'a7', 'sony', 'so', 'son']
    """
    source = f"{name or ''} {brand or ''}".lower()
    cleaned = _WHITESPACE_PATTERN.sub(" ", _KEYWORD_STRIP_PATTERN.sub(" ", source)).strip()
    if not cleaned:
        return []

    keywords: dict[str, None] = {}
    for word in cleaned.split(" "):
        keywords.setdefault(word, None)
        for end in range(2, len(word) + 1):
            keywords.setdefault(word[:end], None)

    return list(keywords)
