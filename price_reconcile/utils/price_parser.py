"""
Price Normalizer
================

Utility module for turning extracted price cells into whole currency units.

Price lists in this domain quote whole Rupiah amounts with dots or commas
as digit grouping, so every non-digit character is a formatting artifact.

Example inputs:
- "Rp 1.500.000" → 1500000
- "24.845" → 24845
- 1500000 → 1500000
- "n/a" → 0
- "-5" → 5 (sign is stripped with the other non-digits)

Follows:
- Single Responsibility: Only handles price normalization
- KISS: Digit stripping, no locale detection
"""

import math
import re
from decimal import Decimal
from typing import Final

from price_reconcile.utils.name_parser import normalize_text

_NON_DIGIT_PATTERN: Final[re.Pattern[str]] = re.compile(r"[^0-9]")


def normalize_price(value: object) -> int:
    """
    Normalize a raw cell into a non-negative integer price.

    Numbers are taken as they are (magnitude, fractional part truncated);
    non-finite numbers give 0. Anything else is read as text, placeholder
    tokens become empty, and the remaining digits are concatenated and
    parsed as base 10.

    Args:
        value: Price cell (string, int, float, Decimal or None)

    Returns:
        Non-negative integer price, 0 when nothing usable is present

    Examples:
        >>> normalize_price("Rp 1.500.000")
        1500000

        >>> normalize_price(1500000)
        1500000

        >>> normalize_price("")
        0

        >>> normalize_price(float("nan"))
        0
    """
    if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
        if isinstance(value, float) and not math.isfinite(value):
            return 0
        if isinstance(value, Decimal) and not value.is_finite():
            return 0
        return abs(int(value))

    text = normalize_text(value)
    if not text:
        return 0

    digits = _NON_DIGIT_PATTERN.sub("", text)
    if not digits:
        return 0

    try:
        return int(digits)
    except ValueError:
        # Digit run past the interpreter's int conversion limit
        return 0
