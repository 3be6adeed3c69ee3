"""
Header Similarity Scorer
========================

Scores how likely two extracted column headers denote the same field.

Price lists drift between pages: "Cost Price" on page one becomes "Net",
"Dealer Price" or "Modal" further down. Headers are first classified into
semantic categories by keyword; two headers sharing a category are treated
as the same column, except that cost and SRP headers are kept apart even
when both mention "price". Headers with no recognised keyword fall back to
a positional character comparison that only catches near-identical text
(OCR duplicates such as "Katalog" / "Katal0g").

Scores:
    1.0  case-insensitive identical
    0.2  one header is a cost header, the other an SRP header
    0.9  at least one shared category
    r    positional overlap ratio otherwise
"""

import re
from enum import Enum
from typing import Final

SAME_COLUMN_THRESHOLD: Final[float] = 0.75
EXACT_MATCH_SCORE: Final[float] = 1.0
SHARED_CATEGORY_SCORE: Final[float] = 0.9
COST_SRP_CONFLICT_SCORE: Final[float] = 0.2


class HeaderCategory(str, Enum):
    """Semantic header categories."""

    NAME = "name"
    COST = "cost"
    SRP = "srp"
    PRICE = "price"
    BRAND = "brand"
    CODE = "code"
    QTY = "qty"


# Unanchored substring patterns; English plus the Indonesian terms seen on
# local distributor price lists (harga, modal, merek, kode, jumlah...).
CATEGORY_PATTERNS: Final[dict[HeaderCategory, re.Pattern[str]]] = {
    HeaderCategory.NAME: re.compile(
        r"product|name|desc|item|title|artikel|produk", re.IGNORECASE
    ),
    HeaderCategory.COST: re.compile(r"cost|dealer|net|wholesale|modal", re.IGNORECASE),
    HeaderCategory.SRP: re.compile(
        r"srp|msrp|retail|list|suggested|base", re.IGNORECASE
    ),
    HeaderCategory.PRICE: re.compile(r"price|harga|nilai|rate", re.IGNORECASE),
    HeaderCategory.BRAND: re.compile(
        r"brand|merk|merek|supplier|vendor|pabrik", re.IGNORECASE
    ),
    HeaderCategory.CODE: re.compile(r"code|sku|id|nomor|no|kode", re.IGNORECASE),
    HeaderCategory.QTY: re.compile(
        r"qty|quantity|jumlah|stok|stock", re.IGNORECASE
    ),
}


def classify_header(header: str) -> list[HeaderCategory]:
    """
    Classify a header into every category whose pattern it contains.

    Args:
        header: Column header text

    Returns:
        Matched categories in declaration order (possibly empty)

    Examples:
        >>> classify_header("Dealer Price")
        [<HeaderCategory.COST: 'cost'>, <HeaderCategory.PRICE: 'price'>]

        >>> classify_header("Keterangan")
        []
    """
    return [
        category
        for category, pattern in CATEGORY_PATTERNS.items()
        if pattern.search(header)
    ]


def positional_overlap(a: str, b: str) -> float:
    """
    Share of positions holding the same lowercase character.

    Counts equal characters at equal indexes over the shorter string and
    divides by the longer length. Not an edit distance: a single inserted
    character shifts everything after it.

    Examples:
        >>> positional_overlap("Katalog", "Katal0g")
        0.8571428571428571

        >>> positional_overlap("abc", "xabc")
        0.0
    """
    a_lower = a.lower()
    b_lower = b.lower()
    longest = max(len(a_lower), len(b_lower))
    if longest == 0:
        return 1.0

    matches = sum(1 for left, right in zip(a_lower, b_lower) if left == right)
    return matches / longest


def _is_cost_srp_conflict(
    a_categories: list[HeaderCategory], b_categories: list[HeaderCategory]
) -> bool:
    a_cost = HeaderCategory.COST in a_categories
    a_srp = HeaderCategory.SRP in a_categories
    b_cost = HeaderCategory.COST in b_categories
    b_srp = HeaderCategory.SRP in b_categories
    return (a_cost and b_srp) or (a_srp and b_cost)


def similarity_score(a: str, b: str) -> float:
    """
    Compute header similarity in [0, 1].

    Args:
        a: First header
        b: Second header

    Returns:
        Similarity score; >= SAME_COLUMN_THRESHOLD means same column

    Examples:
        >>> similarity_score("Cost Price", "Dealer Price")
        0.9

        >>> similarity_score("Cost Price", "SRP Price")
        0.2

        >>> similarity_score("HARGA", "harga")
        1.0
    """
    if a.lower() == b.lower():
        return EXACT_MATCH_SCORE

    a_categories = classify_header(a)
    b_categories = classify_header(b)

    if _is_cost_srp_conflict(a_categories, b_categories):
        return COST_SRP_CONFLICT_SCORE

    if any(category in b_categories for category in a_categories):
        return SHARED_CATEGORY_SCORE

    return positional_overlap(a, b)


def is_same_column(a: str, b: str, threshold: float = SAME_COLUMN_THRESHOLD) -> bool:
    """Whether two headers score at or above the merge threshold."""
    return similarity_score(a, b) >= threshold
