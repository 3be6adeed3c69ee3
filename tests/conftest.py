"""
Test Configuration and Fixtures
================================

Shared pytest fixtures for price-reconcile tests.
"""

import pytest

from price_reconcile.schemas.domain import FieldMapping, RawRow


@pytest.fixture
def sony_batch() -> list[RawRow]:
    """Two-row batch from a Sony dealer list, second row missing its name."""
    return [
        {"Desc": "Sony A7C", "Net": "24.845"},
        {"Desc": "", "Net": "91.199"},
    ]


@pytest.fixture
def sony_mapping() -> FieldMapping:
    """Mapping for the Sony batch with no fallbacks or retags."""
    return FieldMapping(name_field="Desc", cost_field="Net")


@pytest.fixture
def drifting_batch() -> list[RawRow]:
    """Three pages of the same list with different header names."""
    return [
        {"Product Name": "Nikon D850", "Cost Price": "Rp 24.000.000", "SRP Price": "Rp 27.000.000"},
        {"Item": "Canon R5", "Dealer Price": "35.000.000", "SRP Price": "39.999.000"},
        {"Product Name": "Fujifilm X-T5", "Modal": "22.500.000", "Retail": "25.999.000"},
    ]


@pytest.fixture
def layered_row() -> RawRow:
    """Row where primary and fallback columns hold different values."""
    return {
        "Desc": "Sony A7 IV",
        "Product Name": "ILCE-7M4",
        "Net": "30.000",
        "Dealer Price": "29.000",
        "SRP": "35.000",
        "Retail": "36.000",
    }


@pytest.fixture
def layered_mapping() -> FieldMapping:
    """Mapping with one fallback per target and a manual retag on row 0."""
    return FieldMapping(
        name_field="Desc",
        cost_field="Net",
        srp_field="SRP",
        brand_name="sony",
        name_fallback_fields=("Product Name",),
        cost_fallback_fields=("Dealer Price",),
        srp_fallback_fields=("Retail",),
        manual_retag_by_row={0: {"name": "Sony Alpha 7 IV Body", "cost_price": 28000}},
    )
