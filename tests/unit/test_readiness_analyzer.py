"""
Unit tests for readiness_analyzer module.

Tests row classification and the batch readiness report.
"""

from price_reconcile.schemas.domain import FieldMapping, RawRow, UnresolvedReason
from price_reconcile.services.mapping_service import update_manual_retag
from price_reconcile.services.readiness_analyzer import (
    analyze_readiness,
    analyze_row,
    populated_columns,
    unresolved_reason,
)


class TestUnresolvedReason:
    """Tests for unresolved_reason function."""

    def test_reasons(self) -> None:
        """Each missing combination has its own reason."""
        assert unresolved_reason("", 0) is UnresolvedReason.MISSING_NAME_AND_COST
        assert unresolved_reason("", 100) is UnresolvedReason.MISSING_NAME
        assert unresolved_reason("Sony", 0) is UnresolvedReason.MISSING_COST

    def test_ready(self) -> None:
        """Ready rows have no reason."""
        assert unresolved_reason("Sony", 100) is None

    def test_reason_text(self) -> None:
        """Reason values are reviewer-facing labels."""
        assert UnresolvedReason.MISSING_NAME_AND_COST.value == "Missing Product Name and Cost Price"
        assert UnresolvedReason.MISSING_NAME.value == "Missing Product Name"
        assert UnresolvedReason.MISSING_COST.value == "Missing Cost Price"


class TestPopulatedColumns:
    """Tests for populated_columns function."""

    def test_usable_cells_only(self) -> None:
        """Empty and placeholder cells are skipped; zero is usable text."""
        row = {"Desc": "Sony", "Net": "", "Code": "-", "Qty": 0, "Note": None}
        assert populated_columns(row) == ["Desc", "Qty"]


class TestAnalyzeRow:
    """Tests for analyze_row function."""

    def test_resolved_row(self, sony_batch: list[RawRow], sony_mapping: FieldMapping) -> None:
        """Name and cost present."""
        resolved = analyze_row(sony_batch[0], 0, sony_mapping)

        assert resolved.index == 0
        assert resolved.name == "Sony A7C"
        assert resolved.cost_price == 24845
        assert resolved.srp_price == 0
        assert resolved.has_name and resolved.has_cost and resolved.is_resolved
        assert resolved.reason is None
        assert resolved.row == sony_batch[0]

    def test_missing_both(self, sony_mapping: FieldMapping) -> None:
        """Neither name nor cost."""
        resolved = analyze_row({"Desc": "", "Net": "n/a"}, 4, sony_mapping)

        assert resolved.is_resolved is False
        assert resolved.reason is UnresolvedReason.MISSING_NAME_AND_COST
        assert resolved.populated_columns == []

    def test_missing_cost(self, sony_mapping: FieldMapping) -> None:
        """Name without a cost."""
        resolved = analyze_row({"Desc": "Sony FX3", "Net": "0"}, 0, sony_mapping)

        assert resolved.has_name is True
        assert resolved.has_cost is False
        assert resolved.reason is UnresolvedReason.MISSING_COST


class TestAnalyzeReadiness:
    """Tests for analyze_readiness function."""

    def test_sony_batch(self, sony_batch: list[RawRow], sony_mapping: FieldMapping) -> None:
        """The nameless row is reported with its reason."""
        report = analyze_readiness(sony_batch, sony_mapping)

        assert report.total == 2
        assert report.ready == 1
        assert report.unresolved_indices() == [1]
        assert report.unresolved[0].reason is UnresolvedReason.MISSING_NAME
        assert report.unresolved[0].cost_price == 91199

    def test_manual_retag_resolves_row(
        self, sony_batch: list[RawRow], sony_mapping: FieldMapping
    ) -> None:
        """Retagging the nameless row makes the whole batch ready."""
        mapping = update_manual_retag(sony_mapping, 1, name="Unknown Item")
        report = analyze_readiness(sony_batch, mapping)

        assert report.ready == 2
        assert report.unresolved == []
        assert report.rows[1].name == "Unknown Item"

    def test_counts_add_up(self, drifting_batch: list[RawRow]) -> None:
        """ready + unresolved == total on an unharmonized batch."""
        mapping = FieldMapping(name_field="Product Name", cost_field="Cost Price")
        report = analyze_readiness(drifting_batch, mapping)

        assert report.total == 3
        assert report.ready + report.unresolved_count == report.total
        assert report.unresolved_indices() == [1, 2]

    def test_srp_reported(self, layered_row: RawRow, layered_mapping: FieldMapping) -> None:
        """SRP is resolved alongside name and cost."""
        report = analyze_readiness([layered_row], layered_mapping)
        assert report.rows[0].srp_price == 35000

    def test_empty_batch(self, sony_mapping: FieldMapping) -> None:
        """No rows, nothing ready."""
        report = analyze_readiness([], sony_mapping)
        assert (report.total, report.ready, report.unresolved_count) == (0, 0, 0)

    def test_deterministic(self, sony_batch: list[RawRow], sony_mapping: FieldMapping) -> None:
        """Same inputs give equal reports."""
        assert analyze_readiness(sony_batch, sony_mapping) == analyze_readiness(
            sony_batch, sony_mapping
        )


class TestMalformedCells:
    """Malformed cells never fail the batch."""

    def test_oversized_cost_cell(self, sony_mapping: FieldMapping) -> None:
        """An unparseable cost leaves the row unresolved instead of raising."""
        report = analyze_readiness(
            [{"Desc": "X", "Net": "1" * 5000}, {"Desc": "Sony A7C", "Net": "24.845"}],
            sony_mapping,
        )

        assert report.ready == 1
        assert report.unresolved[0].reason is UnresolvedReason.MISSING_COST
