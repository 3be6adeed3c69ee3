"""
Unit tests for column_harmonizer module.

Tests header grouping and row rewriting across a batch.
"""

import copy

from price_reconcile.schemas.domain import RawRow
from price_reconcile.services.column_harmonizer import (
    collect_header_keys,
    group_headers,
    harmonize_batch,
    harmonize_rows,
    rewrite_row,
)


class TestCollectHeaderKeys:
    """Tests for collect_header_keys function."""

    def test_first_seen_order(self, drifting_batch: list[RawRow]) -> None:
        """Keys are listed once, in the order first encountered."""
        assert collect_header_keys(drifting_batch) == [
            "Product Name",
            "Cost Price",
            "SRP Price",
            "Item",
            "Dealer Price",
            "Modal",
            "Retail",
        ]

    def test_empty_batch(self) -> None:
        """No rows, no keys."""
        assert collect_header_keys([]) == []


class TestGroupHeaders:
    """Tests for group_headers function."""

    def test_drifting_headers(self, drifting_batch: list[RawRow]) -> None:
        """Synonyms merge onto the first key seen; cost and SRP stay apart."""
        groups = group_headers(collect_header_keys(drifting_batch))

        assert [(g.canonical, g.variants) for g in groups] == [
            ("Product Name", ("Product Name", "Item")),
            ("Cost Price", ("Cost Price", "Dealer Price", "Modal")),
            ("SRP Price", ("SRP Price", "Retail")),
        ]

    def test_partition(self, drifting_batch: list[RawRow]) -> None:
        """Every key lands in exactly one group."""
        keys = collect_header_keys(drifting_batch)
        groups = group_headers(keys)

        members = [variant for group in groups for variant in group.variants]
        assert sorted(members) == sorted(keys)
        assert len(members) == len(set(members))

    def test_canonical_follows_input_order(self) -> None:
        """Whichever synonym comes first becomes canonical."""
        groups = group_headers(["Dealer Price", "Cost Price"])
        assert groups[0].canonical == "Dealer Price"
        assert groups[0].variants == ("Dealer Price", "Cost Price")

    def test_grouping_is_not_transitive(self) -> None:
        """Members are compared with the canonical key only."""
        groups = group_headers(["Net Price", "Dealer", "Harga"])

        assert len(groups) == 1
        assert groups[0].variants == ("Net Price", "Dealer", "Harga")

    def test_custom_threshold(self) -> None:
        """A stricter threshold keeps synonyms apart."""
        groups = group_headers(["Cost Price", "Dealer Price"], threshold=0.95)
        assert [g.canonical for g in groups] == ["Cost Price", "Dealer Price"]
        assert not any(g.is_merged for g in groups)


class TestRewriteRow:
    """Tests for rewrite_row function."""

    def test_canonical_variant_wins(self) -> None:
        """When several variants are present the earliest one supplies the value."""
        groups = group_headers(["Cost Price", "Dealer Price", "Modal"])

        assert rewrite_row({"Cost Price": "100", "Dealer Price": "90"}, groups) == {
            "Cost Price": "100"
        }
        assert rewrite_row({"Modal": "80", "Dealer Price": "90"}, groups) == {
            "Cost Price": "90"
        }

    def test_absent_groups_are_omitted(self) -> None:
        """No variant on the row, no key in the output."""
        groups = group_headers(["Product Name", "Cost Price", "Item"])
        assert rewrite_row({"Item": "X"}, groups) == {"Product Name": "X"}


class TestHarmonizeBatch:
    """Tests for harmonize_batch and harmonize_rows."""

    def test_drifting_batch(self, drifting_batch: list[RawRow]) -> None:
        """All rows end up on the same canonical columns."""
        rows = harmonize_rows(drifting_batch)

        assert rows == [
            {
                "Product Name": "Nikon D850",
                "Cost Price": "Rp 24.000.000",
                "SRP Price": "Rp 27.000.000",
            },
            {
                "Product Name": "Canon R5",
                "Cost Price": "35.000.000",
                "SRP Price": "39.999.000",
            },
            {
                "Product Name": "Fujifilm X-T5",
                "Cost Price": "22.500.000",
                "SRP Price": "25.999.000",
            },
        ]

    def test_returns_groups(self, drifting_batch: list[RawRow]) -> None:
        """The grouping used is returned alongside the rows."""
        rows, groups = harmonize_batch(drifting_batch)

        assert len(rows) == len(drifting_batch)
        assert [g.canonical for g in groups] == ["Product Name", "Cost Price", "SRP Price"]

    def test_keys_subset_of_canonicals(self, drifting_batch: list[RawRow]) -> None:
        """Output rows only use canonical keys."""
        rows, groups = harmonize_batch(drifting_batch)
        canonicals = {g.canonical for g in groups}

        for row in rows:
            assert set(row) <= canonicals

    def test_idempotent(self, drifting_batch: list[RawRow]) -> None:
        """Harmonizing twice equals harmonizing once."""
        once = harmonize_rows(drifting_batch)
        assert harmonize_rows(once) == once

    def test_does_not_mutate_input(self, drifting_batch: list[RawRow]) -> None:
        """Input rows are left untouched."""
        before = copy.deepcopy(drifting_batch)
        harmonize_rows(drifting_batch)
        assert drifting_batch == before

    def test_empty_batch(self) -> None:
        """Empty in, empty out."""
        assert harmonize_batch([]) == ([], [])

    def test_rows_without_headers(self) -> None:
        """Rows with no keys come back as empty copies."""
        rows, groups = harmonize_batch([{}, {}])
        assert rows == [{}, {}]
        assert groups == []

    def test_single_consistent_batch_unchanged(self, sony_batch: list[RawRow]) -> None:
        """Distinct unrelated headers are left alone."""
        assert harmonize_rows(sony_batch) == sony_batch
