"""
Domain Models
=============

Internal domain models for the reconciliation pipeline.

A batch is an ordered list of RawRow mappings straight from the extractor.
Everything derived from it (header groups, resolved rows, import records)
is a new immutable value; input rows are never modified.

JSON field names follow the upload client's camelCase convention
(``nameField``, ``costPrice``...). Python code may use either the
attribute names or the aliases.
"""

from enum import Enum
from typing import Annotated, Any, TypeAlias

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# A single extracted cell: text or number. None shows up when the
# extractor emits JSON null and is treated like a missing key.
CellValue: TypeAlias = str | int | float | None

# One extracted table row keyed by whatever header text the extractor saw.
RawRow: TypeAlias = dict[str, CellValue]


_MODEL_CONFIG = ConfigDict(
    frozen=True,
    populate_by_name=True,
    alias_generator=to_camel,
)


class FieldTarget(str, Enum):
    """Product fields resolved from a raw row."""

    NAME = "name"
    COST = "cost"
    SRP = "srp"


class UnresolvedReason(str, Enum):
    """Why a row cannot be imported yet."""

    MISSING_NAME_AND_COST = "Missing Product Name and Cost Price"
    MISSING_NAME = "Missing Product Name"
    MISSING_COST = "Missing Cost Price"


# =============================================================================
# Header Groups
# =============================================================================


class HeaderGroup(BaseModel):
    """
    Header keys judged to denote the same column.

    Attributes:
        canonical: Key the whole group is rewritten onto (first key seen)
        variants: All member keys in assignment order, canonical first
    """

    model_config = _MODEL_CONFIG

    canonical: Annotated[str, Field(description="Canonical header key")]
    variants: Annotated[
        tuple[str, ...],
        Field(description="Member header keys, canonical first"),
    ]

    @property
    def is_merged(self) -> bool:
        """Whether the group absorbed at least one other header."""
        return len(self.variants) > 1


# =============================================================================
# Field Mapping
# =============================================================================


class ManualRetag(BaseModel):
    """
    Human correction for a single row.

    A set name (non-empty) or price (> 0) outranks every mapped column.
    """

    model_config = _MODEL_CONFIG

    name: Annotated[str | None, Field(default=None, description="Replacement name")] = None
    cost_price: Annotated[
        int | None, Field(default=None, description="Replacement cost price")
    ] = None
    srp_price: Annotated[
        int | None, Field(default=None, description="Replacement SRP price")
    ] = None


class FieldMapping(BaseModel):
    """
    User-declared mapping from extracted headers to product fields.

    Attributes:
        name_field: Primary header for the product name
        cost_field: Primary header for the cost price
        srp_field: Primary header for the SRP price (optional)
        brand_name: Brand applied to every row of the batch
        name_fallback_fields: Headers tried in order when the name is empty
        cost_fallback_fields: Headers tried in order when the cost is 0
        srp_fallback_fields: Headers tried in order when the SRP is 0
        manual_retag_by_row: Per-row overrides keyed by zero-based row index
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        json_schema_extra={
            "example": {
                "nameField": "Desc",
                "costField": "Net",
                "srpField": "SRP",
                "brandName": "Sony",
                "nameFallbackFields": ["Product Name"],
                "costFallbackFields": ["Dealer Price"],
                "srpFallbackFields": [],
                "manualRetagByRow": {"1": {"name": "Unknown Item"}},
            }
        },
    )

    name_field: Annotated[str, Field(default="", description="Primary name header")] = ""
    cost_field: Annotated[str, Field(default="", description="Primary cost header")] = ""
    srp_field: Annotated[
        str | None, Field(default=None, description="Primary SRP header")
    ] = None
    brand_name: Annotated[str, Field(default="", description="Brand for the batch")] = ""
    name_fallback_fields: tuple[str, ...] = ()
    cost_fallback_fields: tuple[str, ...] = ()
    srp_fallback_fields: tuple[str, ...] = ()
    manual_retag_by_row: Annotated[
        dict[int, ManualRetag],
        Field(default_factory=dict, description="Overrides keyed by row index"),
    ]

    def primary_field(self, target: FieldTarget) -> str | None:
        """Primary header configured for a target."""
        if target is FieldTarget.NAME:
            return self.name_field
        if target is FieldTarget.COST:
            return self.cost_field
        return self.srp_field

    def fallback_fields(self, target: FieldTarget) -> tuple[str, ...]:
        """Fallback headers configured for a target, in priority order."""
        if target is FieldTarget.NAME:
            return self.name_fallback_fields
        if target is FieldTarget.COST:
            return self.cost_fallback_fields
        return self.srp_fallback_fields

    def candidate_fields(self, target: FieldTarget) -> list[str]:
        """Primary then fallback headers, skipping blanks."""
        keys = [self.primary_field(target), *self.fallback_fields(target)]
        return [key for key in keys if key]

    def manual_retag(self, row_index: int) -> ManualRetag | None:
        """Override for a row, if one was entered."""
        return self.manual_retag_by_row.get(row_index)

    @property
    def is_submittable(self) -> bool:
        """Whether name and cost columns are mapped and a brand is set."""
        return bool(self.name_field and self.cost_field and self.brand_name.strip())


# =============================================================================
# Resolution Results
# =============================================================================


class ResolvedRow(BaseModel):
    """
    Resolution outcome for one raw row.

    Attributes:
        index: Zero-based position in the batch
        row: The raw row as extracted
        name: Resolved product name ("" when none found)
        cost_price: Resolved cost (0 when none found)
        srp_price: Resolved SRP (0 when none found or not mapped)
        has_name: Name is non-empty
        has_cost: Cost is greater than zero
        is_resolved: has_name and has_cost
        reason: Why the row is unresolved, None when resolved
        populated_columns: Headers holding a usable value on the raw row
    """

    model_config = _MODEL_CONFIG

    index: Annotated[int, Field(ge=0, description="Row index in the batch")]
    row: RawRow
    name: str
    cost_price: Annotated[int, Field(ge=0)]
    srp_price: Annotated[int, Field(ge=0)]
    has_name: bool
    has_cost: bool
    is_resolved: bool
    reason: UnresolvedReason | None = None
    populated_columns: list[str] = Field(default_factory=list)


class ReadinessReport(BaseModel):
    """
    Batch-level import readiness.

    Invariant: ready + len(unresolved) == total.
    """

    model_config = _MODEL_CONFIG

    total: Annotated[int, Field(ge=0, description="Rows in the batch")]
    ready: Annotated[int, Field(ge=0, description="Rows ready for import")]
    rows: list[ResolvedRow] = Field(default_factory=list)
    unresolved: list[ResolvedRow] = Field(default_factory=list)

    @property
    def unresolved_count(self) -> int:
        """Number of rows still needing attention."""
        return len(self.unresolved)

    def unresolved_indices(self) -> list[int]:
        """Row indices still needing attention, in batch order."""
        return [resolved.index for resolved in self.unresolved]


class ImportRecord(BaseModel):
    """
    Product record handed to the product store.

    Attributes:
        name: Resolved product name
        brand: Formatted brand applied to the whole batch
        cost_price: Resolved cost price (> 0)
        srp_price: Resolved SRP price (0 when unknown)
        raw_json: Original extracted row, kept for audit
        search_keywords: Prefix keywords over name and brand
    """

    model_config = _MODEL_CONFIG

    name: Annotated[str, Field(min_length=1)]
    brand: str
    cost_price: Annotated[int, Field(gt=0)]
    srp_price: Annotated[int, Field(ge=0)] = 0
    raw_json: dict[str, Any] = Field(default_factory=dict)
    search_keywords: list[str] = Field(default_factory=list)
