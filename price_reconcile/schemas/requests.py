"""
Pydantic Request Models
=======================

API request schemas for the reconciliation endpoints.
All incoming data validated via these models.
"""

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from price_reconcile.schemas.domain import FieldMapping, RawRow
from price_reconcile.services.extraction_payload import coerce_row


class BatchRequest(BaseModel):
    """
    Request body carrying one extraction batch.

    Used by POST /reconcile/harmonize and POST /reconcile/guess-mapping.

    Attributes:
        rows: Extracted rows in document order
    """

    model_config = ConfigDict(
        populate_by_name=True,
        alias_generator=to_camel,
        json_schema_extra={
            "example": {
                "rows": [
                    {"Desc": "Sony A7C", "Net": "24.845"},
                    {"Product Name": "Sony A1 II", "Dealer Price": "91.199"},
                ]
            }
        },
    )

    rows: Annotated[
        list[RawRow],
        Field(default_factory=list, description="Extracted rows in document order"),
    ]

    @field_validator("rows", mode="before")
    @classmethod
    def coerce_cells(cls, value: Any) -> Any:
        """Bring client cells onto the same scalar domain as decoded extractor rows."""
        if not isinstance(value, list):
            return value
        return [coerce_row(item) if isinstance(item, dict) else item for item in value]


class ReconcileRequest(BatchRequest):
    """
    Request body for POST /reconcile/analyze and POST /reconcile/import-records.

    When ``harmonize`` is true the rows are rewritten onto canonical headers
    before resolution, so mapped fields must name canonical headers. Row
    order (and so manual retag indices) is unaffected.

    Attributes:
        rows: Extracted rows in document order
        mapping: Field mapping with fallbacks and manual retags
        harmonize: Override the service default for header harmonization
    """

    mapping: Annotated[
        FieldMapping,
        Field(default_factory=FieldMapping, description="Field mapping"),
    ]
    harmonize: Annotated[
        bool | None,
        Field(default=None, description="Harmonize headers first (service default if unset)"),
    ] = None
