"""Line Item Value Object

One row of the ledger being edited. Immutable: edits produce a new LineItem.
"""

from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from src.domain.money import ZERO


class LineItem(BaseModel):
    """
    Line Item - Editable invoice row

    Domain Rules:
    - item_ref None means the row is blank / unresolved
    - A blank row contributes zero to every total
    - unit_price is copied from the catalog when the row is resolved
    - quantity must be a positive integer
    """

    model_config = ConfigDict(frozen=True)

    item_ref: Optional[int] = Field(
        default=None,
        description="Catalog item identifier (None = blank row)"
    )

    code: str = Field(
        default="",
        description="Code text as typed into the row"
    )

    quantity: int = Field(
        default=1,
        gt=0,
        description="Quantity (positive integer)"
    )

    unit_price: Decimal = Field(
        default=ZERO,
        ge=0,
        description="Unit price snapshotted from the catalog"
    )

    @property
    def is_blank(self) -> bool:
        return self.item_ref is None

    @property
    def is_billable(self) -> bool:
        """Resolved row with a positive price; only these are persisted"""
        return not self.is_blank and self.unit_price > 0

    @property
    def line_total(self) -> Decimal:
        if self.is_blank:
            return ZERO
        return self.unit_price * self.quantity
