"""Invoice Line Domain Entity

Persisted line of an invoice. Only resolved lines with a positive price are
ever stored.
"""

from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import ForeignKey, Integer, Numeric
from src.domain.base import BaseModel, ID_TYPE, id_column
from src.domain.line_item import LineItem


class InvoiceLine(BaseModel, table=True):
    """
    Invoice Line - Stored line item

    Domain Rules:
    - Each line belongs to exactly one invoice
    - line_total = quantity * price
    - price is the snapshot taken when the line was resolved
    - position keeps the ledger order
    """

    __tablename__ = "invoice_lines"
    __table_args__ = (
        Index('ix_invoice_lines_invoice_id', 'invoice_id'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=id_column(),
        description="Unique invoice line identifier (auto-increment)"
    )

    invoice_id: int = Field(
        sa_column=Column(ID_TYPE, ForeignKey("invoices.id", ondelete="CASCADE"), nullable=False),
        description="Foreign key to Invoice"
    )

    position: int = Field(
        sa_column=Column(Integer, nullable=False),
        description="0-based order within the invoice"
    )

    item_id: int = Field(
        sa_column=Column(ID_TYPE, ForeignKey("items.id"), nullable=False),
        description="Foreign key to Item"
    )

    quantity: int = Field(
        sa_column=Column(Integer, nullable=False),
        description="Quantity (positive integer)"
    )

    price: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Unit price snapshot (precision: 18,6)"
    )

    line_total: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="quantity * price"
    )

    @classmethod
    def from_line_item(cls, invoice_id: int, position: int, line: LineItem) -> "InvoiceLine":
        return cls(
            invoice_id=invoice_id,
            position=position,
            item_id=line.item_ref,
            quantity=line.quantity,
            price=line.unit_price,
            line_total=line.line_total,
        )

    def to_line_item(self, code: str = "") -> LineItem:
        return LineItem(
            item_ref=self.item_id,
            code=code,
            quantity=self.quantity,
            unit_price=self.price,
        )
