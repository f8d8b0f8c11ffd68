"""Invoice Domain Entity

Persisted sales invoice. The pricing snapshot is stored verbatim so later
changes to the configured tax rate never alter historical invoices.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import ForeignKey, Numeric, String
from src.domain.base import BaseModel, ID_TYPE, id_column
from src.domain.pricing import DiscountType, PricingSnapshot


class Invoice(BaseModel, table=True):
    """
    Invoice - Sales invoice for one customer

    Domain Rules:
    - invoice_number is unique and never changes after creation
    - created_at is set once
    - total is the final (possibly overridden) amount
    - rounding_adjustment == total - (taxable_amount + tax_amount)
    - Updates replace customer, lines and pricing in full
    - Deletion is a hard delete
    """

    __tablename__ = "invoices"
    __table_args__ = (
        Index('ix_invoices_customer_id', 'customer_id'),
        Index('ix_invoices_created_at', 'created_at'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=id_column(),
        description="Unique invoice identifier (auto-increment)"
    )

    invoice_number: str = Field(
        sa_column=Column(String(50), nullable=False, unique=True),
        description="Unique invoice number (e.g., INV-2425-0007)"
    )

    customer_id: int = Field(
        sa_column=Column(ID_TYPE, ForeignKey("customers.id"), nullable=False),
        description="Foreign key to Customer"
    )

    subtotal: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Sum of line totals"
    )

    discount_type: DiscountType = Field(
        description="Discount interpretation (percent, flat)"
    )

    discount_value: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Discount as entered (percentage or currency amount)"
    )

    discount_amount: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Discount in currency"
    )

    taxable_amount: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="subtotal - discount_amount"
    )

    tax_rate: Decimal = Field(
        sa_column=Column(Numeric(8, 6), nullable=False),
        description="Tax rate in effect when the invoice was priced"
    )

    tax_amount: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="taxable_amount * tax_rate"
    )

    rounding_adjustment: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False, default=0),
        description="total - computed total (non-zero only with a net override)"
    )

    total: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Final invoice amount"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Invoice creation timestamp (immutable)"
    )

    updated_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Last update timestamp"
    )

    @property
    def computed_total(self) -> Decimal:
        return self.taxable_amount + self.tax_amount

    def has_consistent_rounding(self) -> bool:
        return self.rounding_adjustment == self.total - self.computed_total

    def apply_pricing(self, snapshot: PricingSnapshot) -> None:
        """Copy a (storage-quantized) snapshot onto the record"""
        self.subtotal = snapshot.subtotal
        self.discount_type = snapshot.discount_type
        self.discount_value = snapshot.discount_value
        self.discount_amount = snapshot.discount_amount
        self.taxable_amount = snapshot.taxable_amount
        self.tax_rate = snapshot.tax_rate
        self.tax_amount = snapshot.tax_amount
        self.rounding_adjustment = snapshot.rounding_adjustment
        self.total = snapshot.total
