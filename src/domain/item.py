"""Catalog Item Domain Entity

Sellable item. Its price is copied onto an invoice line when the line is
resolved; later price changes never touch existing invoices.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import CheckConstraint, Numeric, String
from src.domain.base import BaseModel, id_column


class Item(BaseModel, table=True):
    """
    Item - Catalog entry that invoice lines point at

    Domain Rules:
    - price must be non-negative
    - code (barcode) lookups are case-insensitive
    """

    __tablename__ = "items"
    __table_args__ = (
        CheckConstraint('price >= 0', name='item_price_non_negative'),
        Index('ix_items_code', 'code'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=id_column(),
        description="Unique item identifier (auto-increment)"
    )

    code: Optional[str] = Field(
        default=None,
        sa_column=Column(String(64), nullable=True),
        description="Barcode / short code typed into invoice rows"
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Item name"
    )

    brand: Optional[str] = Field(
        default=None,
        sa_column=Column(String(120), nullable=True),
        description="Brand"
    )

    category: Optional[str] = Field(
        default=None,
        sa_column=Column(String(120), nullable=True),
        description="Category"
    )

    price: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Current unit price (precision: 18,6)"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Item creation timestamp"
    )
