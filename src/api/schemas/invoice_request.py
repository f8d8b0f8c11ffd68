"""Request schemas for Invoice API

Pydantic models for validating incoming HTTP requests.
"""

from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator
from src.domain.pricing import DiscountType


class InvoiceLineRequestSchema(BaseModel):
    """One invoice row as entered"""

    item_id: int = Field(
        ...,
        gt=0,
        description="Catalog item identifier"
    )

    quantity: int = Field(
        default=1,
        gt=0,
        description="Quantity (must be > 0)"
    )

    price: Decimal = Field(
        ...,
        ge=0,
        description="Unit price snapshot taken when the row was resolved"
    )


class InvoiceRequestSchema(BaseModel):
    """
    Request schema for creating or replacing an invoice

    Used for POST /invoices and PUT /invoices/{invoice_id}.
    """

    customer_id: Optional[int] = Field(
        default=None,
        description="Customer identifier (required to save)"
    )

    lines: List[InvoiceLineRequestSchema] = Field(
        default_factory=list,
        description="Invoice rows; rows with price 0 are dropped"
    )

    discount_type: DiscountType = Field(
        default=DiscountType.PERCENT,
        description="percent or flat"
    )

    discount_value: Decimal = Field(
        default=Decimal("0"),
        description="Percentage or flat currency amount"
    )

    net_override: Optional[Decimal] = Field(
        default=None,
        description="Final total typed by the operator; omit to use the computed total"
    )

    @field_validator("discount_value", "net_override")
    @classmethod
    def validate_finite(cls, v):
        """Reject NaN and infinity"""
        if v is not None and not v.is_finite():
            raise ValueError("Amount must be a finite number")
        return v

    class Config:
        json_schema_extra = {
            "example": {
                "customer_id": 1,
                "lines": [
                    {"item_id": 3, "quantity": 2, "price": "500.00"},
                    {"item_id": 5, "quantity": 1, "price": "45.00"}
                ],
                "discount_type": "percent",
                "discount_value": "10",
                "net_override": "1030"
            }
        }
