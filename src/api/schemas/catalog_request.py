"""Request schemas for Customer and Item API"""

from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field, field_validator


class CustomerRequestSchema(BaseModel):
    """Used for POST /customers endpoint."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Customer display name (required, non-empty)"
    )

    address: Optional[str] = Field(default=None, max_length=500, description="Street address")

    city: Optional[str] = Field(default=None, max_length=120, description="City")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError("Name must not be blank")
        return v.strip()


class ItemRequestSchema(BaseModel):
    """Used for POST /items endpoint."""

    code: Optional[str] = Field(
        default=None,
        max_length=64,
        description="Barcode / short code (unique, case-insensitive)"
    )

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Item name (required, non-empty)"
    )

    brand: Optional[str] = Field(default=None, max_length=120, description="Brand")

    category: Optional[str] = Field(default=None, max_length=120, description="Category")

    price: Decimal = Field(
        ...,
        ge=0,
        description="Unit price (must be >= 0)"
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError("Name must not be blank")
        return v.strip()

    class Config:
        json_schema_extra = {
            "example": {
                "code": "8901234567890",
                "name": "Notebook A5",
                "brand": "Classmate",
                "category": "Stationery",
                "price": "45.00"
            }
        }
