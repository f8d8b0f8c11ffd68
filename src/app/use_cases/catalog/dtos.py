"""Data Transfer Objects for Catalog Use Cases

Customers and items that invoices reference.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field


class CreateCustomerCommandDTO(BaseModel):
    """Command DTO for creating a customer"""

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Customer display name"
    )

    address: Optional[str] = Field(
        default=None,
        max_length=500,
        description="Street address"
    )

    city: Optional[str] = Field(
        default=None,
        max_length=120,
        description="City"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Sharma Traders",
                "address": "12 MG Road",
                "city": "Pune"
            }
        }


class CustomerResponseDTO(BaseModel):
    """Stored customer"""

    customer_id: int = Field(..., description="Customer ID")
    name: str = Field(..., description="Customer display name")
    address: Optional[str] = Field(None, description="Street address")
    city: Optional[str] = Field(None, description="City")
    created_at: datetime = Field(..., description="Creation timestamp")


class ListCustomersResponseDTO(BaseModel):
    customers: List[CustomerResponseDTO] = Field(..., description="All customers")


class CreateItemCommandDTO(BaseModel):
    """
    Command DTO for creating a catalog item

    code is the barcode typed into invoice rows; it must be unique
    ignoring case when given.
    """

    code: Optional[str] = Field(
        default=None,
        max_length=64,
        description="Barcode / short code"
    )

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Item name"
    )

    brand: Optional[str] = Field(default=None, max_length=120, description="Brand")

    category: Optional[str] = Field(default=None, max_length=120, description="Category")

    price: Decimal = Field(
        ...,
        ge=0,
        description="Unit price (must be >= 0)"
    )

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


class ItemResponseDTO(BaseModel):
    """Stored catalog item"""

    item_id: int = Field(..., description="Item ID")
    code: Optional[str] = Field(None, description="Barcode / short code")
    name: str = Field(..., description="Item name")
    brand: Optional[str] = Field(None, description="Brand")
    category: Optional[str] = Field(None, description="Category")
    price: Decimal = Field(..., description="Current unit price")
    created_at: datetime = Field(..., description="Creation timestamp")


class ListItemsResponseDTO(BaseModel):
    items: List[ItemResponseDTO] = Field(..., description="All catalog items")
