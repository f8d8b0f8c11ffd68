"""Data Transfer Objects for Invoicing Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field
from src.domain.pricing import DiscountType


class InvoiceLineInputDTO(BaseModel):
    """
    One line of a create/update command

    price is the snapshot taken when the line was resolved; it is stored
    as given, not re-read from the catalog.
    """

    item_id: int = Field(
        ...,
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
        description="Unit price snapshot"
    )


class CreateInvoiceCommandDTO(BaseModel):
    """
    Command DTO for creating an invoice

    Used as input to CreateInvoice use case.
    """

    customer_id: Optional[int] = Field(
        default=None,
        description="Customer identifier (required to save)"
    )

    lines: List[InvoiceLineInputDTO] = Field(
        default_factory=list,
        description="Invoice lines; zero-priced lines are dropped"
    )

    discount_type: DiscountType = Field(
        default=DiscountType.PERCENT,
        description="Discount interpretation (percent, flat)"
    )

    discount_value: Decimal = Field(
        default=Decimal("0"),
        description="Percentage (not clamped) or flat amount"
    )

    net_override: Optional[Decimal] = Field(
        default=None,
        description="Operator-entered final total; None = use computed total"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "customer_id": 1,
                "lines": [{"item_id": 3, "quantity": 2, "price": "500.00"}],
                "discount_type": "percent",
                "discount_value": "20",
                "net_override": None
            }
        }


class UpdateInvoiceCommandDTO(CreateInvoiceCommandDTO):
    """
    Command DTO for replacing an invoice's customer, lines and pricing

    invoice_number and created_at are never changed.
    """

    invoice_id: int = Field(
        ...,
        description="Invoice to replace"
    )


class InvoiceLineDTO(BaseModel):
    """Stored invoice line"""

    id: int = Field(..., description="Line ID")
    item_id: int = Field(..., description="Catalog item identifier")
    quantity: int = Field(..., description="Quantity")
    price: Decimal = Field(..., description="Unit price snapshot")
    line_total: Decimal = Field(..., description="quantity * price")


class InvoiceResponseDTO(BaseModel):
    """
    Response DTO for invoice operations

    Returned by CreateInvoice, UpdateInvoice and GetInvoice. Pricing fields
    are the stored snapshot, not a recomputation.
    """

    invoice_id: int = Field(..., description="Invoice ID")
    invoice_number: str = Field(..., description="Unique invoice number")
    customer_id: int = Field(..., description="Customer identifier")
    lines: List[InvoiceLineDTO] = Field(..., description="Stored lines in order")
    subtotal: Decimal = Field(..., description="Sum of line totals")
    discount_type: str = Field(..., description="percent or flat")
    discount_value: Decimal = Field(..., description="Discount as entered")
    discount_amount: Decimal = Field(..., description="Discount in currency")
    taxable_amount: Decimal = Field(..., description="subtotal - discount_amount")
    tax_rate: Decimal = Field(..., description="Tax rate applied")
    tax_amount: Decimal = Field(..., description="taxable_amount * tax_rate")
    rounding_adjustment: Decimal = Field(..., description="total - computed total")
    total: Decimal = Field(..., description="Final invoice amount")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")

    class Config:
        json_schema_extra = {
            "example": {
                "invoice_id": 7,
                "invoice_number": "INV-2425-0007",
                "customer_id": 1,
                "lines": [
                    {"id": 11, "item_id": 3, "quantity": 2, "price": "500.000000", "line_total": "1000.000000"}
                ],
                "subtotal": "1000.000000",
                "discount_type": "percent",
                "discount_value": "20.000000",
                "discount_amount": "200.000000",
                "taxable_amount": "800.000000",
                "tax_rate": "0.180000",
                "tax_amount": "144.000000",
                "rounding_adjustment": "0.000000",
                "total": "944.000000",
                "created_at": "2024-11-05T10:00:00Z",
                "updated_at": "2024-11-05T10:00:00Z"
            }
        }


class InvoiceSummaryDTO(BaseModel):
    """Invoice row in a listing"""

    invoice_id: int = Field(..., description="Invoice ID")
    invoice_number: str = Field(..., description="Unique invoice number")
    customer_id: int = Field(..., description="Customer identifier")
    total: Decimal = Field(..., description="Final invoice amount")
    created_at: datetime = Field(..., description="Creation timestamp")


class ListInvoicesResponseDTO(BaseModel):
    """
    Response DTO for invoice listing

    Returned by ListInvoices use case.
    """

    invoices: List[InvoiceSummaryDTO] = Field(..., description="Page of invoices")
    total: int = Field(..., description="Total matching invoices")
    limit: int = Field(..., description="Page size")
    offset: int = Field(..., description="Page offset")


class NextInvoiceNumberResponseDTO(BaseModel):
    """Preview of the next invoice number (display only)"""

    next_number: str = Field(..., description="Next invoice number")

    class Config:
        json_schema_extra = {"example": {"next_number": "INV-2425-0008"}}


class DeleteInvoiceResponseDTO(BaseModel):
    """Response DTO for invoice deletion"""

    invoice_id: int = Field(..., description="Deleted invoice ID")
    invoice_number: str = Field(..., description="Deleted invoice number")


class InvoicePdfResponseDTO(BaseModel):
    """
    Response DTO for printable invoice generation

    Returned by RenderInvoicePdf use case.
    """

    invoice_id: int = Field(..., description="Invoice ID")
    invoice_number: str = Field(..., description="Invoice number")
    pdf_base64: str = Field(..., description="PDF document, base64-encoded")
    generated_at: datetime = Field(..., description="Generation timestamp")
