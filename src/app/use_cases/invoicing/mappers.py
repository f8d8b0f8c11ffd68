"""Entity -> DTO conversion shared by the invoicing use cases."""

from typing import List
from src.domain.invoice import Invoice
from src.domain.invoice_line import InvoiceLine
from .dtos import InvoiceLineDTO, InvoiceResponseDTO, InvoiceSummaryDTO


def to_invoice_response(invoice: Invoice, lines: List[InvoiceLine]) -> InvoiceResponseDTO:
    discount_type = invoice.discount_type
    return InvoiceResponseDTO(
        invoice_id=invoice.id,
        invoice_number=invoice.invoice_number,
        customer_id=invoice.customer_id,
        lines=[
            InvoiceLineDTO(
                id=line.id,
                item_id=line.item_id,
                quantity=line.quantity,
                price=line.price,
                line_total=line.line_total,
            )
            for line in sorted(lines, key=lambda l: l.position)
        ],
        subtotal=invoice.subtotal,
        discount_type=discount_type.value if hasattr(discount_type, "value") else discount_type,
        discount_value=invoice.discount_value,
        discount_amount=invoice.discount_amount,
        taxable_amount=invoice.taxable_amount,
        tax_rate=invoice.tax_rate,
        tax_amount=invoice.tax_amount,
        rounding_adjustment=invoice.rounding_adjustment,
        total=invoice.total,
        created_at=invoice.created_at,
        updated_at=invoice.updated_at,
    )


def to_invoice_summary(invoice: Invoice) -> InvoiceSummaryDTO:
    return InvoiceSummaryDTO(
        invoice_id=invoice.id,
        invoice_number=invoice.invoice_number,
        customer_id=invoice.customer_id,
        total=invoice.total,
        created_at=invoice.created_at,
    )
