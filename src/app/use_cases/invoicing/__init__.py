"""Invoicing use cases"""
from .create_invoice import CreateInvoice
from .update_invoice import UpdateInvoice
from .delete_invoice import DeleteInvoice
from .get_invoice import GetInvoice
from .list_invoices import ListInvoices
from .preview_invoice_number import PreviewInvoiceNumber
from .render_invoice_pdf import RenderInvoicePdf
from .dtos import (
    InvoiceLineInputDTO,
    CreateInvoiceCommandDTO,
    UpdateInvoiceCommandDTO,
    InvoiceLineDTO,
    InvoiceResponseDTO,
    InvoiceSummaryDTO,
    ListInvoicesResponseDTO,
    NextInvoiceNumberResponseDTO,
    DeleteInvoiceResponseDTO,
    InvoicePdfResponseDTO,
)

__all__ = [
    "CreateInvoice",
    "UpdateInvoice",
    "DeleteInvoice",
    "GetInvoice",
    "ListInvoices",
    "PreviewInvoiceNumber",
    "RenderInvoicePdf",
    "InvoiceLineInputDTO",
    "CreateInvoiceCommandDTO",
    "UpdateInvoiceCommandDTO",
    "InvoiceLineDTO",
    "InvoiceResponseDTO",
    "InvoiceSummaryDTO",
    "ListInvoicesResponseDTO",
    "NextInvoiceNumberResponseDTO",
    "DeleteInvoiceResponseDTO",
    "InvoicePdfResponseDTO",
]
