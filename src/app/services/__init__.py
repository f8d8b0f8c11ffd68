from .unit_of_work import UnitOfWork
from .invoice_number_allocator import InvoiceNumberAllocator
from .pdf_service import PdfService

__all__ = [
    "UnitOfWork",
    "InvoiceNumberAllocator",
    "PdfService",
]
