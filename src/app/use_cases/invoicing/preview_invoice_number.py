"""PreviewInvoiceNumber Use Case

Next invoice number for display on a new draft.
"""

from libs.result import Result, Return
from src.app.services.invoice_number_allocator import InvoiceNumberAllocator
from .dtos import NextInvoiceNumberResponseDTO


class PreviewInvoiceNumber:
    """
    Use Case: Show the number a new invoice will probably get

    Never consumes a sequence value; the number actually stored is
    allocated at save time and may differ.
    """

    def __init__(self, allocator: InvoiceNumberAllocator):
        self.allocator = allocator

    async def execute(self) -> Result[NextInvoiceNumberResponseDTO]:
        next_number = await self.allocator.peek()
        return Return.ok(NextInvoiceNumberResponseDTO(next_number=next_number))
