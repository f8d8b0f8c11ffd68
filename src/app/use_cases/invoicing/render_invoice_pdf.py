"""RenderInvoicePdf Use Case

Generates the printable invoice for a stored invoice.
"""

import base64
from datetime import datetime
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_line_repository import InvoiceLineRepository
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.item_repository import ItemRepository
from src.app.services.pdf_service import PdfService
from .dtos import InvoicePdfResponseDTO


class RenderInvoicePdf:
    """
    Use Case: Printable invoice

    Business Rules:
    1. Invoice must exist
    2. Amounts come from the stored snapshot
    3. The rounding line is printed only when the adjustment is material
    4. Returns PDF as base64-encoded string

    Flow:
    1. Retrieve invoice
    2. Retrieve lines, customer and referenced items
    3. Generate PDF using PDF service
    4. Return response with PDF as base64
    """

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        invoice_line_repo: InvoiceLineRepository,
        customer_repo: CustomerRepository,
        item_repo: ItemRepository,
        pdf_service: PdfService,
        company_name: str = "Sales Invoicing",
        company_address: str = "",
        currency_symbol: str = "Rs.",
    ):
        self.invoice_repo = invoice_repo
        self.invoice_line_repo = invoice_line_repo
        self.customer_repo = customer_repo
        self.item_repo = item_repo
        self.pdf_service = pdf_service
        self.company_name = company_name
        self.company_address = company_address
        self.currency_symbol = currency_symbol

    async def execute(self, invoice_id: int) -> Result[InvoicePdfResponseDTO]:
        """
        Execute invoice PDF generation

        Args:
            invoice_id: Invoice ID to render

        Returns:
            Result[InvoicePdfResponseDTO]: Success with PDF or error
        """
        try:
            # Step 1: Retrieve invoice
            invoice = await self.invoice_repo.get_by_id(invoice_id)

            if not invoice:
                return Return.err(
                    Error(
                        code="INVOICE_NOT_FOUND",
                        message=f"Invoice with ID {invoice_id} not found",
                        reason="Invoice does not exist",
                    )
                )

            # Step 2: Retrieve lines, customer and items
            invoice_lines = await self.invoice_line_repo.get_by_invoice_id(invoice.id)
            customer = await self.customer_repo.get_by_id(invoice.customer_id)
            item_ids = {line.item_id for line in invoice_lines}
            items = await self.item_repo.get_by_ids(item_ids) if item_ids else []

            # Step 3: Generate PDF
            pdf_bytes = self.pdf_service.generate_invoice(
                invoice=invoice,
                invoice_lines=invoice_lines,
                customer=customer,
                items={item.id: item for item in items},
                company_name=self.company_name,
                company_address=self.company_address,
                currency_symbol=self.currency_symbol,
            )

            pdf_base64 = base64.b64encode(pdf_bytes).decode("utf-8")

            # Step 4: Build response
            return Return.ok(
                InvoicePdfResponseDTO(
                    invoice_id=invoice.id,
                    invoice_number=invoice.invoice_number,
                    pdf_base64=pdf_base64,
                    generated_at=datetime.utcnow(),
                )
            )

        except Exception as e:
            return Return.err(
                Error(
                    code="RENDER_INVOICE_PDF_FAILED",
                    message="Failed to render invoice PDF",
                    reason=str(e),
                )
            )
