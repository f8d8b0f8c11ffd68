"""DeleteInvoice Use Case

Hard-deletes an invoice together with its lines.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_line_repository import InvoiceLineRepository
from .dtos import DeleteInvoiceResponseDTO

logger = logging.getLogger(__name__)


class DeleteInvoice:
    """
    Use Case: Delete an invoice

    Business Rules:
    1. Invoice must exist
    2. Lines are removed with the invoice
    3. Other invoices and the number sequence are untouched

    Flow:
    1. Retrieve invoice
    2. Delete lines, then the invoice
    3. Commit transaction
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        invoice_line_repo: InvoiceLineRepository,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.invoice_line_repo = invoice_line_repo

    async def execute(self, invoice_id: int) -> Result[DeleteInvoiceResponseDTO]:
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

            invoice_number = invoice.invoice_number

            # Step 2: Delete lines and invoice
            await self.invoice_line_repo.delete_for_invoice(invoice.id)
            await self.invoice_repo.delete(invoice)

            # Step 3: Commit transaction
            await self.uow.commit()
            logger.info(f"Deleted invoice {invoice_number}")

            return Return.ok(
                DeleteInvoiceResponseDTO(invoice_id=invoice_id, invoice_number=invoice_number)
            )

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="DELETE_INVOICE_FAILED",
                    message="Failed to delete invoice",
                    reason=str(e),
                )
            )
