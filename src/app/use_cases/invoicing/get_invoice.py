"""GetInvoice Use Case

Returns a stored invoice exactly as persisted.
"""

import logging
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_line_repository import InvoiceLineRepository
from .dtos import InvoiceResponseDTO
from .mappers import to_invoice_response

logger = logging.getLogger(__name__)


class GetInvoice:
    """
    Use Case: Read one invoice

    The pricing snapshot is returned verbatim, never recomputed. A snapshot
    whose rounding adjustment no longer reconciles is still returned but
    logged as an error.
    """

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        invoice_line_repo: InvoiceLineRepository,
    ):
        self.invoice_repo = invoice_repo
        self.invoice_line_repo = invoice_line_repo

    async def execute(self, invoice_id: int) -> Result[InvoiceResponseDTO]:
        try:
            invoice = await self.invoice_repo.get_by_id(invoice_id)

            if not invoice:
                return Return.err(
                    Error(
                        code="INVOICE_NOT_FOUND",
                        message=f"Invoice with ID {invoice_id} not found",
                        reason="Invoice does not exist",
                    )
                )

            if not invoice.has_consistent_rounding():
                logger.error(
                    f"Invoice {invoice.invoice_number}: rounding adjustment "
                    f"{invoice.rounding_adjustment} != total {invoice.total} - "
                    f"computed {invoice.computed_total}"
                )

            lines = await self.invoice_line_repo.get_by_invoice_id(invoice.id)
            return Return.ok(to_invoice_response(invoice, lines))

        except Exception as e:
            return Return.err(
                Error(
                    code="GET_INVOICE_FAILED",
                    message="Failed to retrieve invoice",
                    reason=str(e),
                )
            )
