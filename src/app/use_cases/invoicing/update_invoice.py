"""UpdateInvoice Use Case

Full replace of an invoice's customer, lines and pricing snapshot.
"""

import logging
from decimal import Decimal
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_line_repository import InvoiceLineRepository
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.item_repository import ItemRepository
from src.domain.errors import InvoiceValidationError
from src.domain.invoice_draft import InvoiceDraft
from src.domain.invoice_line import InvoiceLine
from .dtos import UpdateInvoiceCommandDTO, InvoiceResponseDTO
from .invoice_content import load_invoice_content
from .mappers import to_invoice_response

logger = logging.getLogger(__name__)


class UpdateInvoice:
    """
    Use Case: Replace an existing invoice

    Business Rules:
    1. Invoice must exist
    2. Same validation as creation (customer, billable lines)
    3. invoice_number and created_at are never changed
    4. Pricing is recomputed with the tax rate configured now
    5. Last write wins; there is no version check

    Flow:
    1. Retrieve invoice
    2. Resolve customer and items
    3. Validate through the reopened draft (EDITING)
    4. Replace pricing and lines
    5. Commit transaction
    6. Return response
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        invoice_line_repo: InvoiceLineRepository,
        customer_repo: CustomerRepository,
        item_repo: ItemRepository,
        tax_rate: Decimal,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.invoice_line_repo = invoice_line_repo
        self.customer_repo = customer_repo
        self.item_repo = item_repo
        self.tax_rate = tax_rate

    async def execute(self, command: UpdateInvoiceCommandDTO) -> Result[InvoiceResponseDTO]:
        """
        Execute invoice replacement

        Args:
            command: UpdateInvoiceCommandDTO with invoice_id and the new content

        Returns:
            Result[InvoiceResponseDTO]: Success with stored invoice or error
        """
        try:
            # Step 1: Retrieve invoice
            invoice = await self.invoice_repo.get_by_id(command.invoice_id)

            if not invoice:
                return Return.err(
                    Error(
                        code="INVOICE_NOT_FOUND",
                        message=f"Invoice with ID {command.invoice_id} not found",
                        reason="Invoice does not exist",
                    )
                )

            # Step 2: Resolve references
            content = await load_invoice_content(command, self.customer_repo, self.item_repo)
            if content.is_err():
                return content
            customer, lines, discount, catalog = content.value

            # Step 3: Validate
            existing_lines = await self.invoice_line_repo.get_by_invoice_id(invoice.id)
            draft = InvoiceDraft.reopen(invoice, existing_lines, catalog)
            draft.tax_rate = self.tax_rate
            draft.replace_content(customer, lines, discount, command.net_override)
            try:
                finalized = draft.begin_save()
            except InvoiceValidationError as e:
                return Return.err(
                    Error(
                        code="VALIDATION_ERROR",
                        message=str(e),
                        reason="Invoice cannot be saved as entered",
                    )
                )

            # Step 4: Replace pricing and lines
            invoice.customer_id = finalized.customer_id
            invoice.apply_pricing(finalized.pricing)
            updated_invoice = await self.invoice_repo.update(invoice)

            updated_lines = await self.invoice_line_repo.replace_for_invoice(
                updated_invoice.id,
                [
                    InvoiceLine.from_line_item(updated_invoice.id, position, line)
                    for position, line in enumerate(finalized.lines)
                ],
            )

            # Step 5: Commit transaction
            await self.uow.commit()
            draft.mark_persisted(
                updated_invoice.id, updated_invoice.invoice_number, updated_invoice.created_at
            )
            logger.info(f"Replaced invoice {updated_invoice.invoice_number}, total {updated_invoice.total}")

            # Step 6: Build response
            return Return.ok(to_invoice_response(updated_invoice, updated_lines))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="UPDATE_INVOICE_FAILED",
                    message="Failed to update invoice",
                    reason=str(e),
                )
            )
