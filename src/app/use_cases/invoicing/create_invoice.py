"""CreateInvoice Use Case

Validates a new invoice, allocates its number and persists it together with
its lines and pricing snapshot.
"""

import logging
from decimal import Decimal
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.invoice_number_allocator import InvoiceNumberAllocator
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_line_repository import InvoiceLineRepository
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.item_repository import ItemRepository
from src.domain.errors import InvoiceNumberConflict, InvoiceValidationError
from src.domain.invoice import Invoice
from src.domain.invoice_draft import InvoiceDraft
from src.domain.invoice_line import InvoiceLine
from .dtos import CreateInvoiceCommandDTO, InvoiceResponseDTO
from .invoice_content import load_invoice_content
from .mappers import to_invoice_response

logger = logging.getLogger(__name__)


class CreateInvoice:
    """
    Use Case: Create and persist a new invoice

    Business Rules:
    1. A customer must be selected and must exist
    2. At least one line with an existing item and a positive price
    3. Pricing is recomputed here with the configured tax rate
    4. Invoice number is allocated inside the same transaction as the insert
    5. A taken invoice number is reported, never overwritten

    Flow:
    1. Resolve customer and items
    2. Validate through the draft (DRAFT -> PENDING_SAVE)
    3. Allocate invoice number
    4. Insert invoice and lines
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
        allocator: InvoiceNumberAllocator,
        tax_rate: Decimal,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.invoice_line_repo = invoice_line_repo
        self.customer_repo = customer_repo
        self.item_repo = item_repo
        self.allocator = allocator
        self.tax_rate = tax_rate

    async def execute(self, command: CreateInvoiceCommandDTO) -> Result[InvoiceResponseDTO]:
        """
        Execute invoice creation

        Args:
            command: CreateInvoiceCommandDTO with customer, lines, discount, override

        Returns:
            Result[InvoiceResponseDTO]: Success with stored invoice or error
        """
        draft = None
        try:
            # Step 1: Resolve references
            content = await load_invoice_content(command, self.customer_repo, self.item_repo)
            if content.is_err():
                return content
            customer, lines, discount, catalog = content.value

            # Step 2: Validate
            draft = InvoiceDraft(tax_rate=self.tax_rate, catalog=catalog)
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

            # Step 3: Allocate invoice number
            invoice_number = await self.allocator.allocate()
            if await self.invoice_repo.get_by_invoice_number(invoice_number):
                raise InvoiceNumberConflict(invoice_number)

            # Step 4: Insert invoice and lines
            invoice = Invoice(
                invoice_number=invoice_number,
                customer_id=finalized.customer_id,
                subtotal=finalized.pricing.subtotal,
                discount_type=finalized.pricing.discount_type,
                discount_value=finalized.pricing.discount_value,
                discount_amount=finalized.pricing.discount_amount,
                taxable_amount=finalized.pricing.taxable_amount,
                tax_rate=finalized.pricing.tax_rate,
                tax_amount=finalized.pricing.tax_amount,
                rounding_adjustment=finalized.pricing.rounding_adjustment,
                total=finalized.pricing.total,
            )
            created_invoice = await self.invoice_repo.create(invoice)

            created_lines = await self.invoice_line_repo.replace_for_invoice(
                created_invoice.id,
                [
                    InvoiceLine.from_line_item(created_invoice.id, position, line)
                    for position, line in enumerate(finalized.lines)
                ],
            )

            # Step 5: Commit transaction
            await self.uow.commit()
            draft.mark_persisted(
                created_invoice.id, created_invoice.invoice_number, created_invoice.created_at
            )
            logger.info(
                f"Created invoice {created_invoice.invoice_number} "
                f"for customer {created_invoice.customer_id}, total {created_invoice.total}"
            )

            # Step 6: Build response
            return Return.ok(to_invoice_response(created_invoice, created_lines))

        except InvoiceNumberConflict as e:
            await self.uow.rollback()
            if draft is not None:
                draft.save_failed()
            logger.warning(f"Invoice number collision: {e.invoice_number}")
            return Return.err(
                Error(
                    code="INVOICE_NUMBER_CONFLICT",
                    message=str(e),
                    reason="Concurrent invoice creation; retry allocation",
                )
            )

        except Exception as e:
            await self.uow.rollback()
            if draft is not None:
                draft.save_failed()
            return Return.err(
                Error(
                    code="CREATE_INVOICE_FAILED",
                    message="Failed to create invoice",
                    reason=str(e),
                )
            )
