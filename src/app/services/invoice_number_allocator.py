"""Invoice Number Allocator

Hands out INV-{fiscal year}-{seq:04d} numbers. The sequence is global (it is
not reset per fiscal year); the fiscal year only shapes the prefix.

Sources, in order:
1. The invoice sequence counter (row-locked read-increment-write)
2. Count of all persisted invoices + 1
3. 1

A number that is already stored is skipped: allocate() draws again (or
steps past it when the counter is unavailable) until it finds a free one.
The unique constraint on invoices.invoice_number stays the backstop for a
concurrent save taking the same number; that collision is reported at save
time.
"""

import logging
from datetime import datetime
from typing import Callable, Optional

from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_sequence_repository import InvoiceSequenceRepository
from src.domain.invoice_number import (
    DEFAULT_PREFIX,
    FISCAL_YEAR_START_MONTH,
    format_invoice_number,
)

logger = logging.getLogger(__name__)

SEQUENCE_NAME = "invoice"
MAX_SKIPPED_NUMBERS = 100


class InvoiceNumberAllocator:
    """
    Allocates sequential, fiscal-year-prefixed invoice numbers

    Usage:
        allocator = InvoiceNumberAllocator(sequence_repo, invoice_repo)
        number = await allocator.allocate()      # consumes a sequence value
        preview = await allocator.peek()         # display only
    """

    def __init__(
        self,
        sequence_repo: InvoiceSequenceRepository,
        invoice_repo: InvoiceRepository,
        prefix: str = DEFAULT_PREFIX,
        fiscal_year_start_month: int = FISCAL_YEAR_START_MONTH,
        clock: Callable[[], datetime] = datetime.utcnow,
    ):
        self.sequence_repo = sequence_repo
        self.invoice_repo = invoice_repo
        self.prefix = prefix
        self.fiscal_year_start_month = fiscal_year_start_month
        self.clock = clock

    async def allocate(self, at: Optional[datetime] = None) -> str:
        """
        Allocate the next invoice number

        Args:
            at: Invoice date (defaults to now); selects the fiscal year

        Returns:
            Invoice number string
        """
        at = at or self.clock()
        sequence = await self._sequence(consume=True)
        number = self._format(sequence, at)

        for _ in range(MAX_SKIPPED_NUMBERS):
            if not await self.invoice_repo.get_by_invoice_number(number):
                return number
            logger.warning(f"Invoice number {number} is already taken, skipping")
            drawn = await self._sequence(consume=True)
            sequence = drawn if drawn > sequence else sequence + 1
            number = self._format(sequence, at)

        return number

    async def peek(self, at: Optional[datetime] = None) -> str:
        """
        Next invoice number without consuming it

        Another session may take this number first; only allocate() is
        authoritative.
        """
        sequence = await self._sequence(consume=False)
        return self._format(sequence, at)

    async def _sequence(self, consume: bool) -> int:
        try:
            if consume:
                return await self.sequence_repo.next_value(SEQUENCE_NAME)
            return await self.sequence_repo.peek_next(SEQUENCE_NAME)
        except Exception as e:
            logger.warning(f"Invoice sequence unavailable, falling back to invoice count: {e}")

        try:
            return await self.invoice_repo.count() + 1
        except Exception as e:
            logger.warning(f"Invoice count unavailable, defaulting sequence to 1: {e}")

        return 1

    def _format(self, sequence: int, at: Optional[datetime]) -> str:
        return format_invoice_number(
            sequence,
            at or self.clock(),
            prefix=self.prefix,
            start_month=self.fiscal_year_start_month,
        )
