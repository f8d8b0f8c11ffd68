"""SQLAlchemy Invoice Sequence Repository Implementation

Row-locked counter for invoice numbers.
"""

import logging
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_sequence_repository import InvoiceSequenceRepository
from src.domain.invoice import Invoice
from src.domain.invoice_number import parse_sequence
from src.domain.invoice_sequence import InvoiceSequence

logger = logging.getLogger(__name__)


class SqlAlchemyInvoiceSequenceRepository(InvoiceSequenceRepository):
    """
    SQLAlchemy implementation of InvoiceSequenceRepository

    next_value() takes SELECT ... FOR UPDATE on the sequence row, so the
    increment commits or rolls back together with the invoice insert.
    A missing row is created from the highest sequence found in the stored
    invoice numbers, so numbering continues past gaps left by deletions.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def next_value(self, name: str) -> int:
        statement = (
            select(InvoiceSequence)
            .where(InvoiceSequence.name == name)
            .with_for_update()
        )
        result = await self.session.execute(statement)
        sequence = result.scalar_one_or_none()

        if sequence is None:
            seed = await self._highest_stored_sequence()
            logger.info(f"Seeding invoice sequence '{name}' at {seed}")
            sequence = InvoiceSequence(name=name, last_value=seed)

        sequence.last_value += 1
        self.session.add(sequence)
        await self.session.flush()
        return sequence.last_value

    async def peek_next(self, name: str) -> int:
        statement = select(InvoiceSequence.last_value).where(InvoiceSequence.name == name)
        result = await self.session.execute(statement)
        last_value = result.scalar_one_or_none()

        if last_value is None:
            last_value = await self._highest_stored_sequence()
        return last_value + 1

    async def _highest_stored_sequence(self) -> int:
        # numbers carry a fiscal-year prefix, so MAX(invoice_number) is not the highest sequence
        result = await self.session.execute(select(Invoice.invoice_number))
        sequences = [parse_sequence(number) for number in result.scalars().all()]
        return max((s for s in sequences if s is not None), default=0)
