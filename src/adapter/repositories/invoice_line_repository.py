"""SQLAlchemy Invoice Line Repository Implementation

Implements invoice line persistence using SQLAlchemy async session.
"""

from typing import List
from sqlmodel import select
from sqlalchemy import delete
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_line_repository import InvoiceLineRepository
from src.domain.invoice_line import InvoiceLine


class SqlAlchemyInvoiceLineRepository(InvoiceLineRepository):
    """
    SQLAlchemy implementation of InvoiceLineRepository

    Lines are always written as a whole set per invoice. Child rows are
    removed explicitly since SQLite does not enforce ON DELETE CASCADE
    unless foreign keys are switched on.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_invoice_id(self, invoice_id: int) -> List[InvoiceLine]:
        """
        Retrieve all line items for an invoice

        Args:
            invoice_id: Invoice ID

        Returns:
            List of InvoiceLine items in position order
        """
        statement = (
            select(InvoiceLine)
            .where(InvoiceLine.invoice_id == invoice_id)
            .order_by(InvoiceLine.position)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def replace_for_invoice(
        self, invoice_id: int, lines: List[InvoiceLine]
    ) -> List[InvoiceLine]:
        """
        Replace every line of an invoice

        Args:
            invoice_id: Invoice ID
            lines: New lines (positions already assigned)

        Returns:
            Stored lines with generated IDs
        """
        await self.delete_for_invoice(invoice_id)
        for line in lines:
            line.invoice_id = invoice_id
            self.session.add(line)
        await self.session.flush()
        for line in lines:
            await self.session.refresh(line)
        return list(lines)

    async def delete_for_invoice(self, invoice_id: int) -> None:
        statement = delete(InvoiceLine).where(InvoiceLine.invoice_id == invoice_id)
        await self.session.execute(statement)
        await self.session.flush()
