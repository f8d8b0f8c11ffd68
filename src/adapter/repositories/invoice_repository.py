"""SQLAlchemy Invoice Repository Implementation

Implements invoice persistence using SQLAlchemy async session.
"""

from typing import Optional, List, Tuple
from datetime import datetime
from sqlmodel import select, func
from sqlalchemy import or_
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlalchemy.exc import IntegrityError
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.customer import Customer
from src.domain.errors import InvoiceNumberConflict
from src.domain.invoice import Invoice

SORT_COLUMNS = {
    "date": Invoice.created_at,
    "total": Invoice.total,
    "number": Invoice.invoice_number,
}


class SqlAlchemyInvoiceRepository(InvoiceRepository):
    """
    SQLAlchemy implementation of InvoiceRepository

    Features:
    - Unique invoice_number enforced by the database; violations surface
      as InvoiceNumberConflict
    - Search over invoice number and customer name
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, invoice: Invoice) -> Invoice:
        """
        Create a new invoice

        Args:
            invoice: Invoice entity to persist

        Returns:
            Created Invoice with generated ID

        Raises:
            InvoiceNumberConflict: invoice_number is already taken
        """
        self.session.add(invoice)
        try:
            await self.session.flush()
        except IntegrityError as e:
            if "invoice_number" in str(e.orig):
                raise InvoiceNumberConflict(invoice.invoice_number) from e
            raise
        await self.session.refresh(invoice)
        return invoice

    async def get_by_id(self, invoice_id: int) -> Optional[Invoice]:
        """
        Retrieve invoice by ID

        Args:
            invoice_id: Invoice ID

        Returns:
            Invoice if found, None otherwise
        """
        statement = select(Invoice).where(Invoice.id == invoice_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_by_invoice_number(self, invoice_number: str) -> Optional[Invoice]:
        statement = select(Invoice).where(Invoice.invoice_number == invoice_number)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def update(self, invoice: Invoice) -> Invoice:
        """
        Update an existing invoice

        Stamps updated_at; invoice_number and created_at are left as loaded.

        Args:
            invoice: Invoice entity with updated values

        Returns:
            Updated Invoice
        """
        invoice.updated_at = datetime.utcnow()
        self.session.add(invoice)
        await self.session.flush()
        await self.session.refresh(invoice)
        return invoice

    async def delete(self, invoice: Invoice) -> None:
        await self.session.delete(invoice)
        await self.session.flush()

    async def count(self) -> int:
        statement = select(func.count()).select_from(Invoice)
        result = await self.session.execute(statement)
        return result.scalar_one()

    async def list_invoices(
        self,
        search: Optional[str] = None,
        customer_id: Optional[int] = None,
        sort_by: str = "date",
        descending: bool = True,
        limit: int = 20,
        offset: int = 0,
    ) -> Tuple[List[Invoice], int]:
        """
        List invoices with filtering, sorting and pagination

        Args:
            search: Case-insensitive substring of invoice number or customer name
            customer_id: Only invoices of this customer
            sort_by: "date", "total" or "number"
            descending: Sort direction
            limit: Maximum number of invoices to return
            offset: Offset for pagination

        Returns:
            Tuple of (invoices, total matching count)
        """
        statement = select(Invoice).outerjoin(Customer, Customer.id == Invoice.customer_id)
        count_statement = (
            select(func.count())
            .select_from(Invoice)
            .outerjoin(Customer, Customer.id == Invoice.customer_id)
        )

        filters = []
        if search:
            pattern = f"%{search.lower()}%"
            filters.append(
                or_(
                    func.lower(Invoice.invoice_number).like(pattern),
                    func.lower(Customer.name).like(pattern),
                )
            )
        if customer_id is not None:
            filters.append(Invoice.customer_id == customer_id)

        for condition in filters:
            statement = statement.where(condition)
            count_statement = count_statement.where(condition)

        column = SORT_COLUMNS.get(sort_by, Invoice.created_at)
        if descending:
            statement = statement.order_by(column.desc(), Invoice.id.desc())
        else:
            statement = statement.order_by(column.asc(), Invoice.id.asc())
        statement = statement.limit(limit).offset(offset)

        result = await self.session.execute(statement)
        invoices = list(result.scalars().all())

        count_result = await self.session.execute(count_statement)
        total = count_result.scalar_one()

        return invoices, total
