"""
List Invoices Use Case

Searchable, sortable, paginated invoice listing.
"""
from typing import Optional
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from .dtos import ListInvoicesResponseDTO
from .mappers import to_invoice_summary

SORT_FIELDS = ("date", "total", "number")


class ListInvoices:
    """
    Use case: Browse invoices

    Defaults to newest first.
    """

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(
        self,
        search: Optional[str] = None,
        customer_id: Optional[int] = None,
        sort_by: str = "date",
        descending: bool = True,
        limit: int = 20,
        offset: int = 0,
    ) -> Result[ListInvoicesResponseDTO]:
        """
        List invoices.

        Args:
            search: Substring of invoice number or customer name
            customer_id: Restrict to one customer
            sort_by: "date", "total" or "number"
            descending: Sort direction
            limit: Maximum number of invoices to return (default 20)
            offset: Number of invoices to skip (default 0)

        Returns:
            Result[ListInvoicesResponseDTO]: Page of invoice summaries
        """
        if sort_by not in SORT_FIELDS:
            return Return.err(
                Error(
                    code="INVALID_SORT_FIELD",
                    message=f"Cannot sort by '{sort_by}'",
                    reason=f"Expected one of: {', '.join(SORT_FIELDS)}",
                )
            )

        search = search.strip() if search else None
        invoices, total = await self.invoice_repo.list_invoices(
            search=search or None,
            customer_id=customer_id,
            sort_by=sort_by,
            descending=descending,
            limit=limit,
            offset=offset,
        )

        return Return.ok(
            ListInvoicesResponseDTO(
                invoices=[to_invoice_summary(invoice) for invoice in invoices],
                total=total,
                limit=limit,
                offset=offset,
            )
        )
