"""Invoice Repository Interface

Defines the contract for invoice persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Optional, List, Tuple
from src.domain.invoice import Invoice


class InvoiceRepository(ABC):
    """
    Repository interface for Invoice persistence

    Provides access to invoice data for invoicing operations.
    """

    @abstractmethod
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
        pass

    @abstractmethod
    async def get_by_id(self, invoice_id: int) -> Optional[Invoice]:
        """
        Retrieve invoice by ID

        Args:
            invoice_id: Invoice ID

        Returns:
            Invoice if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_invoice_number(self, invoice_number: str) -> Optional[Invoice]:
        """
        Retrieve invoice by invoice number

        Args:
            invoice_number: Unique invoice number

        Returns:
            Invoice if found, None otherwise
        """
        pass

    @abstractmethod
    async def update(self, invoice: Invoice) -> Invoice:
        """
        Update an existing invoice

        Args:
            invoice: Invoice entity with updated values

        Returns:
            Updated Invoice
        """
        pass

    @abstractmethod
    async def delete(self, invoice: Invoice) -> None:
        """
        Hard-delete an invoice

        Args:
            invoice: Invoice entity to remove
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """
        Count all persisted invoices

        Returns:
            Number of invoices
        """
        pass

    @abstractmethod
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
            search: Case-insensitive substring of the invoice number or customer name
            customer_id: Only invoices of this customer
            sort_by: "date", "total" or "number"
            descending: Sort direction
            limit: Maximum number of invoices to return
            offset: Offset for pagination

        Returns:
            Tuple of (invoices, total matching count)
        """
        pass
