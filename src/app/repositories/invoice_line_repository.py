"""Invoice Line Repository Interface

Defines the contract for invoice line persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List
from src.domain.invoice_line import InvoiceLine


class InvoiceLineRepository(ABC):
    """
    Repository interface for InvoiceLine persistence

    Lines are always written as a complete set for one invoice.
    """

    @abstractmethod
    async def get_by_invoice_id(self, invoice_id: int) -> List[InvoiceLine]:
        """
        Retrieve all line items for an invoice, in position order

        Args:
            invoice_id: Invoice ID

        Returns:
            List of InvoiceLine items
        """
        pass

    @abstractmethod
    async def replace_for_invoice(
        self, invoice_id: int, lines: List[InvoiceLine]
    ) -> List[InvoiceLine]:
        """
        Replace every line of an invoice

        Args:
            invoice_id: Invoice ID
            lines: New lines (already bound to invoice_id)

        Returns:
            Persisted lines with generated IDs
        """
        pass

    @abstractmethod
    async def delete_for_invoice(self, invoice_id: int) -> None:
        """
        Delete every line of an invoice

        Args:
            invoice_id: Invoice ID
        """
        pass
