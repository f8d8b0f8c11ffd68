"""PDF Generation Service Interface

Defines the contract for printable invoice generation.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional
from src.domain.customer import Customer
from src.domain.invoice import Invoice
from src.domain.invoice_line import InvoiceLine
from src.domain.item import Item


class PdfService(ABC):
    """
    Service interface for PDF generation

    Provides printable documents for persisted invoices.
    """

    @abstractmethod
    def generate_invoice(
        self,
        invoice: Invoice,
        invoice_lines: List[InvoiceLine],
        customer: Optional[Customer],
        items: Dict[int, Item],
        company_name: str = "Sales Invoicing",
        company_address: str = "",
        currency_symbol: str = "Rs.",
    ) -> bytes:
        """
        Generate an invoice PDF

        Args:
            invoice: Invoice entity with the stored pricing snapshot
            invoice_lines: Stored line items, in position order
            customer: Billed customer (None if it no longer exists)
            items: Catalog items referenced by the lines, keyed by id
            company_name: Company name to display on invoice
            company_address: Company address to display on invoice
            currency_symbol: Symbol printed before amounts

        Returns:
            PDF document as bytes
        """
        pass
