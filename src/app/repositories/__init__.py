from .invoice_repository import InvoiceRepository
from .invoice_line_repository import InvoiceLineRepository
from .invoice_sequence_repository import InvoiceSequenceRepository
from .item_repository import ItemRepository
from .customer_repository import CustomerRepository

__all__ = [
    "InvoiceRepository",
    "InvoiceLineRepository",
    "InvoiceSequenceRepository",
    "ItemRepository",
    "CustomerRepository",
]
