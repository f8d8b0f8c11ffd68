from .invoice_repository import SqlAlchemyInvoiceRepository
from .invoice_line_repository import SqlAlchemyInvoiceLineRepository
from .invoice_sequence_repository import SqlAlchemyInvoiceSequenceRepository
from .item_repository import SqlAlchemyItemRepository
from .customer_repository import SqlAlchemyCustomerRepository

__all__ = [
    "SqlAlchemyInvoiceRepository",
    "SqlAlchemyInvoiceLineRepository",
    "SqlAlchemyInvoiceSequenceRepository",
    "SqlAlchemyItemRepository",
    "SqlAlchemyCustomerRepository",
]
