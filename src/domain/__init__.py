from .base import BaseModel
from .customer import Customer
from .item import Item
from .invoice import Invoice
from .invoice_line import InvoiceLine
from .invoice_sequence import InvoiceSequence
from .errors import InvoiceValidationError, InvoiceNumberConflict
from .line_item import LineItem
from .ledger import LineItemLedger
from .catalog import Catalog
from .resolution import Resolved, Unresolved
from .pricing import (
    DiscountType,
    Discount,
    PricingInput,
    PricingSnapshot,
    recompute,
)
from .net_override import NetAmountOverride, OverrideState
from .invoice_draft import InvoiceDraft, InvoiceState, FinalizedInvoice, finalize_invoice

__all__ = [
    "BaseModel",
    "Customer",
    "Item",
    "Invoice",
    "InvoiceLine",
    "InvoiceSequence",
    "InvoiceValidationError",
    "InvoiceNumberConflict",
    "LineItem",
    "LineItemLedger",
    "Catalog",
    "Resolved",
    "Unresolved",
    "DiscountType",
    "Discount",
    "PricingInput",
    "PricingSnapshot",
    "recompute",
    "NetAmountOverride",
    "OverrideState",
    "InvoiceDraft",
    "InvoiceState",
    "FinalizedInvoice",
    "finalize_invoice",
]
