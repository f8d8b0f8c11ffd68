"""Invoice Draft

Editing session for one invoice and the save-side validation shared with
the create/update use cases.

States:
    DRAFT -> PENDING_SAVE -> PERSISTED -> EDITING -> PERSISTED
    PERSISTED | EDITING -> DELETED
A failed save returns PENDING_SAVE to DRAFT with nothing written.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Iterable, List, Optional, Tuple
from pydantic import BaseModel, ConfigDict
from src.domain.catalog import Catalog
from src.domain.customer import Customer
from src.domain.errors import InvoiceValidationError
from src.domain.invoice import Invoice
from src.domain.invoice_line import InvoiceLine
from src.domain.ledger import LineItemLedger
from src.domain.line_item import LineItem
from src.domain.money import quantize_storage
from src.domain.net_override import NetAmountOverride
from src.domain.pricing import (
    DEFAULT_TAX_RATE,
    Discount,
    DiscountType,
    PricingInput,
    PricingSnapshot,
    recompute,
)
from src.domain.resolution import Resolution, Resolved, Unresolved


class InvoiceState(str, Enum):
    DRAFT = "draft"
    PENDING_SAVE = "pending_save"
    PERSISTED = "persisted"
    EDITING = "editing"
    DELETED = "deleted"


class FinalizedInvoice(BaseModel):
    """Validated invoice content ready to be written"""

    model_config = ConfigDict(frozen=True)

    customer_id: int
    lines: Tuple[LineItem, ...]
    pricing: PricingSnapshot


def finalize_invoice(
    customer: Optional[Resolution],
    lines: Iterable[LineItem],
    discount: Discount,
    net_override: Optional[Decimal],
    tax_rate: Decimal,
) -> FinalizedInvoice:
    """
    Validate and freeze invoice content

    Blank and zero-priced lines are dropped. Prices are quantized to storage
    precision before pricing so the stored lines and the stored snapshot
    agree exactly.

    Raises:
        InvoiceValidationError: missing or unknown customer, or no billable line
    """
    if isinstance(customer, Unresolved):
        raise InvoiceValidationError(f"Customer {customer.ref} not found")
    if not isinstance(customer, Resolved):
        raise InvoiceValidationError("Please select a customer")

    billable = tuple(
        line.model_copy(update={"unit_price": quantize_storage(line.unit_price)})
        for line in lines
        if line.is_billable
    )
    if not billable:
        raise InvoiceValidationError("Please add at least one item")

    snapshot = recompute(
        PricingInput(
            lines=billable,
            discount=discount,
            net_override=net_override,
            tax_rate=tax_rate,
        )
    )
    return FinalizedInvoice(
        customer_id=customer.ref,
        lines=billable,
        pricing=snapshot.for_storage(),
    )


class InvoiceDraft:
    """
    Interactive editing state for one invoice

    Holds the ledger, discount, override and customer; pricing() derives
    a fresh snapshot on every call.
    """

    def __init__(self, tax_rate: Decimal = DEFAULT_TAX_RATE, catalog: Optional[Catalog] = None):
        self.tax_rate = tax_rate
        self.catalog = catalog or Catalog([])
        self.state = InvoiceState.DRAFT
        self.customer: Optional[Resolution] = None
        self.ledger = LineItemLedger()
        self.discount = Discount()
        self.net_override = NetAmountOverride()
        self.invoice_id: Optional[int] = None
        self.invoice_number: Optional[str] = None
        self.created_at: Optional[datetime] = None

    @classmethod
    def reopen(
        cls,
        invoice: Invoice,
        lines: List[InvoiceLine],
        catalog: Catalog,
        customer: Optional[Customer] = None,
    ) -> "InvoiceDraft":
        """Open a persisted invoice for a full-replace edit"""
        draft = cls(tax_rate=invoice.tax_rate, catalog=catalog)
        draft.state = InvoiceState.EDITING
        draft.invoice_id = invoice.id
        draft.invoice_number = invoice.invoice_number
        draft.created_at = invoice.created_at
        draft.customer = Resolved(customer) if customer is not None else None

        rows = []
        for line in sorted(lines, key=lambda l: l.position):
            item = catalog.by_ref(line.item_id)
            code = (item.entity.code or "") if isinstance(item, Resolved) else ""
            rows.append(line.to_line_item(code=code))
        rows.append(LineItem())
        draft.ledger = LineItemLedger(rows)

        draft.discount = Discount(type=invoice.discount_type, value=invoice.discount_value)
        draft.net_override = NetAmountOverride.committed_to(invoice.total)
        return draft

    def replace_content(
        self,
        customer: Optional[Resolution],
        lines: Iterable[LineItem],
        discount: Discount,
        net_override: Optional[Decimal] = None,
    ) -> None:
        """Swap in complete content at once (the API save path)"""
        self.customer = customer
        self.ledger = LineItemLedger(list(lines) + [LineItem()])
        self.discount = discount
        if net_override is None:
            self.net_override = NetAmountOverride()
        else:
            self.net_override = NetAmountOverride.committed_to(net_override)

    def select_customer(self, customer: Optional[Customer]) -> None:
        self.customer = Resolved(customer) if customer is not None else None

    def set_discount(self, discount_type: DiscountType, value: Decimal) -> None:
        self.discount = Discount(type=discount_type, value=value)

    def pricing_input(self) -> PricingInput:
        return PricingInput(
            lines=self.ledger.lines,
            discount=self.discount,
            net_override=self.net_override.effective,
            tax_rate=self.tax_rate,
        )

    def pricing(self) -> PricingSnapshot:
        return recompute(self.pricing_input())

    def begin_save(self) -> FinalizedInvoice:
        """
        Validate for saving

        DRAFT moves to PENDING_SAVE; EDITING stays EDITING until the
        replace is persisted. On validation failure the state is unchanged.
        """
        if self.state not in (InvoiceState.DRAFT, InvoiceState.EDITING):
            raise InvoiceValidationError(f"Cannot save an invoice in state {self.state.value}")
        finalized = finalize_invoice(
            customer=self.customer,
            lines=self.ledger.lines,
            discount=self.discount,
            net_override=self.net_override.effective,
            tax_rate=self.tax_rate,
        )
        if self.state == InvoiceState.DRAFT:
            self.state = InvoiceState.PENDING_SAVE
        return finalized

    def save_failed(self) -> None:
        if self.state == InvoiceState.PENDING_SAVE:
            self.state = InvoiceState.DRAFT

    def mark_persisted(self, invoice_id: int, invoice_number: str, created_at: datetime) -> None:
        if self.invoice_number is None:
            self.invoice_number = invoice_number
        if self.created_at is None:
            self.created_at = created_at
        self.invoice_id = invoice_id
        self.state = InvoiceState.PERSISTED

    def edit(self) -> None:
        if self.state != InvoiceState.PERSISTED:
            raise InvoiceValidationError(f"Cannot edit an invoice in state {self.state.value}")
        self.state = InvoiceState.EDITING

    def mark_deleted(self) -> None:
        if self.state not in (InvoiceState.PERSISTED, InvoiceState.EDITING):
            raise InvoiceValidationError(f"Cannot delete an invoice in state {self.state.value}")
        self.state = InvoiceState.DELETED
