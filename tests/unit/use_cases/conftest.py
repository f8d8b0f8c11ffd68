import pytest
from datetime import datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.domain.invoice import Invoice
from src.domain.pricing import DiscountType


def persist_invoice(invoice: Invoice) -> Invoice:
    """Stand-in for flush + refresh: assigns id and timestamps"""
    if invoice.id is None:
        invoice.id = 10
    invoice.created_at = invoice.created_at or datetime(2024, 11, 5, 10, 0)
    invoice.updated_at = invoice.updated_at or invoice.created_at
    return invoice


def persist_lines(invoice_id, lines):
    for number, line in enumerate(lines, start=1):
        line.id = number
        line.invoice_id = invoice_id
    return lines


@pytest.fixture
def mock_invoice_repo():
    repo = MagicMock()
    repo.create = AsyncMock(side_effect=persist_invoice)
    repo.update = AsyncMock(side_effect=persist_invoice)
    repo.get_by_invoice_number = AsyncMock(return_value=None)
    repo.delete = AsyncMock()
    return repo


@pytest.fixture
def mock_invoice_line_repo():
    repo = MagicMock()
    repo.replace_for_invoice = AsyncMock(side_effect=persist_lines)
    repo.get_by_invoice_id = AsyncMock(return_value=[])
    repo.delete_for_invoice = AsyncMock()
    return repo


@pytest.fixture
def mock_customer_repo(customer):
    repo = MagicMock()
    repo.get_by_id = AsyncMock(side_effect=lambda customer_id: customer if customer_id == customer.id else None)
    return repo


@pytest.fixture
def mock_item_repo(notebook, pen):
    items = {notebook.id: notebook, pen.id: pen}
    repo = MagicMock()
    repo.get_by_ids = AsyncMock(side_effect=lambda ids: [items[i] for i in ids if i in items])
    repo.get_by_code = AsyncMock(return_value=None)
    return repo


@pytest.fixture
def stored_invoice():
    return Invoice(
        id=10,
        invoice_number="INV-2425-0007",
        customer_id=1,
        subtotal=Decimal("1000.000000"),
        discount_type=DiscountType.PERCENT,
        discount_value=Decimal("20.000000"),
        discount_amount=Decimal("200.000000"),
        taxable_amount=Decimal("800.000000"),
        tax_rate=Decimal("0.180000"),
        tax_amount=Decimal("144.000000"),
        rounding_adjustment=Decimal("0.000000"),
        total=Decimal("944.000000"),
        created_at=datetime(2024, 11, 5, 10, 0),
        updated_at=datetime(2024, 11, 5, 10, 0),
    )
