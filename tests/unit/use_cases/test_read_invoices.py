"""Unit tests for GetInvoice, ListInvoices and PreviewInvoiceNumber"""

import logging
import pytest
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.invoicing.get_invoice import GetInvoice
from src.app.use_cases.invoicing.list_invoices import ListInvoices
from src.app.use_cases.invoicing.preview_invoice_number import PreviewInvoiceNumber
from src.domain.invoice_line import InvoiceLine


@pytest.mark.asyncio
class TestGetInvoice:

    async def test_returns_stored_snapshot(self, mock_invoice_repo, mock_invoice_line_repo, stored_invoice):
        mock_invoice_repo.get_by_id = AsyncMock(return_value=stored_invoice)
        mock_invoice_line_repo.get_by_invoice_id = AsyncMock(return_value=[
            InvoiceLine(id=1, invoice_id=10, position=0, item_id=3, quantity=2,
                        price=Decimal("500.000000"), line_total=Decimal("1000.000000")),
        ])

        result = await GetInvoice(mock_invoice_repo, mock_invoice_line_repo).execute(10)

        assert result.is_ok()
        assert result.value.total == Decimal("944.000000")
        assert result.value.tax_rate == Decimal("0.180000")
        assert result.value.lines[0].price == Decimal("500.000000")

    async def test_not_found(self, mock_invoice_repo, mock_invoice_line_repo):
        mock_invoice_repo.get_by_id = AsyncMock(return_value=None)

        result = await GetInvoice(mock_invoice_repo, mock_invoice_line_repo).execute(404)

        assert result.error.code == "INVOICE_NOT_FOUND"

    async def test_inconsistent_rounding_is_logged(
        self, mock_invoice_repo, mock_invoice_line_repo, stored_invoice, caplog
    ):
        stored_invoice.rounding_adjustment = Decimal("3.000000")
        mock_invoice_repo.get_by_id = AsyncMock(return_value=stored_invoice)

        with caplog.at_level(logging.ERROR):
            result = await GetInvoice(mock_invoice_repo, mock_invoice_line_repo).execute(10)

        assert result.is_ok()
        assert result.value.rounding_adjustment == Decimal("3.000000")
        assert "INV-2425-0007" in caplog.text


@pytest.mark.asyncio
class TestListInvoices:

    async def test_passes_filters_and_paginates(self, mock_invoice_repo, stored_invoice):
        mock_invoice_repo.list_invoices = AsyncMock(return_value=([stored_invoice], 31))

        result = await ListInvoices(mock_invoice_repo).execute(
            search="  sharma ", customer_id=1, sort_by="total", descending=False, limit=10, offset=20
        )

        assert result.is_ok()
        assert result.value.total == 31
        assert result.value.limit == 10
        assert result.value.offset == 20
        assert result.value.invoices[0].invoice_number == "INV-2425-0007"
        mock_invoice_repo.list_invoices.assert_called_once_with(
            search="sharma", customer_id=1, sort_by="total", descending=False, limit=10, offset=20
        )

    async def test_blank_search_is_ignored(self, mock_invoice_repo):
        mock_invoice_repo.list_invoices = AsyncMock(return_value=([], 0))

        await ListInvoices(mock_invoice_repo).execute(search="   ")

        assert mock_invoice_repo.list_invoices.call_args.kwargs["search"] is None

    async def test_unknown_sort_field(self, mock_invoice_repo):
        mock_invoice_repo.list_invoices = AsyncMock()

        result = await ListInvoices(mock_invoice_repo).execute(sort_by="customer")

        assert result.error.code == "INVALID_SORT_FIELD"
        mock_invoice_repo.list_invoices.assert_not_called()


@pytest.mark.asyncio
class TestPreviewInvoiceNumber:

    async def test_peeks_without_allocating(self):
        allocator = MagicMock()
        allocator.peek = AsyncMock(return_value="INV-2425-0008")
        allocator.allocate = AsyncMock()

        result = await PreviewInvoiceNumber(allocator).execute()

        assert result.value.next_number == "INV-2425-0008"
        allocator.allocate.assert_not_called()
