"""Unit tests for DeleteInvoice use case"""

import pytest
from unittest.mock import AsyncMock

from src.app.use_cases.invoicing.delete_invoice import DeleteInvoice


@pytest.fixture
def delete_invoice_use_case(mock_uow, mock_invoice_repo, mock_invoice_line_repo):
    return DeleteInvoice(mock_uow, mock_invoice_repo, mock_invoice_line_repo)


@pytest.mark.asyncio
class TestDeleteInvoice:

    async def test_delete_removes_lines_and_invoice(
        self, delete_invoice_use_case, mock_invoice_repo, mock_invoice_line_repo, mock_uow, stored_invoice
    ):
        mock_invoice_repo.get_by_id = AsyncMock(return_value=stored_invoice)

        result = await delete_invoice_use_case.execute(10)

        assert result.is_ok()
        assert result.value.invoice_id == 10
        assert result.value.invoice_number == "INV-2425-0007"
        mock_invoice_line_repo.delete_for_invoice.assert_called_once_with(10)
        mock_invoice_repo.delete.assert_called_once_with(stored_invoice)
        mock_uow.commit.assert_called_once()

    async def test_delete_missing_invoice(self, delete_invoice_use_case, mock_invoice_repo, mock_uow):
        mock_invoice_repo.get_by_id = AsyncMock(return_value=None)

        result = await delete_invoice_use_case.execute(404)

        assert result.error.code == "INVOICE_NOT_FOUND"
        mock_invoice_repo.delete.assert_not_called()
        mock_uow.commit.assert_not_called()

    async def test_failure_rolls_back(
        self, delete_invoice_use_case, mock_invoice_repo, mock_uow, stored_invoice
    ):
        mock_invoice_repo.get_by_id = AsyncMock(return_value=stored_invoice)
        mock_invoice_repo.delete = AsyncMock(side_effect=RuntimeError("locked"))

        result = await delete_invoice_use_case.execute(10)

        assert result.error.code == "DELETE_INVOICE_FAILED"
        mock_uow.rollback.assert_called_once()
