"""Unit tests for InvoiceNumberAllocator fallbacks and taken-number skipping"""

import logging
import pytest
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

from src.app.services.invoice_number_allocator import InvoiceNumberAllocator, SEQUENCE_NAME


@pytest.fixture
def sequence_repo():
    repo = MagicMock()
    repo.next_value = AsyncMock(return_value=7)
    repo.peek_next = AsyncMock(return_value=8)
    return repo


@pytest.fixture
def invoice_repo():
    repo = MagicMock()
    repo.count = AsyncMock(return_value=41)
    repo.get_by_invoice_number = AsyncMock(return_value=None)
    return repo


@pytest.fixture
def allocator(sequence_repo, invoice_repo):
    return InvoiceNumberAllocator(
        sequence_repo,
        invoice_repo,
        clock=lambda: datetime(2024, 11, 5),
    )


@pytest.mark.asyncio
class TestAllocate:

    async def test_uses_sequence_counter(self, allocator, sequence_repo):
        assert await allocator.allocate() == "INV-2425-0007"
        sequence_repo.next_value.assert_called_once_with(SEQUENCE_NAME)

    async def test_explicit_date_selects_fiscal_year(self, allocator):
        assert await allocator.allocate(at=datetime(2025, 4, 2)) == "INV-2526-0007"

    async def test_falls_back_to_invoice_count(self, allocator, sequence_repo, caplog):
        sequence_repo.next_value = AsyncMock(side_effect=RuntimeError("no table"))

        with caplog.at_level(logging.WARNING):
            number = await allocator.allocate()

        assert number == "INV-2425-0042"
        assert "falling back" in caplog.text

    async def test_falls_back_to_one(self, allocator, sequence_repo, invoice_repo):
        sequence_repo.next_value = AsyncMock(side_effect=RuntimeError("no table"))
        invoice_repo.count = AsyncMock(side_effect=RuntimeError("db down"))

        assert await allocator.allocate() == "INV-2425-0001"

    async def test_custom_prefix(self, sequence_repo, invoice_repo):
        allocator = InvoiceNumberAllocator(
            sequence_repo, invoice_repo, prefix="SI", clock=lambda: datetime(2025, 2, 1)
        )
        assert await allocator.allocate() == "SI-2425-0007"


@pytest.mark.asyncio
class TestPeek:

    async def test_peek_does_not_consume(self, allocator, sequence_repo):
        assert await allocator.peek() == "INV-2425-0008"
        sequence_repo.next_value.assert_not_called()

    async def test_peek_fallback(self, allocator, sequence_repo):
        sequence_repo.peek_next = AsyncMock(side_effect=RuntimeError("no table"))
        assert await allocator.peek() == "INV-2425-0042"


@pytest.mark.asyncio
class TestSkipTakenNumbers:

    async def test_taken_number_draws_again(self, allocator, sequence_repo, invoice_repo, caplog):
        sequence_repo.next_value = AsyncMock(side_effect=[7, 8])
        invoice_repo.get_by_invoice_number = AsyncMock(side_effect=[MagicMock(), None])

        with caplog.at_level(logging.WARNING):
            number = await allocator.allocate()

        assert number == "INV-2425-0008"
        assert sequence_repo.next_value.call_count == 2
        assert "INV-2425-0007 is already taken" in caplog.text

    async def test_counter_fallback_steps_past_taken_numbers(self, allocator, sequence_repo, invoice_repo):
        sequence_repo.next_value = AsyncMock(side_effect=RuntimeError("no table"))
        invoice_repo.get_by_invoice_number = AsyncMock(side_effect=[MagicMock(), MagicMock(), None])

        assert await allocator.allocate() == "INV-2425-0044"

    async def test_free_number_checked_once(self, allocator, invoice_repo):
        await allocator.allocate()

        invoice_repo.get_by_invoice_number.assert_called_once_with("INV-2425-0007")
