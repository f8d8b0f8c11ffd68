"""Unit tests for invoice number formatting"""

import pytest
from datetime import date, datetime
from src.domain.invoice_number import (
    fiscal_year_label,
    fiscal_year_start,
    format_invoice_number,
    parse_sequence,
)


class TestFiscalYear:

    @pytest.mark.parametrize("at,expected", [
        (date(2024, 4, 1), 2024),
        (date(2024, 11, 5), 2024),
        (date(2025, 2, 14), 2024),
        (date(2025, 3, 31), 2024),
        (date(2025, 4, 1), 2025),
    ])
    def test_fiscal_year_starts_in_april(self, at, expected):
        assert fiscal_year_start(at) == expected

    def test_label(self):
        assert fiscal_year_label(date(2024, 11, 5)) == "2425"

    def test_century_rollover(self):
        assert fiscal_year_label(date(2099, 6, 1)) == "9900"

    def test_custom_start_month(self):
        assert fiscal_year_label(date(2024, 2, 1), start_month=1) == "2425"


class TestFormatInvoiceNumber:

    def test_november_seventh_invoice(self):
        assert format_invoice_number(7, datetime(2024, 11, 5)) == "INV-2425-0007"

    def test_february_next_invoice_same_fiscal_year(self):
        assert format_invoice_number(8, datetime(2025, 2, 14)) == "INV-2425-0008"

    def test_sequence_wider_than_padding(self):
        assert format_invoice_number(12345, date(2024, 5, 1)) == "INV-2425-12345"

    def test_prefix(self):
        assert format_invoice_number(1, date(2024, 5, 1), prefix="SI") == "SI-2425-0001"

    def test_sequence_must_be_positive(self):
        with pytest.raises(ValueError):
            format_invoice_number(0, date(2024, 5, 1))


class TestParseSequence:

    @pytest.mark.parametrize("number,expected", [
        ("INV-2425-0007", 7),
        ("INV-2526-12345", 12345),
        ("SI-2425-0001", 1),
        ("INV-2425-DRAFT", None),
        ("legacy", None),
        ("", None),
    ])
    def test_trailing_sequence(self, number, expected):
        assert parse_sequence(number) == expected
