"""Invoice Number Format

    INV-{FY start YY}{FY end YY}-{seq:04d}     e.g. INV-2425-0007

The fiscal year starts in April: April-December belong to the calendar year
itself, January-March to the previous one.
"""

from datetime import date, datetime
from typing import Optional, Union

DEFAULT_PREFIX = "INV"
FISCAL_YEAR_START_MONTH = 4


def fiscal_year_start(at: Union[date, datetime], start_month: int = FISCAL_YEAR_START_MONTH) -> int:
    return at.year if at.month >= start_month else at.year - 1


def fiscal_year_label(at: Union[date, datetime], start_month: int = FISCAL_YEAR_START_MONTH) -> str:
    year = fiscal_year_start(at, start_month)
    return f"{str(year)[-2:]}{str(year + 1)[-2:]}"


def format_invoice_number(
    sequence: int,
    at: Union[date, datetime],
    prefix: str = DEFAULT_PREFIX,
    start_month: int = FISCAL_YEAR_START_MONTH,
) -> str:
    if sequence < 1:
        raise ValueError(f"Invoice sequence must be >= 1, got {sequence}")
    return f"{prefix}-{fiscal_year_label(at, start_month)}-{sequence:04d}"


def parse_sequence(invoice_number: str) -> Optional[int]:
    """Trailing sequence of a stored number; None when the number has no numeric tail"""
    _, _, tail = (invoice_number or "").rpartition("-")
    return int(tail) if tail.isdigit() else None
