"""Invoice Sequence Repository Interface

Atomic counter used by the invoice-number allocator.
"""

from abc import ABC, abstractmethod


class InvoiceSequenceRepository(ABC):
    """
    Repository interface for the invoice sequence counter

    A missing sequence row is seeded from the highest sequence among the
    stored invoice numbers, so switching an existing database over keeps
    numbering continuous even when deletions left gaps.
    """

    @abstractmethod
    async def next_value(self, name: str) -> int:
        """
        Increment and return the sequence under a row lock

        Must run in the same transaction that inserts the invoice.

        Args:
            name: Sequence name

        Returns:
            The newly allocated value (1-based)
        """
        pass

    @abstractmethod
    async def peek_next(self, name: str) -> int:
        """
        Value next_value() would return, without incrementing

        Args:
            name: Sequence name

        Returns:
            Next sequence value (1-based)
        """
        pass
