"""Unit of Work Interface

Transaction boundary for use cases: repositories flush, the use case commits
or rolls back.
"""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """
    Abstract transaction boundary
    """

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    @abstractmethod
    async def commit(self):
        """Commit all pending changes"""
        pass

    @abstractmethod
    async def rollback(self):
        """Discard all pending changes"""
        pass
