"""Item Repository Interface

Defines the contract for catalog item lookups.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional
from src.domain.item import Item


class ItemRepository(ABC):
    """
    Repository interface for catalog Items
    """

    @abstractmethod
    async def create(self, item: Item) -> Item:
        """Create a new item and return it with its generated ID"""
        pass

    @abstractmethod
    async def get_by_id(self, item_id: int) -> Optional[Item]:
        """Retrieve item by ID, None if not found"""
        pass

    @abstractmethod
    async def get_by_ids(self, item_ids: Iterable[int]) -> List[Item]:
        """Retrieve every existing item among item_ids"""
        pass

    @abstractmethod
    async def get_by_code(self, code: str) -> Optional[Item]:
        """Retrieve item by exact, case-insensitive code"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Item]:
        """All items ordered by name"""
        pass
