"""Customer Repository Interface"""

from abc import ABC, abstractmethod
from typing import List, Optional
from src.domain.customer import Customer


class CustomerRepository(ABC):
    """
    Repository interface for Customers
    """

    @abstractmethod
    async def create(self, customer: Customer) -> Customer:
        """Create a new customer and return it with its generated ID"""
        pass

    @abstractmethod
    async def get_by_id(self, customer_id: int) -> Optional[Customer]:
        """Retrieve customer by ID, None if not found"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Customer]:
        """All customers ordered by name"""
        pass
