import pytest
from datetime import datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.domain.customer import Customer
from src.domain.item import Item


@pytest.fixture
def mock_uow():
    """Mock unit of work"""
    uow = MagicMock()
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow


@pytest.fixture
def customer():
    return Customer(id=1, name="Sharma Traders", address="12 MG Road", city="Pune",
                    created_at=datetime(2024, 4, 1))


@pytest.fixture
def notebook():
    return Item(id=3, code="NB-A5", name="Notebook A5", brand="Classmate",
                category="Stationery", price=Decimal("500"), created_at=datetime(2024, 4, 1))


@pytest.fixture
def pen():
    return Item(id=5, code="8901234567890", name="Gel Pen", brand="Reynolds",
                category="Stationery", price=Decimal("45"), created_at=datetime(2024, 4, 1))
