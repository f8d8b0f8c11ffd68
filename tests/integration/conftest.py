from datetime import datetime
from decimal import Decimal

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import src.domain  # noqa: F401  registers table metadata
from src.depends import get_session
from src.domain.customer import Customer
from src.domain.item import Item


@pytest_asyncio.fixture(scope="function")
async def engine():
    """In-memory SQLite database, fresh for every test"""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        echo=False,
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    """Create a new database session for each test"""
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def seeded_catalog(db_session):
    """Two customers and three items"""
    customers = [
        Customer(name="Sharma Traders", address="12 MG Road", city="Pune", created_at=datetime(2024, 4, 1)),
        Customer(name="Gupta & Sons", city="Nagpur", created_at=datetime(2024, 4, 2)),
    ]
    items = [
        Item(code="NB-A5", name="Notebook A5", brand="Classmate", category="Stationery",
             price=Decimal("500"), created_at=datetime(2024, 4, 1)),
        Item(code="8901234567890", name="Gel Pen", brand="Reynolds", category="Stationery",
             price=Decimal("45"), created_at=datetime(2024, 4, 1)),
        Item(code=None, name="Loose Sugar", price=Decimal("42.5"), created_at=datetime(2024, 4, 1)),
    ]
    for entity in customers + items:
        db_session.add(entity)
    await db_session.commit()
    return {"customers": customers, "items": items}


@pytest_asyncio.fixture
async def client(db_session):
    """Create test client with database session override"""
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_session():
        yield db_session

    app.dependency_overrides[get_session] = override_get_session

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
