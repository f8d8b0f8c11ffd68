from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.repositories import (
    SqlAlchemyInvoiceRepository,
    SqlAlchemyInvoiceSequenceRepository,
)
from src.app.services.invoice_number_allocator import InvoiceNumberAllocator

engine = create_async_engine(ApplicationConfig.DB_URI, echo=ApplicationConfig.DB_ECHO, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


def build_allocator(session: AsyncSession) -> InvoiceNumberAllocator:
    return InvoiceNumberAllocator(
        sequence_repo=SqlAlchemyInvoiceSequenceRepository(session),
        invoice_repo=SqlAlchemyInvoiceRepository(session),
        prefix=ApplicationConfig.INVOICE_NUMBER_PREFIX,
        fiscal_year_start_month=ApplicationConfig.FISCAL_YEAR_START_MONTH,
    )
