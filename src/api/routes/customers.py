"""Customer API Routes"""

from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.error import ClientError
from src.api.schemas.catalog_request import CustomerRequestSchema
from src.app.use_cases.catalog.dtos import (
    CreateCustomerCommandDTO,
    CustomerResponseDTO,
    ListCustomersResponseDTO,
)
from src.app.use_cases.catalog.create_customer import CreateCustomer
from src.app.use_cases.catalog.list_customers import ListCustomers
from src.adapter.repositories.customer_repository import SqlAlchemyCustomerRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session

router = APIRouter(prefix="/customers", tags=["Customers"])


@router.post(
    "",
    response_model=CustomerResponseDTO,
    status_code=status.HTTP_201_CREATED,
)
async def create_customer(
    request: CustomerRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Register a customer.

    **Request body:**
    - `name` (required): Customer display name
    - `address` (optional): Street address
    - `city` (optional): City
    """
    command = CreateCustomerCommandDTO(
        name=request.name,
        address=request.address,
        city=request.city,
    )

    use_case = CreateCustomer(SqlAlchemyUnitOfWork(session), SqlAlchemyCustomerRepository(session))
    result = await use_case.execute(command)

    if result.is_err():
        if result.error.code.endswith("_FAILED"):
            raise ClientError(result.error, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
        raise ClientError(result.error)

    return result.value


@router.get(
    "",
    response_model=ListCustomersResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def list_customers(session: AsyncSession = Depends(get_session)):
    """All customers, ordered by name."""
    use_case = ListCustomers(SqlAlchemyCustomerRepository(session))
    result = await use_case.execute()
    return result.value
