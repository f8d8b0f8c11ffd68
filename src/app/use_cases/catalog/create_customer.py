"""CreateCustomer Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.customer_repository import CustomerRepository
from src.domain.customer import Customer
from .dtos import CreateCustomerCommandDTO, CustomerResponseDTO
from .mappers import to_customer_response

logger = logging.getLogger(__name__)


class CreateCustomer:
    """
    Use Case: Register a customer that invoices can be billed to

    Blank names are rejected after trimming.
    """

    def __init__(self, uow: UnitOfWork, customer_repo: CustomerRepository):
        self.uow = uow
        self.customer_repo = customer_repo

    async def execute(self, command: CreateCustomerCommandDTO) -> Result[CustomerResponseDTO]:
        name = command.name.strip()
        if not name:
            return Return.err(
                Error(
                    code="VALIDATION_ERROR",
                    message="Customer name is required",
                    reason="Name is blank",
                )
            )

        try:
            customer = await self.customer_repo.create(
                Customer(
                    name=name,
                    address=(command.address or "").strip() or None,
                    city=(command.city or "").strip() or None,
                )
            )
            await self.uow.commit()
            logger.info(f"Created customer {customer.id} ({customer.name})")

            return Return.ok(to_customer_response(customer))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="CREATE_CUSTOMER_FAILED",
                    message="Failed to create customer",
                    reason=str(e),
                )
            )
