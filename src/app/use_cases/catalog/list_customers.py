"""ListCustomers Use Case"""

from libs.result import Result, Return
from src.app.repositories.customer_repository import CustomerRepository
from .dtos import ListCustomersResponseDTO
from .mappers import to_customer_response


class ListCustomers:
    """Use case: all customers, for the invoice customer picker"""

    def __init__(self, customer_repo: CustomerRepository):
        self.customer_repo = customer_repo

    async def execute(self) -> Result[ListCustomersResponseDTO]:
        customers = await self.customer_repo.list_all()
        return Return.ok(
            ListCustomersResponseDTO(
                customers=[to_customer_response(customer) for customer in customers]
            )
        )
