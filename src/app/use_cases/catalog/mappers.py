"""Entity -> DTO conversion for catalog records."""

from src.domain.customer import Customer
from src.domain.item import Item
from .dtos import CustomerResponseDTO, ItemResponseDTO


def to_customer_response(customer: Customer) -> CustomerResponseDTO:
    return CustomerResponseDTO(
        customer_id=customer.id,
        name=customer.name,
        address=customer.address,
        city=customer.city,
        created_at=customer.created_at,
    )


def to_item_response(item: Item) -> ItemResponseDTO:
    return ItemResponseDTO(
        item_id=item.id,
        code=item.code,
        name=item.name,
        brand=item.brand,
        category=item.category,
        price=item.price,
        created_at=item.created_at,
    )
