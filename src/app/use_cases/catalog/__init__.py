"""Catalog use cases"""
from .create_customer import CreateCustomer
from .list_customers import ListCustomers
from .create_item import CreateItem
from .list_items import ListItems
from .lookup_item import LookupItem
from .dtos import (
    CreateCustomerCommandDTO,
    CustomerResponseDTO,
    ListCustomersResponseDTO,
    CreateItemCommandDTO,
    ItemResponseDTO,
    ListItemsResponseDTO,
)

__all__ = [
    "CreateCustomer",
    "ListCustomers",
    "CreateItem",
    "ListItems",
    "LookupItem",
    "CreateCustomerCommandDTO",
    "CustomerResponseDTO",
    "ListCustomersResponseDTO",
    "CreateItemCommandDTO",
    "ItemResponseDTO",
    "ListItemsResponseDTO",
]
