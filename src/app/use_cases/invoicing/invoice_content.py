"""Boundary resolution for create/update commands

Turns the bare ids of a command into Resolved/Unresolved references and
LineItems before the domain validates anything.
"""

from typing import List, Tuple
from libs.result import Result, Return, Error
from src.app.repositories.customer_repository import CustomerRepository
from src.app.repositories.item_repository import ItemRepository
from src.domain.catalog import Catalog
from src.domain.line_item import LineItem
from src.domain.pricing import Discount
from src.domain.resolution import Resolution, resolve
from .dtos import CreateInvoiceCommandDTO

InvoiceContent = Tuple[Resolution, List[LineItem], Discount, Catalog]


async def load_invoice_content(
    command: CreateInvoiceCommandDTO,
    customer_repo: CustomerRepository,
    item_repo: ItemRepository,
) -> Result[InvoiceContent]:
    """
    Resolve customer and items referenced by a command

    Returns:
        Result with (customer resolution, line items, discount, catalog of
        the referenced items), or ITEM_NOT_FOUND when a line points at an
        item that does not exist
    """
    customer = None
    if command.customer_id is not None:
        customer = resolve(
            command.customer_id,
            await customer_repo.get_by_id(command.customer_id),
        )

    item_ids = {line.item_id for line in command.lines}
    items = await item_repo.get_by_ids(item_ids) if item_ids else []
    missing = sorted(item_ids - {item.id for item in items})
    if missing:
        return Return.err(
            Error(
                code="ITEM_NOT_FOUND",
                message=f"Item not found: {', '.join(str(i) for i in missing)}",
                reason="Invoice lines must reference existing catalog items",
            )
        )

    catalog = Catalog(items)
    lines = [
        LineItem(item_ref=line.item_id, quantity=line.quantity, unit_price=line.price)
        for line in command.lines
    ]
    discount = Discount(type=command.discount_type, value=command.discount_value)
    return Return.ok((customer, lines, discount, catalog))
