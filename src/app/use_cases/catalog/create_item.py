"""CreateItem Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.item_repository import ItemRepository
from src.domain.item import Item
from src.domain.money import quantize_storage
from .dtos import CreateItemCommandDTO, ItemResponseDTO
from .mappers import to_item_response

logger = logging.getLogger(__name__)


class CreateItem:
    """
    Use Case: Add an item to the catalog

    Business Rules:
    1. Name is required
    2. Price must be >= 0 (enforced by the DTO)
    3. A non-blank code must not match an existing code, ignoring case
    """

    def __init__(self, uow: UnitOfWork, item_repo: ItemRepository):
        self.uow = uow
        self.item_repo = item_repo

    async def execute(self, command: CreateItemCommandDTO) -> Result[ItemResponseDTO]:
        name = command.name.strip()
        if not name:
            return Return.err(
                Error(
                    code="VALIDATION_ERROR",
                    message="Item name is required",
                    reason="Name is blank",
                )
            )

        code = (command.code or "").strip() or None

        try:
            # Step 1: Reject duplicate codes
            if code and await self.item_repo.get_by_code(code):
                return Return.err(
                    Error(
                        code="ITEM_CODE_ALREADY_EXISTS",
                        message=f"An item with code '{code}' already exists",
                        reason="Item codes must be unique",
                    )
                )

            # Step 2: Persist
            item = await self.item_repo.create(
                Item(
                    code=code,
                    name=name,
                    brand=(command.brand or "").strip() or None,
                    category=(command.category or "").strip() or None,
                    price=quantize_storage(command.price),
                )
            )
            await self.uow.commit()
            logger.info(f"Created item {item.id} ({item.name}) at {item.price}")

            return Return.ok(to_item_response(item))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="CREATE_ITEM_FAILED",
                    message="Failed to create item",
                    reason=str(e),
                )
            )
