"""ListItems Use Case"""

from libs.result import Result, Return
from src.app.repositories.item_repository import ItemRepository
from .dtos import ListItemsResponseDTO
from .mappers import to_item_response


class ListItems:
    """Use case: the full catalog, loaded once per editing session"""

    def __init__(self, item_repo: ItemRepository):
        self.item_repo = item_repo

    async def execute(self) -> Result[ListItemsResponseDTO]:
        items = await self.item_repo.list_all()
        return Return.ok(ListItemsResponseDTO(items=[to_item_response(item) for item in items]))
