"""LookupItem Use Case

Barcode lookup for a single invoice row.
"""

from libs.result import Result, Return, Error
from src.app.repositories.item_repository import ItemRepository
from src.domain.catalog import normalize_code
from .dtos import ItemResponseDTO
from .mappers import to_item_response


class LookupItem:
    """
    Use Case: Resolve a typed code to a catalog item

    Matching is exact after trimming, ignoring case. A miss is an
    ordinary outcome (ITEM_NOT_FOUND); the row stays unresolved.
    """

    def __init__(self, item_repo: ItemRepository):
        self.item_repo = item_repo

    async def execute(self, code: str) -> Result[ItemResponseDTO]:
        if not normalize_code(code):
            return Return.err(
                Error(
                    code="VALIDATION_ERROR",
                    message="Item code is required",
                    reason="Code is blank",
                )
            )

        item = await self.item_repo.get_by_code(code.strip())
        if not item:
            return Return.err(
                Error(
                    code="ITEM_NOT_FOUND",
                    message=f"No item with code '{code.strip()}'",
                    reason="Code does not match any catalog item",
                )
            )

        return Return.ok(to_item_response(item))
