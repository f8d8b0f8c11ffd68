"""Catalog Item API Routes"""

from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.error import ClientError
from src.api.schemas.catalog_request import ItemRequestSchema
from src.app.use_cases.catalog.dtos import (
    CreateItemCommandDTO,
    ItemResponseDTO,
    ListItemsResponseDTO,
)
from src.app.use_cases.catalog.create_item import CreateItem
from src.app.use_cases.catalog.list_items import ListItems
from src.app.use_cases.catalog.lookup_item import LookupItem
from src.adapter.repositories.item_repository import SqlAlchemyItemRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session

router = APIRouter(prefix="/items", tags=["Items"])


@router.post(
    "",
    response_model=ItemResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={
        409: {
            "description": "Code already used by another item",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "ITEM_CODE_ALREADY_EXISTS",
                            "message": "An item with code '8901234567890' already exists"
                        }
                    }
                }
            }
        }
    }
)
async def create_item(
    request: ItemRequestSchema,
    session: AsyncSession = Depends(get_session)
):
    """
    Add an item to the catalog.

    **Request body:**
    - `code` (optional): Barcode, unique ignoring case
    - `name` (required): Item name
    - `brand`, `category` (optional)
    - `price` (required): Unit price, >= 0
    """
    command = CreateItemCommandDTO(
        code=request.code,
        name=request.name,
        brand=request.brand,
        category=request.category,
        price=request.price,
    )

    use_case = CreateItem(SqlAlchemyUnitOfWork(session), SqlAlchemyItemRepository(session))
    result = await use_case.execute(command)

    if result.is_err():
        if result.error.code == "ITEM_CODE_ALREADY_EXISTS":
            raise ClientError(result.error, status_code=status.HTTP_409_CONFLICT)
        if result.error.code.endswith("_FAILED"):
            raise ClientError(result.error, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
        raise ClientError(result.error)

    return result.value


@router.get(
    "",
    response_model=ListItemsResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def list_items(session: AsyncSession = Depends(get_session)):
    """The whole catalog, ordered by name."""
    use_case = ListItems(SqlAlchemyItemRepository(session))
    result = await use_case.execute()
    return result.value


@router.get(
    "/lookup",
    response_model=ItemResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def lookup_item(
    code: str = Query(..., description="Barcode typed into an invoice row"),
    session: AsyncSession = Depends(get_session)
):
    """
    Resolve a barcode to a catalog item (exact match, ignoring case).

    **Returns:**
    - 200: Matching item
    - 404: No item has this code
    """
    use_case = LookupItem(SqlAlchemyItemRepository(session))
    result = await use_case.execute(code)

    if result.is_err():
        if result.error.code == "ITEM_NOT_FOUND":
            raise ClientError(result.error, status_code=status.HTTP_404_NOT_FOUND)
        raise ClientError(result.error)

    return result.value
