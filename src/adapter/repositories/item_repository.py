"""SQLAlchemy Item Repository Implementation"""

from typing import Iterable, List, Optional
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.item_repository import ItemRepository
from src.domain.catalog import normalize_code
from src.domain.item import Item


class SqlAlchemyItemRepository(ItemRepository):
    """SQLAlchemy implementation of ItemRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, item: Item) -> Item:
        self.session.add(item)
        await self.session.flush()
        await self.session.refresh(item)
        return item

    async def get_by_id(self, item_id: int) -> Optional[Item]:
        statement = select(Item).where(Item.id == item_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_by_ids(self, item_ids: Iterable[int]) -> List[Item]:
        ids = list(item_ids)
        if not ids:
            return []
        statement = select(Item).where(Item.id.in_(ids))
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def get_by_code(self, code: str) -> Optional[Item]:
        """
        Exact code match ignoring case and surrounding whitespace

        When several items share a code the oldest one wins, matching the
        in-memory Catalog.
        """
        key = normalize_code(code)
        if not key:
            return None
        statement = (
            select(Item)
            .where(func.lower(Item.code) == key)
            .order_by(Item.id)
            .limit(1)
        )
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def list_all(self) -> List[Item]:
        statement = select(Item).order_by(Item.name, Item.id)
        result = await self.session.execute(statement)
        return list(result.scalars().all())
