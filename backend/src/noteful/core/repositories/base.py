"""Shared data access for resources that belong to a single owner."""

from typing import Any, ClassVar, Generic, List, Optional, Type, TypeVar
from uuid import UUID

from sqlalchemy import and_, delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.base import BaseModel
from ..validation import is_valid_uuid

ModelT = TypeVar("ModelT", bound=BaseModel)


class OwnedRepository(Generic[ModelT]):
    """Repository whose lookups are always scoped to ``(id, owner_id)``.

    There is deliberately no ``get_by_id``: a resource owned by someone else
    behaves exactly like one that does not exist.
    """

    model: ClassVar[Type[BaseModel]]

    def __init__(self, session: AsyncSession):
        self.session = session

    def is_valid_resource_id(self, value: Any) -> bool:
        """Whether ``value`` has this store's identifier shape."""
        return is_valid_uuid(value)

    def _owned(self, resource_id: UUID, owner_id: UUID):
        return and_(self.model.id == resource_id, self.model.owner_id == owner_id)

    async def create(self, data: dict) -> ModelT:
        """Insert a new row and return it refreshed."""
        instance = self.model(**data)
        self.session.add(instance)
        await self.session.commit()
        await self.session.refresh(instance)
        return instance

    async def list_owned(self, owner_id: UUID, *order_by) -> List[ModelT]:
        stmt = select(self.model).where(self.model.owner_id == owner_id)
        if order_by:
            stmt = stmt.order_by(*order_by)
        result = await self.session.execute(stmt)
        return list(result.scalars())

    async def get_owned(self, resource_id: UUID, owner_id: UUID) -> Optional[ModelT]:
        stmt = (
            select(self.model)
            .where(self._owned(resource_id, owner_id))
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update_owned(
        self, resource_id: UUID, owner_id: UUID, values: dict, commit: bool = True
    ) -> Optional[ModelT]:
        """Update in place; returns None when nothing matched (no upsert)."""
        stmt = (
            update(self.model)
            .where(self._owned(resource_id, owner_id))
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        if result.rowcount == 0:
            return None

        if commit:
            await self.session.commit()
        return await self.get_owned(resource_id, owner_id)

    async def delete_owned(self, resource_id: UUID, owner_id: UUID, commit: bool = True) -> bool:
        """Delete if owned; with ``commit=False`` the caller ends the transaction."""
        stmt = (
            delete(self.model)
            .where(self._owned(resource_id, owner_id))
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        if commit:
            await self.session.commit()
        return result.rowcount > 0
