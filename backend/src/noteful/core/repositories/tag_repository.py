"""Tag repository for database operations."""

from typing import List
from uuid import UUID

from ..models.tag import Tag
from .base import OwnedRepository


class TagRepository(OwnedRepository[Tag]):
    """Repository for tag database operations.

    ``(name, owner_id)`` is unique, so ``create`` and ``update_owned`` may
    raise ``sqlalchemy.exc.IntegrityError``; callers translate it.
    """

    model = Tag

    async def list_by_name(self, owner_id: UUID) -> List[Tag]:
        """All tags of an owner, sorted by name."""
        return await self.list_owned(owner_id, Tag.name, Tag.id)
