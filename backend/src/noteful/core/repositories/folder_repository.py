"""Folder repository for database operations."""

from typing import List
from uuid import UUID

from ..models.folder import Folder
from .base import OwnedRepository


class FolderRepository(OwnedRepository[Folder]):
    """Repository for folder database operations."""

    model = Folder

    async def list_by_name(self, owner_id: UUID) -> List[Folder]:
        """All folders of an owner, sorted by name."""
        return await self.list_owned(owner_id, Folder.name, Folder.id)
