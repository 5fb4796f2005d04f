"""Folder service implementation."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..errors import CascadeDeleteError, NotFoundError
from ..logging import get_logger
from ..repositories.folder_repository import FolderRepository
from ..repositories.note_repository import NoteRepository
from ..schemas.folders import FolderPayload, FolderResponse
from ..validation import FOLDER_RULES
from .base import OwnedResourceService
from .interfaces import IResourceService

logger = get_logger("services.folders")


class FolderService(OwnedResourceService, IResourceService[FolderPayload, FolderResponse]):
    """Folder service implementation."""

    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.folder_repo = FolderRepository(session)
        self.note_repo = NoteRepository(session)

    async def list(self, user_id: UUID) -> List[FolderResponse]:
        folders = await self.folder_repo.list_by_name(user_id)
        return [FolderResponse.model_validate(folder) for folder in folders]

    async def get(self, resource_id: str, user_id: UUID) -> FolderResponse:
        folder_id = self.parse_id(self.folder_repo, resource_id)
        folder = await self.folder_repo.get_owned(folder_id, user_id)
        if not folder:
            raise NotFoundError()
        return FolderResponse.model_validate(folder)

    async def create(self, user_id: UUID, payload: Optional[FolderPayload]) -> FolderResponse:
        body = self.validated_body(FOLDER_RULES, payload)
        folder = await self.folder_repo.create({"name": body["name"], "owner_id": user_id})
        logger.info("Folder created", extra={"folder_id": str(folder.id), "owner_id": str(user_id)})
        return FolderResponse.model_validate(folder)

    async def update(
        self, resource_id: str, user_id: UUID, payload: Optional[FolderPayload]
    ) -> FolderResponse:
        folder_id = self.parse_id(self.folder_repo, resource_id)
        body = self.validated_body(FOLDER_RULES, payload)
        folder = await self.folder_repo.update_owned(folder_id, user_id, {"name": body["name"]})
        if not folder:
            raise NotFoundError()
        return FolderResponse.model_validate(folder)

    async def delete(self, resource_id: str, user_id: UUID) -> None:
        """Delete the folder and clear it from the owner's notes in one transaction."""
        folder_id = self.parse_id(self.folder_repo, resource_id)

        try:
            deleted = await self.folder_repo.delete_owned(folder_id, user_id, commit=False)
            if deleted:
                detached = await self.note_repo.detach_folder(folder_id, user_id)
                await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(
                "Folder delete rolled back", exc_info=e, extra={"folder_id": str(folder_id)}
            )
            raise CascadeDeleteError() from e

        if not deleted:
            await self.session.rollback()
            raise NotFoundError()

        logger.info(
            "Folder deleted",
            extra={"folder_id": str(folder_id), "owner_id": str(user_id), "notes_detached": detached},
        )
