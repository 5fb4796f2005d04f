"""Tag service implementation."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..errors import CascadeDeleteError, DuplicateTagNameError, NotFoundError
from ..logging import get_logger
from ..repositories.note_repository import NoteRepository
from ..repositories.tag_repository import TagRepository
from ..schemas.tags import TagPayload, TagResponse
from ..validation import TAG_RULES
from .base import OwnedResourceService
from .interfaces import IResourceService

logger = get_logger("services.tags")


class TagService(OwnedResourceService, IResourceService[TagPayload, TagResponse]):
    """Tag service implementation."""

    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.tag_repo = TagRepository(session)
        self.note_repo = NoteRepository(session)

    async def list(self, user_id: UUID) -> List[TagResponse]:
        tags = await self.tag_repo.list_by_name(user_id)
        return [TagResponse.model_validate(tag) for tag in tags]

    async def get(self, resource_id: str, user_id: UUID) -> TagResponse:
        tag_id = self.parse_id(self.tag_repo, resource_id)
        tag = await self.tag_repo.get_owned(tag_id, user_id)
        if not tag:
            raise NotFoundError()
        return TagResponse.model_validate(tag)

    async def create(self, user_id: UUID, payload: Optional[TagPayload]) -> TagResponse:
        body = self.validated_body(TAG_RULES, payload)
        try:
            tag = await self.tag_repo.create({"name": body["name"], "owner_id": user_id})
        except IntegrityError as e:
            await self.session.rollback()
            logger.warning("Duplicate tag name", extra={"owner_id": str(user_id)})
            raise DuplicateTagNameError() from e
        return TagResponse.model_validate(tag)

    async def update(
        self, resource_id: str, user_id: UUID, payload: Optional[TagPayload]
    ) -> TagResponse:
        tag_id = self.parse_id(self.tag_repo, resource_id)
        body = self.validated_body(TAG_RULES, payload)
        try:
            tag = await self.tag_repo.update_owned(tag_id, user_id, {"name": body["name"]})
        except IntegrityError as e:
            await self.session.rollback()
            logger.warning("Duplicate tag name", extra={"owner_id": str(user_id)})
            raise DuplicateTagNameError() from e
        if not tag:
            raise NotFoundError()
        return TagResponse.model_validate(tag)

    async def delete(self, resource_id: str, user_id: UUID) -> None:
        """Delete the tag and drop it from the owner's notes in one transaction."""
        tag_id = self.parse_id(self.tag_repo, resource_id)

        try:
            deleted = await self.tag_repo.delete_owned(tag_id, user_id, commit=False)
            if deleted:
                detached = await self.note_repo.detach_tag(tag_id, user_id)
                await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error("Tag delete rolled back", exc_info=e, extra={"tag_id": str(tag_id)})
            raise CascadeDeleteError() from e

        if not deleted:
            await self.session.rollback()
            raise NotFoundError()

        logger.info(
            "Tag deleted",
            extra={"tag_id": str(tag_id), "owner_id": str(user_id), "notes_detached": detached},
        )
