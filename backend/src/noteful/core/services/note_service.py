"""Note service implementation."""

from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ..errors import (
    FieldError,
    FieldErrorKind,
    InvalidIdentifierError,
    NotFoundError,
    RequestValidationFailed,
)
from ..logging import get_logger
from ..models.note import Note
from ..repositories.note_repository import NoteRepository
from ..schemas.notes import NotePayload, NoteResponse
from ..schemas.tags import TagResponse
from ..validation import NOTE_RULES
from .base import OwnedResourceService
from .interfaces import IResourceService

logger = get_logger("services.notes")


class NoteService(OwnedResourceService, IResourceService[NotePayload, NoteResponse]):
    """Note service implementation."""

    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self.note_repo = NoteRepository(session)

    async def list(
        self,
        user_id: UUID,
        search_term: Optional[str] = None,
        folder_id: Optional[str] = None,
        tag_id: Optional[str] = None,
    ) -> List[NoteResponse]:
        """Owner's notes in creation order, optionally filtered.

        A malformed ``folder_id`` or ``tag_id`` can never match a stored
        reference, so it short-circuits to an empty result.
        """
        for raw in (folder_id, tag_id):
            if raw and not self.note_repo.is_valid_resource_id(raw):
                return []

        notes = await self.note_repo.search(
            user_id,
            search_term=search_term or None,
            folder_id=UUID(folder_id) if folder_id else None,
            tag_id=UUID(tag_id) if tag_id else None,
        )
        return [self._note_to_response(note) for note in notes]

    async def get(self, resource_id: str, user_id: UUID) -> NoteResponse:
        note_id = self.parse_id(self.note_repo, resource_id)
        note = await self.note_repo.get_owned(note_id, user_id)
        if not note:
            raise NotFoundError()
        return self._note_to_response(note)

    async def create(self, user_id: UUID, payload: Optional[NotePayload]) -> NoteResponse:
        body = self.validated_body(NOTE_RULES, payload)
        values = self._column_values(body)
        tag_ids = self._tag_ids(body.get("tags"))

        note = await self.note_repo.create_note(
            {
                "title": values["title"],
                "content": values.get("content"),
                "folder_id": values.get("folder_id"),
                "owner_id": user_id,
            },
            tag_ids,
        )
        logger.info("Note created", extra={"note_id": str(note.id), "owner_id": str(user_id)})
        return self._note_to_response(note)

    async def update(
        self, resource_id: str, user_id: UUID, payload: Optional[NotePayload]
    ) -> NoteResponse:
        """Replace the fields present in the body; absent optional fields are kept."""
        note_id = self.parse_id(self.note_repo, resource_id)
        body = self.validated_body(NOTE_RULES, payload)
        values = self._column_values(body)
        tag_ids = self._tag_ids(body["tags"]) if "tags" in body else None

        note = await self.note_repo.update_owned(note_id, user_id, values, commit=False)
        if not note:
            raise NotFoundError()

        if tag_ids is not None:
            await self.note_repo.replace_tags(note_id, tag_ids)
        await self.session.commit()

        note = await self.note_repo.get_owned(note_id, user_id)
        return self._note_to_response(note)

    async def delete(self, resource_id: str, user_id: UUID) -> None:
        note_id = self.parse_id(self.note_repo, resource_id)
        if not await self.note_repo.delete_owned(note_id, user_id):
            raise NotFoundError()
        logger.info("Note deleted", extra={"note_id": str(note_id), "owner_id": str(user_id)})

    def _column_values(self, body: Dict[str, Any]) -> Dict[str, Any]:
        """Title, content and folder id from an already validated body."""
        values: Dict[str, Any] = {"title": body["title"]}
        if "content" in body:
            values["content"] = body["content"]
        if "folder_id" in body:
            folder_id = body["folder_id"]
            # null or "" files the note nowhere
            values["folder_id"] = (
                self.parse_id(self.note_repo, folder_id, field="folderId") if folder_id else None
            )
        return values

    def _tag_ids(self, tags: Any) -> List[UUID]:
        """Validate tag references, keeping first-seen order without duplicates."""
        if tags is None:
            return []
        if not isinstance(tags, list):
            raise RequestValidationFailed(
                FieldError(FieldErrorKind.WRONG_TYPE, "tags", "Field: 'tags' must be type Array")
            )

        tag_ids: List[UUID] = []
        for raw in tags:
            if not self.note_repo.is_valid_resource_id(raw):
                raise InvalidIdentifierError()
            tag_id = raw if isinstance(raw, UUID) else UUID(raw)
            if tag_id not in tag_ids:
                tag_ids.append(tag_id)
        return tag_ids

    def _note_to_response(self, note: Note) -> NoteResponse:
        return NoteResponse(
            id=note.id,
            title=note.title,
            content=note.content,
            folder_id=note.folder_id,
            tags=[TagResponse.model_validate(tag) for tag in note.owned_tags()],
            created_at=note.created_at,
            updated_at=note.updated_at,
        )
