"""Note repository for database operations."""

import logging
from typing import List, Optional, Sequence
from uuid import UUID

from sqlalchemy import delete, select, update

from ..models.note import Note
from ..models.tag import NoteTag
from .base import OwnedRepository

logger = logging.getLogger(__name__)


def escape_like(term: str, escape: str = "\\") -> str:
    """Escape LIKE wildcards so the term matches literally."""
    return (
        term.replace(escape, escape * 2)
        .replace("%", f"{escape}%")
        .replace("_", f"{escape}_")
    )


class NoteRepository(OwnedRepository[Note]):
    """Repository for note database operations."""

    model = Note

    async def create_note(self, note_data: dict, tag_ids: Sequence[UUID] = ()) -> Note:
        """Create a note together with its ordered tag references."""
        note = Note(
            **note_data,
            note_tags=[
                NoteTag(tag_id=tag_id, position=position)
                for position, tag_id in enumerate(tag_ids)
            ],
        )
        self.session.add(note)
        await self.session.commit()
        return await self.get_owned(note.id, note.owner_id)

    async def search(
        self,
        owner_id: UUID,
        search_term: Optional[str] = None,
        folder_id: Optional[UUID] = None,
        tag_id: Optional[UUID] = None,
    ) -> List[Note]:
        """Owner's notes in creation order, narrowed by any given filters (AND)."""
        stmt = select(Note).where(Note.owner_id == owner_id)

        if search_term:
            stmt = stmt.where(Note.title.ilike(f"%{escape_like(search_term)}%", escape="\\"))
        if folder_id:
            stmt = stmt.where(Note.folder_id == folder_id)
        if tag_id:
            stmt = stmt.where(
                Note.id.in_(select(NoteTag.note_id).where(NoteTag.tag_id == tag_id))
            )

        stmt = stmt.order_by(Note.created_at, Note.id)
        result = await self.session.execute(stmt)
        return list(result.scalars())

    async def replace_tags(self, note_id: UUID, tag_ids: Sequence[UUID]) -> None:
        """Swap the note's tag references for ``tag_ids``; caller commits."""
        await self.session.execute(
            delete(NoteTag)
            .where(NoteTag.note_id == note_id)
            .execution_options(synchronize_session=False)
        )
        self.session.add_all(
            NoteTag(note_id=note_id, tag_id=tag_id, position=position)
            for position, tag_id in enumerate(tag_ids)
        )
        await self.session.flush()

    async def delete_owned(self, resource_id: UUID, owner_id: UUID, commit: bool = True) -> bool:
        # tag references go first; SQLite does not enforce ON DELETE CASCADE by default
        await self.session.execute(
            delete(NoteTag)
            .where(
                NoteTag.note_id.in_(
                    select(Note.id).where(self._owned(resource_id, owner_id))
                )
            )
            .execution_options(synchronize_session=False)
        )
        return await super().delete_owned(resource_id, owner_id, commit=commit)

    async def detach_folder(self, folder_id: UUID, owner_id: UUID) -> int:
        """Clear ``folder_id`` on every owned note filed under the folder; caller commits."""
        result = await self.session.execute(
            update(Note)
            .where(Note.folder_id == folder_id, Note.owner_id == owner_id)
            .values(folder_id=None)
            .execution_options(synchronize_session=False)
        )
        logger.debug("Detached folder %s from %s notes", folder_id, result.rowcount)
        return result.rowcount

    async def detach_tag(self, tag_id: UUID, owner_id: UUID) -> int:
        """Remove the tag from every owned note referencing it; caller commits."""
        result = await self.session.execute(
            delete(NoteTag)
            .where(
                NoteTag.tag_id == tag_id,
                NoteTag.note_id.in_(select(Note.id).where(Note.owner_id == owner_id)),
            )
            .execution_options(synchronize_session=False)
        )
        logger.debug("Detached tag %s from %s notes", tag_id, result.rowcount)
        return result.rowcount
