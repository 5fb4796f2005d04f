# Note model for user content
import uuid
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import BaseModel
from .types import GUID

if TYPE_CHECKING:
    from .tag import NoteTag, Tag


class Note(BaseModel):
    """Note with an optional folder and an ordered list of tags."""

    __tablename__ = "notes"

    title: Mapped[str] = mapped_column(String, nullable=False)
    content: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # weak reference, no FK: a dangling folder id is tolerated
    folder_id: Mapped[Optional[uuid.UUID]] = mapped_column(GUID(), nullable=True)

    owner_id: Mapped[uuid.UUID] = mapped_column(GUID(), nullable=False)

    note_tags: Mapped[List["NoteTag"]] = relationship(
        "NoteTag",
        back_populates="note",
        cascade="all, delete-orphan",
        order_by="NoteTag.position",
        lazy="selectin",
    )

    __table_args__ = (
        Index("idx_notes_owner_created", "owner_id", "created_at"),
        Index("idx_notes_folder_id", "folder_id"),
    )

    def __repr__(self) -> str:
        truncated = self.title if len(self.title) <= 30 else (self.title[:30] + "...")
        return f"<Note(title='{truncated}', owner_id={self.owner_id})>"

    def owned_tags(self) -> List["Tag"]:
        """Referenced tags that exist and belong to the note's owner."""
        return [
            note_tag.tag
            for note_tag in self.note_tags
            if note_tag.tag is not None and note_tag.tag.owner_id == self.owner_id
        ]
