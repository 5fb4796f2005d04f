# Tag models for organizing notes
import uuid
from typing import TYPE_CHECKING, Optional

from sqlalchemy import ForeignKey, Index, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import BaseModel
from .types import GUID

if TYPE_CHECKING:
    from .note import Note


class Tag(BaseModel):
    """Tag for categorizing notes, unique by name per owner."""

    __tablename__ = "tags"

    name: Mapped[str] = mapped_column(String, nullable=False)
    owner_id: Mapped[uuid.UUID] = mapped_column(GUID(), nullable=False)

    __table_args__ = (
        UniqueConstraint("name", "owner_id", name="uq_tags_name_owner"),
        Index("idx_tags_owner_name", "owner_id", "name"),
    )

    def __repr__(self) -> str:
        return f"<Tag(name='{self.name}')>"


class NoteTag(BaseModel):
    """Ordered reference from a note to a tag.

    ``tag_id`` deliberately has no foreign key: a note may keep pointing at a
    tag that no longer exists until the tag delete detaches it.
    """

    __tablename__ = "note_tags"

    note_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("notes.id", ondelete="CASCADE"), nullable=False
    )
    tag_id: Mapped[uuid.UUID] = mapped_column(GUID(), nullable=False)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    note: Mapped["Note"] = relationship("Note", back_populates="note_tags")
    tag: Mapped[Optional[Tag]] = relationship(
        Tag,
        primaryjoin="foreign(NoteTag.tag_id) == Tag.id",
        viewonly=True,
        lazy="selectin",
    )

    __table_args__ = (
        Index("idx_note_tags_note_id", "note_id"),
        Index("idx_note_tags_tag_id", "tag_id"),
    )

    def __repr__(self) -> str:
        return f"<NoteTag(note_id={self.note_id}, tag_id={self.tag_id})>"
