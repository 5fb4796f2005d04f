# Folder model for grouping notes
import uuid

from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel
from .types import GUID


class Folder(BaseModel):
    """Named folder owned by a single user."""

    __tablename__ = "folders"

    name: Mapped[str] = mapped_column(String, nullable=False)

    owner_id: Mapped[uuid.UUID] = mapped_column(GUID(), nullable=False)

    __table_args__ = (
        Index("idx_folders_owner_name", "owner_id", "name"),
    )

    def __repr__(self) -> str:
        return f"<Folder(name='{self.name}', owner_id={self.owner_id})>"
