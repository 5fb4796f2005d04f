"""Repository layer for data access."""

from .base import OwnedRepository
from .folder_repository import FolderRepository
from .note_repository import NoteRepository
from .tag_repository import TagRepository
from .user_repository import UserRepository

__all__ = [
    "OwnedRepository",
    "FolderRepository",
    "NoteRepository",
    "TagRepository",
    "UserRepository",
]
