"""
Database models for the Noteful application.

Models included:
    - User: account with username/password authentication
    - Folder: named folder owned by a user
    - Tag: per-owner unique label
    - Note: note content with an optional folder and ordered tags
    - NoteTag: ordered note -> tag reference
"""

from .base import BaseModel
from .folder import Folder
from .note import Note
from .tag import NoteTag, Tag
from .user import User

__all__ = [
    "BaseModel",
    "User",
    "Folder",
    "Note",
    "Tag",
    "NoteTag",
]
