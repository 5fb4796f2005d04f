"""
Pydantic schemas for validating and documenting API requests and responses.
"""

from .common import CamelModel, MessageResponse, RequestPayload
from .folders import FolderPayload, FolderResponse
from .notes import NotePayload, NoteResponse
from .tags import TagPayload, TagResponse
from .users import LoginRequest, TokenResponse, UserPayload, UserResponse

__all__ = [
    "CamelModel",
    "RequestPayload",
    "MessageResponse",
    "FolderPayload",
    "FolderResponse",
    "TagPayload",
    "TagResponse",
    "NotePayload",
    "NoteResponse",
    "UserPayload",
    "UserResponse",
    "LoginRequest",
    "TokenResponse",
]
