"""
Service layer interfaces and implementations.
"""

from .interfaces import IAuthService, IResourceService, IUserService

from .auth_service import AuthService
from .folder_service import FolderService
from .note_service import NoteService
from .tag_service import TagService
from .user_service import UserService

__all__ = [
    # Interfaces
    "IResourceService",
    "IUserService",
    "IAuthService",

    # Implementations
    "AuthService",
    "FolderService",
    "NoteService",
    "TagService",
    "UserService",
]
