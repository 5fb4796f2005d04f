"""
Service interfaces for the Noteful application.

Folders, tags and notes share one access contract (``IResourceService``):
every call receives the owner id explicitly, and every single-resource call
is scoped to that owner.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar
from uuid import UUID

from ..schemas.common import RequestPayload
from ..schemas.users import LoginRequest, TokenResponse, UserPayload, UserResponse

PayloadT = TypeVar("PayloadT", bound=RequestPayload)
ResponseT = TypeVar("ResponseT")


class IResourceService(ABC, Generic[PayloadT, ResponseT]):
    """CRUD contract shared by folders, tags and notes."""

    @abstractmethod
    async def list(self, user_id: UUID) -> List[ResponseT]:
        """All resources of the owner."""

    @abstractmethod
    async def get(self, resource_id: str, user_id: UUID) -> ResponseT:
        """One owned resource, or NotFoundError."""

    @abstractmethod
    async def create(self, user_id: UUID, payload: Optional[PayloadT]) -> ResponseT:
        """Validate and insert."""

    @abstractmethod
    async def update(
        self, resource_id: str, user_id: UUID, payload: Optional[PayloadT]
    ) -> ResponseT:
        """Validate and update an owned resource; never inserts."""

    @abstractmethod
    async def delete(self, resource_id: str, user_id: UUID) -> None:
        """Delete an owned resource, or NotFoundError."""


class IUserService(ABC):
    """User registration."""

    @abstractmethod
    async def register_user(self, payload: Optional[UserPayload]) -> UserResponse:
        """Validate, check uniqueness, hash and store."""


class IAuthService(ABC):
    """Token issuing."""

    @abstractmethod
    async def authenticate_user(self, request: LoginRequest) -> TokenResponse:
        """Check credentials and return an access token."""

    @abstractmethod
    async def refresh_token(self, user_id: UUID) -> TokenResponse:
        """Issue a fresh token for an authenticated user."""
