"""Authentication service implementation."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ...security import create_access_token, verify_password
from ..errors import AuthenticationError
from ..logging import get_logger
from ..models.user import User
from ..repositories.user_repository import UserRepository
from ..schemas.users import LoginRequest, TokenResponse
from .interfaces import IAuthService

logger = get_logger("services.auth")


class AuthService(IAuthService):
    """Authentication service implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.user_repo = UserRepository(session)

    async def authenticate_user(self, request: LoginRequest) -> TokenResponse:
        """Login user and return a JWT."""
        user = await self.user_repo.get_by_username(request.username)
        if not user or not verify_password(request.password, user.password_hash):
            logger.warning("Failed login", extra={"username": request.username})
            raise AuthenticationError("Invalid credentials")

        return self._issue_token(user)

    async def refresh_token(self, user_id: UUID) -> TokenResponse:
        """Issue a new token for a still existing user."""
        user = await self.user_repo.get_by_id(user_id)
        if not user:
            raise AuthenticationError()

        return self._issue_token(user)

    def _issue_token(self, user: User) -> TokenResponse:
        token = create_access_token(data={"sub": str(user.id), "username": user.username})
        return TokenResponse(auth_token=token)
