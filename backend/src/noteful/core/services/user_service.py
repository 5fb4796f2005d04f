"""User registration service."""

from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ...security import hash_password
from ..errors import DuplicateUsernameError, UserValidationFailed
from ..logging import get_logger
from ..repositories.user_repository import UserRepository
from ..schemas.users import UserPayload, UserResponse
from ..validation import USER_RULES, validate_fields
from .interfaces import IUserService

logger = get_logger("services.users")


class UserService(IUserService):
    """Registers users; only the hash of the password is ever stored."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.user_repo = UserRepository(session)

    async def register_user(self, payload: Optional[UserPayload]) -> UserResponse:
        """Register new user."""
        body = payload.provided() if payload else {}
        error = validate_fields(USER_RULES, body)
        if error:
            raise UserValidationFailed(error)

        username = body["username"]
        if await self.user_repo.is_username_taken(username):
            raise DuplicateUsernameError()

        fullname = body.get("fullname")
        user_data = {
            "username": username,
            "password_hash": hash_password(body["password"]),
            "fullname": fullname.strip() if fullname is not None else None,
        }

        # the unique index still guards against a concurrent registration
        try:
            user = await self.user_repo.create_user(user_data)
        except IntegrityError as e:
            await self.session.rollback()
            raise DuplicateUsernameError() from e

        logger.info("User registered", extra={"user_id": str(user.id)})
        return UserResponse.model_validate(user)
