"""User registration endpoint."""

from typing import Optional

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.users import UserPayload, UserResponse
from ..core.services import UserService
from ..database import get_db_session

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(
    request: Request,
    response: Response,
    payload: Optional[UserPayload] = None,
    session: AsyncSession = Depends(get_db_session),
):
    """Register a new user."""
    user = await UserService(session).register_user(payload)
    response.headers["Location"] = f"{request.url.path}/{user.id}"
    return user
