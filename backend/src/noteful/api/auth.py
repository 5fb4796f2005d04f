"""Authentication API endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.users import LoginRequest, TokenResponse
from ..core.services import AuthService
from ..database import get_db_session
from ..middleware.auth import get_current_user_id

router = APIRouter(tags=["authentication"])


@router.post("/login", response_model=TokenResponse)
async def login(request: LoginRequest, session: AsyncSession = Depends(get_db_session)):
    """Exchange username and password for an access token."""
    return await AuthService(session).authenticate_user(request)


@router.post("/refresh", response_model=TokenResponse)
async def refresh_token(
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Exchange a valid token for one with a fresh expiry."""
    return await AuthService(session).refresh_token(current_user_id)
