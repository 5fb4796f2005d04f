"""Tags API endpoints."""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.tags import TagPayload, TagResponse
from ..core.services import TagService
from ..database import get_db_session
from ..middleware.auth import get_current_user_id

router = APIRouter(prefix="/tags", tags=["tags"])


@router.get("", response_model=List[TagResponse])
async def list_tags(
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """List the user's tags sorted by name."""
    return await TagService(session).list(current_user_id)


@router.get("/{tag_id}", response_model=TagResponse)
async def get_tag(
    tag_id: str,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Get a specific tag."""
    return await TagService(session).get(tag_id, current_user_id)


@router.post("", response_model=TagResponse, status_code=status.HTTP_201_CREATED)
async def create_tag(
    request: Request,
    response: Response,
    payload: Optional[TagPayload] = None,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Create a new tag; names are unique per user."""
    tag = await TagService(session).create(current_user_id, payload)
    response.headers["Location"] = f"{request.url.path}/{tag.id}"
    return tag


@router.put("/{tag_id}", response_model=TagResponse)
async def update_tag(
    tag_id: str,
    payload: Optional[TagPayload] = None,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Rename a tag."""
    return await TagService(session).update(tag_id, current_user_id, payload)


@router.delete("/{tag_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_tag(
    tag_id: str,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Delete a tag and remove it from the user's notes."""
    await TagService(session).delete(tag_id, current_user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
