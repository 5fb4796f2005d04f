"""Folders API endpoints."""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.folders import FolderPayload, FolderResponse
from ..core.services import FolderService
from ..database import get_db_session
from ..middleware.auth import get_current_user_id

router = APIRouter(prefix="/folders", tags=["folders"])


@router.get("", response_model=List[FolderResponse])
async def list_folders(
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """List the user's folders sorted by name."""
    return await FolderService(session).list(current_user_id)


@router.get("/{folder_id}", response_model=FolderResponse)
async def get_folder(
    folder_id: str,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Get a specific folder."""
    return await FolderService(session).get(folder_id, current_user_id)


@router.post("", response_model=FolderResponse, status_code=status.HTTP_201_CREATED)
async def create_folder(
    request: Request,
    response: Response,
    payload: Optional[FolderPayload] = None,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Create a new folder."""
    folder = await FolderService(session).create(current_user_id, payload)
    response.headers["Location"] = f"{request.url.path}/{folder.id}"
    return folder


@router.put("/{folder_id}", response_model=FolderResponse)
async def update_folder(
    folder_id: str,
    payload: Optional[FolderPayload] = None,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Rename a folder."""
    return await FolderService(session).update(folder_id, current_user_id, payload)


@router.delete("/{folder_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_folder(
    folder_id: str,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Delete a folder and clear it from the user's notes."""
    await FolderService(session).delete(folder_id, current_user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
