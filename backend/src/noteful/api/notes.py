"""Notes API endpoints."""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.notes import NotePayload, NoteResponse
from ..core.services import NoteService
from ..database import get_db_session
from ..middleware.auth import get_current_user_id

router = APIRouter(prefix="/notes", tags=["notes"])


@router.get("", response_model=List[NoteResponse])
async def list_notes(
    search_term: Optional[str] = Query(None, alias="searchTerm"),
    folder_id: Optional[str] = Query(None, alias="folderId"),
    tag_id: Optional[str] = Query(None, alias="tagId"),
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """List user notes, optionally filtered by title, folder and tag."""
    return await NoteService(session).list(
        current_user_id,
        search_term=search_term,
        folder_id=folder_id,
        tag_id=tag_id,
    )


@router.get("/{note_id}", response_model=NoteResponse)
async def get_note(
    note_id: str,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Get a specific note."""
    return await NoteService(session).get(note_id, current_user_id)


@router.post("", response_model=NoteResponse, status_code=status.HTTP_201_CREATED)
async def create_note(
    request: Request,
    response: Response,
    payload: Optional[NotePayload] = None,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Create a new note."""
    note = await NoteService(session).create(current_user_id, payload)
    response.headers["Location"] = f"{request.url.path}/{note.id}"
    return note


@router.put("/{note_id}", response_model=NoteResponse)
async def update_note(
    note_id: str,
    payload: Optional[NotePayload] = None,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Update a note."""
    return await NoteService(session).update(note_id, current_user_id, payload)


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_note(
    note_id: str,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Delete a note."""
    await NoteService(session).delete(note_id, current_user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
