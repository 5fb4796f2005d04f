"""
Note schemas.

Notes reference a folder and tags by id; responses carry the tags populated
as ``{id, name}`` objects.
"""

import uuid
from datetime import datetime
from typing import Any, List, Optional

from pydantic import ConfigDict, Field

from .common import CamelModel, RequestPayload
from .tags import TagResponse


class NotePayload(RequestPayload):
    """Body for creating or updating a note."""

    title: Any = Field(default=None, description="Note title")
    content: Any = Field(default=None, description="Note body")
    folder_id: Any = Field(default=None, description="Id of the containing folder")
    tags: Any = Field(default=None, description="Ordered list of tag ids")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Groceries",
                "content": "milk, eggs",
                "folderId": "6f1c1c5e-8f0e-4d7b-9a55-0b7a0e6f3c11",
                "tags": ["b3f0a8c2-1d4e-4e9a-8f7b-2c6d5e4f3a21"],
            }
        }
    )


class NoteResponse(CamelModel):
    id: uuid.UUID
    title: str
    content: Optional[str] = None
    folder_id: Optional[uuid.UUID] = None
    tags: List[TagResponse] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime
