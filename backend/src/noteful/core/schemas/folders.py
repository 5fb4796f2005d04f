"""Folder request and response schemas."""

import uuid
from typing import Any

from pydantic import Field

from .common import CamelModel, RequestPayload


class FolderPayload(RequestPayload):
    """Body for creating or renaming a folder."""

    name: Any = Field(default=None, description="Folder name")


class FolderResponse(CamelModel):
    id: uuid.UUID
    name: str
