"""Tag request and response schemas."""

import uuid
from typing import Any

from pydantic import Field

from .common import CamelModel, RequestPayload


class TagPayload(RequestPayload):
    """Body for creating or renaming a tag."""

    name: Any = Field(default=None, description="Tag name, unique per user")


class TagResponse(CamelModel):
    id: uuid.UUID
    name: str
