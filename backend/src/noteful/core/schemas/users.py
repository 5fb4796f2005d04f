"""
User and authentication schemas.

Passwords and hashes only ever travel inbound; no response model has a field
for either.
"""

import uuid
from typing import Any, Optional

from pydantic import BaseModel, Field

from .common import CamelModel, RequestPayload


class UserPayload(RequestPayload):
    """Registration body; checked by the user field rules, not by pydantic."""

    username: Any = Field(default=None, description="Unique username")
    password: Any = Field(default=None, description="8 to 72 characters")
    fullname: Any = Field(default=None, description="Full name (optional)")


class UserResponse(CamelModel):
    id: uuid.UUID
    username: str
    fullname: Optional[str] = None


class LoginRequest(BaseModel):
    """User login request schema."""

    username: str = Field(description="Username")
    password: str = Field(description="User password")


class TokenResponse(CamelModel):
    """Signed access token, serialised as ``{"authToken": ...}``."""

    auth_token: str
