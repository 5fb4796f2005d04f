"""
User model for authentication.
"""

from typing import Optional

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel


class User(BaseModel):
    """User account model with username/password auth."""

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(String, unique=True, nullable=False)
    fullname: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # raw passwords are never stored
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<User(username='{self.username}')>"
