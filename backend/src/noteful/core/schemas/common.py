"""
Shared schema bits - camelCase base model and error body
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialised with camelCase keys (``folderId``, ``createdAt``)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class RequestPayload(CamelModel):
    """Loosely typed request body.

    Fields are declared as ``Any`` so that presence and type problems reach
    the field validators, which produce the API's own error messages.
    """

    model_config = ConfigDict(extra="ignore")

    def provided(self) -> Dict[str, Any]:
        """Fields the client actually sent, keyed by attribute name."""
        return self.model_dump(exclude_unset=True)


class MessageResponse(BaseModel):
    """Error body returned by the exception handlers."""

    message: str = Field(description="Human readable error message")
