"""Helpers shared by the owned-resource services."""

from typing import Any, Dict, Iterable, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ..errors import InvalidIdentifierError, RequestValidationFailed
from ..repositories.base import OwnedRepository
from ..schemas.common import RequestPayload
from ..validation import FieldRule, validate_fields


class OwnedResourceService:
    """Identifier and body checks that run before any store access."""

    def __init__(self, session: AsyncSession):
        self.session = session

    @staticmethod
    def parse_id(repo: OwnedRepository, raw: Any, field: str = "id") -> UUID:
        """Turn a client supplied id into a UUID or raise InvalidIdentifierError."""
        if not repo.is_valid_resource_id(raw):
            raise InvalidIdentifierError(field)
        return raw if isinstance(raw, UUID) else UUID(raw)

    @staticmethod
    def validated_body(
        rules: Iterable[FieldRule], payload: Optional[RequestPayload]
    ) -> Dict[str, Any]:
        body = payload.provided() if payload else {}
        error = validate_fields(rules, body)
        if error:
            raise RequestValidationFailed(error)
        return body
