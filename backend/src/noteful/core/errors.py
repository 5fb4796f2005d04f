"""
Application error hierarchy.

Validators return plain ``FieldError`` results; services turn a failed result
into one of the exceptions below. Each exception carries the HTTP status it
maps to, and the handlers registered in ``main.py`` are the only place that
turns them into responses.

    NotefulError (base)               -> 500
    ├── RequestValidationFailed       -> 400  resource bodies
    ├── UserValidationFailed          -> 422  user registration
    ├── InvalidIdentifierError        -> 400
    ├── NotFoundError                 -> 404  empty body
    ├── ConflictError                 -> 400
    │   ├── DuplicateUsernameError
    │   └── DuplicateTagNameError
    ├── AuthenticationError           -> 401
    └── CascadeDeleteError            -> 500
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class FieldErrorKind(str, Enum):
    """Which field rule failed."""

    MISSING = "missing"
    WRONG_TYPE = "wrong_type"
    UNTRIMMED = "untrimmed"
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"


@dataclass(frozen=True)
class FieldError:
    """A single failed field check."""

    kind: FieldErrorKind
    field: str
    message: str


class NotefulError(Exception):
    """Base exception for all application errors."""

    status_code: int = 500
    default_message: str = "Internal Server Error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class RequestValidationFailed(NotefulError):
    """Malformed folder, note or tag body."""

    status_code = 400

    def __init__(self, error: FieldError):
        self.error = error
        super().__init__(error.message)


class UserValidationFailed(RequestValidationFailed):
    """Malformed user registration body."""

    status_code = 422


class InvalidIdentifierError(NotefulError):
    """Identifier does not have the store's native shape."""

    status_code = 400

    def __init__(self, field: str = "id"):
        self.field = field
        super().__init__(f"The `{field}` is not valid")


class NotFoundError(NotefulError):
    """No resource with that id under the current owner."""

    status_code = 404
    default_message = "Not Found"


class ConflictError(NotefulError):
    """A uniqueness rule was violated."""

    status_code = 400
    default_message = "The resource already exists"


class DuplicateUsernameError(ConflictError):
    default_message = "The username already exists"


class DuplicateTagNameError(ConflictError):
    default_message = "The tag name already exists"


class AuthenticationError(NotefulError):
    status_code = 401
    default_message = "Unauthorized"


class CascadeDeleteError(NotefulError):
    """Deleting a resource or detaching it from notes failed; nothing was changed."""

    status_code = 500
    default_message = "Failed to detach deleted resource from notes"
