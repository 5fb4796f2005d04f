"""Unit tests for the application error hierarchy."""

from noteful.core.errors import (
    AuthenticationError,
    CascadeDeleteError,
    ConflictError,
    DuplicateTagNameError,
    DuplicateUsernameError,
    FieldError,
    FieldErrorKind,
    InvalidIdentifierError,
    NotefulError,
    NotFoundError,
    RequestValidationFailed,
    UserValidationFailed,
)


def test_status_codes():
    error = FieldError(FieldErrorKind.MISSING, "name", "Missing 'name' in request body")
    assert RequestValidationFailed(error).status_code == 400
    assert UserValidationFailed(error).status_code == 422
    assert InvalidIdentifierError().status_code == 400
    assert NotFoundError().status_code == 404
    assert DuplicateTagNameError().status_code == 400
    assert AuthenticationError().status_code == 401
    assert CascadeDeleteError().status_code == 500
    assert NotefulError().status_code == 500


def test_validation_failure_keeps_field_error():
    error = FieldError(FieldErrorKind.TOO_SHORT, "password", "too short")
    exc = UserValidationFailed(error)
    assert exc.error is error
    assert exc.message == "too short"
    assert isinstance(exc, RequestValidationFailed)


def test_invalid_identifier_names_the_field():
    assert InvalidIdentifierError().message == "The `id` is not valid"
    assert InvalidIdentifierError("folderId").message == "The `folderId` is not valid"


def test_conflict_messages():
    assert isinstance(DuplicateUsernameError(), ConflictError)
    assert DuplicateUsernameError().message == "The username already exists"
    assert DuplicateTagNameError().message == "The tag name already exists"


def test_default_and_custom_messages():
    assert NotefulError().message == "Internal Server Error"
    assert AuthenticationError("Invalid credentials").message == "Invalid credentials"
    assert str(AuthenticationError()) == "Unauthorized"
