"""
Field and identifier validation.

Validators never raise: they return ``None`` when the input is acceptable and
a ``FieldError`` describing the first failed rule otherwise. Callers decide
which exception (and therefore which status code) a failure becomes.
"""

import re
import uuid
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Sequence

from .errors import FieldError, FieldErrorKind

# canonical 8-4-4-4-12 hex form, the only shape the store accepts
UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE
)


@dataclass(frozen=True)
class FieldRule:
    """Requirements for one body field."""

    name: str
    required: bool = False
    string: bool = True
    trimmed: bool = False
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    # when False an empty string is present-but-short rather than missing
    empty_is_missing: bool = True


def _is_missing(rule: FieldRule, payload: Mapping[str, Any]) -> bool:
    value = payload.get(rule.name)
    if value is None:
        return True
    return rule.empty_is_missing and value == ""


def check_required(rule: FieldRule, payload: Mapping[str, Any]) -> Optional[FieldError]:
    if rule.required and _is_missing(rule, payload):
        return FieldError(
            FieldErrorKind.MISSING, rule.name, f"Missing '{rule.name}' in request body"
        )
    return None


def check_type(rule: FieldRule, payload: Mapping[str, Any]) -> Optional[FieldError]:
    value = payload.get(rule.name)
    if rule.string and value is not None and not isinstance(value, str):
        return FieldError(
            FieldErrorKind.WRONG_TYPE, rule.name, f"Field: '{rule.name}' must be type String"
        )
    return None


def check_trimmed(rule: FieldRule, payload: Mapping[str, Any]) -> Optional[FieldError]:
    value = payload.get(rule.name)
    if rule.trimmed and isinstance(value, str) and value != value.strip():
        return FieldError(
            FieldErrorKind.UNTRIMMED,
            rule.name,
            f"Field: '{rule.name}' cannot start or end with whitespace",
        )
    return None


def check_length(rule: FieldRule, payload: Mapping[str, Any]) -> Optional[FieldError]:
    value = payload.get(rule.name)
    if not isinstance(value, str):
        return None
    if rule.min_length is not None and len(value) < rule.min_length:
        return FieldError(
            FieldErrorKind.TOO_SHORT,
            rule.name,
            f"Field: '{rule.name}' must be at least {rule.min_length} characters long",
        )
    if rule.max_length is not None and len(value) > rule.max_length:
        return FieldError(
            FieldErrorKind.TOO_LONG,
            rule.name,
            f"Field: '{rule.name}' must be at most {rule.max_length} characters long",
        )
    return None


# Order matters: first failure wins.
CHECKS = (check_required, check_type, check_trimmed, check_length)


def validate_field(rule: FieldRule, payload: Mapping[str, Any]) -> Optional[FieldError]:
    """Run every check for a single field."""
    for check in CHECKS:
        error = check(rule, payload)
        if error:
            return error
    return None


def validate_fields(
    rules: Iterable[FieldRule], payload: Mapping[str, Any]
) -> Optional[FieldError]:
    """Validate several fields rule by rule.

    All fields are checked for presence before any is checked for type, and
    so on, so a missing field is reported ahead of a badly typed one.
    """
    rules = list(rules)
    for check in CHECKS:
        for rule in rules:
            error = check(rule, payload)
            if error:
                return error
    return None


def is_valid_uuid(value: Any) -> bool:
    """Check that ``value`` is a UUID, or a string in canonical UUID form."""
    if isinstance(value, uuid.UUID):
        return True
    return isinstance(value, str) and bool(UUID_PATTERN.match(value))


# Body rules shared by the routes

FOLDER_RULES = (FieldRule("name", required=True),)

TAG_RULES = (FieldRule("name", required=True),)

NOTE_RULES = (
    FieldRule("title", required=True),
    FieldRule("content"),
)

USER_RULES = (
    FieldRule("username", required=True, trimmed=True, min_length=1, empty_is_missing=False),
    FieldRule(
        "password",
        required=True,
        trimmed=True,
        min_length=8,
        max_length=72,
        empty_is_missing=False,
    ),
    FieldRule("fullname"),
)


def describe_request_errors(errors: Sequence[Mapping[str, Any]]) -> FieldError:
    """Reduce the framework's body parsing errors to one ``FieldError``.

    Only the first error is reported, like the field validators above.
    """
    first = errors[0] if errors else {}
    kind = first.get("type", "")
    loc = [part for part in first.get("loc", ()) if part != "body"]
    field = str(loc[0]) if loc else "body"

    if kind == "json_invalid":
        return FieldError(FieldErrorKind.WRONG_TYPE, "body", "Request body is not valid JSON")
    if field == "body":
        return FieldError(
            FieldErrorKind.WRONG_TYPE, "body", "Request body must be a JSON object"
        )
    if kind == "missing":
        return FieldError(FieldErrorKind.MISSING, field, f"Missing '{field}' in request body")
    if kind == "string_type":
        return FieldError(
            FieldErrorKind.WRONG_TYPE, field, f"Field: '{field}' must be type String"
        )
    return FieldError(FieldErrorKind.WRONG_TYPE, field, f"Field: '{field}' is not valid")
