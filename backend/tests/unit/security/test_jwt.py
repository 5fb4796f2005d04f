"""Unit tests for security/jwt.py"""

import uuid
from datetime import datetime, timedelta, timezone

from jose import jwt

from noteful.security import jwt as jwt_module
from noteful.security.jwt import (
    create_access_token,
    decode_access_token,
    get_user_id_from_token,
)


class DummySettings:
    secret_key = "test-secret"
    algorithm = "HS256"
    access_token_expire_minutes = 30


def test_create_and_decode_access_token(monkeypatch):
    monkeypatch.setattr(jwt_module, "get_settings", lambda: DummySettings())

    sub = str(uuid.uuid4())
    token = create_access_token({"sub": sub}, expires_delta=timedelta(minutes=5))
    assert isinstance(token, str)

    payload = decode_access_token(token)
    assert payload is not None
    assert payload.get("sub") == sub
    assert payload.get("type") == "access"
    assert payload.get("jti")


def test_default_expiry_uses_settings(monkeypatch):
    monkeypatch.setattr(jwt_module, "get_settings", lambda: DummySettings())

    token = create_access_token({"sub": str(uuid.uuid4())})
    claims = jwt.get_unverified_claims(token)
    expires = datetime.fromtimestamp(claims["exp"], tz=timezone.utc)
    remaining = expires - datetime.now(timezone.utc)
    assert timedelta(minutes=29) < remaining <= timedelta(minutes=30)


def test_decode_access_token_invalid_signature(monkeypatch):
    monkeypatch.setattr(jwt_module, "get_settings", lambda: DummySettings())

    forged = jwt.encode({"sub": "x", "type": "access"}, "other-secret", algorithm="HS256")
    assert decode_access_token(forged) is None


def test_decode_expired_token(monkeypatch):
    monkeypatch.setattr(jwt_module, "get_settings", lambda: DummySettings())

    token = create_access_token({"sub": str(uuid.uuid4())}, expires_delta=timedelta(seconds=-5))
    assert decode_access_token(token) is None


def test_decode_rejects_wrong_token_type(monkeypatch):
    monkeypatch.setattr(jwt_module, "get_settings", lambda: DummySettings())

    token = jwt.encode(
        {"sub": str(uuid.uuid4()), "type": "refresh"}, DummySettings.secret_key, algorithm="HS256"
    )
    assert decode_access_token(token) is None


def test_decode_garbage():
    assert decode_access_token("not-a-jwt") is None


def test_get_user_id_from_token(monkeypatch):
    monkeypatch.setattr(jwt_module, "get_settings", lambda: DummySettings())

    uid = uuid.uuid4()
    token = create_access_token({"sub": str(uid)})
    assert get_user_id_from_token(token) == uid


def test_get_user_id_from_token_without_sub(monkeypatch):
    monkeypatch.setattr(jwt_module, "get_settings", lambda: DummySettings())

    assert get_user_id_from_token(create_access_token({})) is None


def test_get_user_id_from_token_bad_sub(monkeypatch):
    monkeypatch.setattr(jwt_module, "get_settings", lambda: DummySettings())

    assert get_user_id_from_token(create_access_token({"sub": "not-a-uuid"})) is None
