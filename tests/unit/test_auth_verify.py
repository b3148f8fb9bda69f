from datetime import UTC, datetime, timedelta

import jwt
import pytest
from fastapi import HTTPException

from app.auth import verify

SECRET = "test-secret"


def _token(**claims) -> str:
    payload = {
        "sub": "user-123",
        "aud": "authenticated",
        "exp": datetime.now(UTC) + timedelta(minutes=5),
    }
    payload.update(claims)
    return jwt.encode(payload, SECRET, algorithm="HS256")


@pytest.fixture
def jwt_secret(monkeypatch):
    monkeypatch.setattr(verify.settings, "JWT_SECRET", SECRET)


def test_valid_token_returns_claims(jwt_secret):
    claims = verify.verify_jwt(_token())
    assert claims["sub"] == "user-123"


def test_expired_token_is_rejected(jwt_secret):
    with pytest.raises(HTTPException) as exc_info:
        verify.verify_jwt(_token(exp=datetime.now(UTC) - timedelta(minutes=1)))
    assert exc_info.value.status_code == 401


def test_wrong_audience_is_rejected(jwt_secret):
    with pytest.raises(HTTPException):
        verify.verify_jwt(_token(aud="someone-else"))


def test_missing_secret_rejects_everything(monkeypatch):
    monkeypatch.setattr(verify.settings, "JWT_SECRET", None)
    with pytest.raises(HTTPException) as exc_info:
        verify.verify_jwt(_token())
    assert exc_info.value.status_code == 401


def test_current_user_id_requires_sub():
    assert verify.current_user_id({"sub": "user-123"}) == "user-123"
    with pytest.raises(HTTPException):
        verify.current_user_id({})


def test_explicit_settings_take_precedence(make_settings, monkeypatch):
    monkeypatch.setattr(verify.settings, "JWT_SECRET", None)
    config = make_settings(JWT_SECRET=SECRET)

    claims = verify.verify_jwt(_token(), config)

    assert claims["sub"] == "user-123"
