"""Unit tests for auth security helpers and dependencies."""

from __future__ import annotations

import jwt
import pytest
from fastapi import HTTPException

from auth import dependencies, security


def test_access_token_round_trip() -> None:
    token = security.build_access_token(username="u1", is_admin=True)
    payload = security.decode_access_token(token)

    assert payload["sub"] == "u1"
    assert payload["is_admin"] is True
    assert payload["type"] == "access"


def test_decode_rejects_garbage() -> None:
    with pytest.raises(security.AuthSecurityError):
        security.decode_access_token("not-a-token")


def test_decode_rejects_empty() -> None:
    with pytest.raises(security.AuthSecurityError, match="empty"):
        security.decode_access_token("  ")


def test_decode_rejects_wrong_token_type() -> None:
    token = jwt.encode(
        {"sub": "u1", "type": "refresh"},
        security.jwt_secret(),
        algorithm=security.jwt_algorithm(),
    )
    with pytest.raises(security.AuthSecurityError, match="not an access token"):
        security.decode_access_token(token)


def test_build_requires_username() -> None:
    with pytest.raises(security.AuthSecurityError):
        security.build_access_token(username="")


@pytest.mark.parametrize("header", [None, "", "Bearer", "Basic abc", "Bearer   "])
def test_extract_bearer_token_rejects_bad_headers(header) -> None:
    with pytest.raises(HTTPException) as exc_info:
        dependencies._extract_bearer_token(header)
    assert exc_info.value.status_code == 401


@pytest.mark.asyncio
async def test_require_admin_rejects_regular_user(user_token: str) -> None:
    user = await dependencies.get_current_user(user_token)
    assert user == {"username": "u2", "is_admin": False}

    with pytest.raises(HTTPException) as exc_info:
        await dependencies.require_admin(user)
    assert exc_info.value.status_code == 401


@pytest.mark.asyncio
async def test_require_admin_accepts_admin(admin_token: str) -> None:
    user = await dependencies.get_current_user(admin_token)
    assert await dependencies.require_admin(user) == {"username": "u1", "is_admin": True}
