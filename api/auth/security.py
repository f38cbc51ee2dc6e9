"""
Auth security helpers (JWT access tokens).
"""

from __future__ import annotations

import os
import time
from typing import Any

import jwt


class AuthSecurityError(RuntimeError):
    pass


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def jwt_secret() -> str:
    # Local default keeps development simple.
    # In production, set JWT_SECRET in environment.
    return os.environ.get("JWT_SECRET", "dev-change-this-secret").strip() or "dev-change-this-secret"


def jwt_algorithm() -> str:
    return os.environ.get("JWT_ALG", "HS256").strip() or "HS256"


def access_token_expire_minutes() -> int:
    return _env_int("ACCESS_TOKEN_EXPIRE_MIN", 60)


def now_epoch_s() -> int:
    return int(time.time())


def build_access_token(*, username: str, is_admin: bool = False) -> str:
    username = (username or "").strip()
    if not username:
        raise AuthSecurityError("Username is empty.")

    issued_at = now_epoch_s()
    expires_at = issued_at + (access_token_expire_minutes() * 60)

    payload = {
        "sub": username,
        "is_admin": bool(is_admin),
        "type": "access",
        "iat": issued_at,
        "exp": expires_at,
    }
    return jwt.encode(payload, jwt_secret(), algorithm=jwt_algorithm())


def decode_access_token(token: str) -> dict[str, Any]:
    raw = (token or "").strip()
    if not raw:
        raise AuthSecurityError("Access token is empty.")

    try:
        payload = jwt.decode(raw, jwt_secret(), algorithms=[jwt_algorithm()])
    except jwt.InvalidTokenError as exc:
        raise AuthSecurityError("Invalid access token.") from exc

    token_type = str(payload.get("type") or "").strip().lower()
    if token_type != "access":
        raise AuthSecurityError("Token is not an access token.")

    if not str(payload.get("sub") or "").strip():
        raise AuthSecurityError("Invalid access token subject.")

    return payload
