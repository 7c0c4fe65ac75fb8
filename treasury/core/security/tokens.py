from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from treasury.core.config import settings


class AuthTokenValidationError(Exception):
    """Raised when a bearer token is missing claims, expired or badly signed."""


def issue_access_token(*, user_id: str, username: str, role: str) -> str:
    now = datetime.now(timezone.utc)
    payload = {
        "sub": user_id,
        "username": username,
        "role": role,
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(hours=settings.JWT_EXPIRES_HOURS)).timestamp()),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> dict[str, Any]:
    try:
        claims = jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError as exc:
        raise AuthTokenValidationError("Token expired.") from exc
    except jwt.PyJWTError as exc:
        raise AuthTokenValidationError("Invalid token.") from exc

    if not str(claims.get("sub") or "").strip():
        raise AuthTokenValidationError("Token subject is missing.")
    return claims
