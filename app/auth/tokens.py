"""Bearer token encoding and verification (JWT, ``sub`` = user id)."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt

from app.config import get_settings


class InvalidTokenError(Exception):
    """Raised when a bearer token cannot be verified."""


def create_access_token(
    user_id: UUID, expires_delta: Optional[timedelta] = None
) -> str:
    """Create a signed access token for ``user_id``."""
    settings = get_settings()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    payload = {"sub": str(user_id), "exp": expire}
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> UUID:
    """Return the user id carried by ``token``. Raises InvalidTokenError."""
    settings = get_settings()
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
    except JWTError as e:
        raise InvalidTokenError(str(e)) from e

    subject = payload.get("sub")
    if not subject:
        raise InvalidTokenError("Token has no subject")
    try:
        return UUID(str(subject))
    except ValueError as e:
        raise InvalidTokenError("Token subject is not a user id") from e
