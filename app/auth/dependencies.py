"""FastAPI dependency resolving the calling user from a bearer token."""

from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.auth.tokens import InvalidTokenError, decode_access_token
from app.db import get_db
from app.infra.logging_config import get_logger
from app.models.user import User
from app.services.user_service import UserService

logger = get_logger("auth")

bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Reject the request unless it carries a valid token for a known user."""
    if credentials is None or not credentials.credentials:
        raise _unauthorized("Not authenticated")
    try:
        user_id = decode_access_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning("Rejected bearer token: %s", e)
        raise _unauthorized("Could not validate credentials") from e

    user = UserService(db).get_user(user_id)
    if user is None:
        raise _unauthorized("Could not validate credentials")
    return user
