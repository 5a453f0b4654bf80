"""
Bearer token handling for the API boundary.

Tokens are issued elsewhere; this module only verifies them and extracts the
caller id (the ``sub`` claim, a user UUID). ``create_access_token`` is kept
for scripts and tests that need a valid token.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
from uuid import UUID

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from pomodoro.core.config import get_settings

bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def create_access_token(user_id: UUID, expires_in: Optional[int] = None) -> str:
    settings = get_settings()
    now = datetime.now(timezone.utc)
    payload: Dict[str, Any] = {
        "sub": str(user_id),
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(seconds=expires_in or settings.jwt_expires_in)).timestamp()),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_user_id(token: str) -> UUID:
    """
    Verify a bearer token and return the user id it was issued for.

    Raises:
        HTTPException: 401 if the token is expired, malformed or has no usable subject
    """
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except jwt.ExpiredSignatureError:
        raise _unauthorized("Token has expired")
    except jwt.InvalidTokenError:
        raise _unauthorized("Invalid token")

    try:
        return UUID(str(payload.get("sub")))
    except ValueError:
        raise _unauthorized("Invalid token subject")


async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> UUID:
    """FastAPI dependency yielding the authenticated caller id."""
    if credentials is None:
        raise _unauthorized("Not authenticated")
    return decode_user_id(credentials.credentials)
