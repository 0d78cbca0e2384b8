"""Bearer Authentication — verifies JWTs and exposes the caller's user id.

Invariants:
    - No Authorization header → AuthenticationError("No token provided")
    - Bad signature, expired token or missing sub claim → AuthenticationError("Invalid token")
    - The returned user id is the token's sub claim, unvalidated in shape
      (controllers enforce the user-id format)
"""

import logging

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from trisog.config import get_settings
from trisog.core.domain_types import UserId
from trisog.core.errors import AuthenticationError

logger = logging.getLogger(__name__)

http_bearer = HTTPBearer(auto_error=False)


def decode_token(token: str) -> UserId:
    settings = get_settings()
    options = {"verify_aud": settings.auth_audience is not None}
    try:
        payload = jwt.decode(
            token,
            settings.auth_secret_key,
            algorithms=[settings.auth_algorithm],
            audience=settings.auth_audience,
            options=options,
        )
    except JWTError as e:
        logger.info(f"Rejected bearer token: {e}")
        raise AuthenticationError("Invalid token")
    subject = payload.get("sub")
    if not isinstance(subject, str) or not subject:
        raise AuthenticationError("Invalid token")
    return UserId(subject)


async def get_current_user_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(http_bearer),
) -> UserId:
    """FastAPI dependency for protected routes."""
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("No token provided")
    return decode_token(credentials.credentials)
