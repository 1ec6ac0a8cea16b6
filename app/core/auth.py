# app/core/auth.py
import logging
import uuid
from dataclasses import dataclass

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlmodel import Session

from app.core.errors import AuthenticationError, StorageUnavailable
from app.core.security import decode_access_token
from app.database import get_session
from app.repositories.user_repo import UserRepository

logger = logging.getLogger(__name__)

# HTTP Bearer scheme:
# - auto_error=False => a missing Authorization header does not raise the
#   stock 403, so we can answer with our own 401 body.
bearer_scheme = HTTPBearer(auto_error=False)

user_repo = UserRepository()


@dataclass(frozen=True)
class CurrentUser:
    """Identity resolved from a verified bearer token."""

    id: uuid.UUID
    email: str


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    session: Session = Depends(get_session),
) -> CurrentUser:
    """
    Resolve the caller from `Authorization: Bearer <token>`.

    Flow:
      1. No header => 401.
      2. Decode JWT (signature + exp) => extract 'sub' and 'email'.
      3. Look the user up; a deleted account => 401.
      4. If the database is unreachable, trust the signed claims so that
         read endpoints can still answer with fallback data.

    Raises:
        AuthenticationError(401): missing, malformed, expired or orphaned token.
    """
    if credentials is None:
        raise AuthenticationError("Not authorized, no token")

    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise AuthenticationError("Not authorized, token failed")

    try:
        user_id = uuid.UUID(str(payload.get("sub")))
    except ValueError:
        raise AuthenticationError("Not authorized, token failed")

    email = payload.get("email")
    if not email:
        raise AuthenticationError("Not authorized, token failed")

    try:
        user = user_repo.get_by_id(session, user_id)
    except StorageUnavailable as exc:
        logger.warning("User lookup unavailable, trusting token claims: %s", exc)
        return CurrentUser(id=user_id, email=email)

    if user is None:
        raise AuthenticationError("User not found")

    return CurrentUser(id=user.id, email=user.email)
