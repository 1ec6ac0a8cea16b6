# app/core/security.py
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any

import bcrypt
from jose import JWTError, jwt

from app.core.config import get_settings

settings = get_settings()

# bcrypt only looks at the first 72 bytes of the secret
BCRYPT_MAX_BYTES = 72


def hash_password(password: str) -> str:
    """Hash a plaintext password with a fresh bcrypt salt."""
    if not password:
        raise ValueError("Password cannot be empty")

    password_bytes = password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password_bytes, salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Compare a plaintext password against a stored bcrypt hash.

    Malformed hashes count as a mismatch.
    """
    if not plain_password or not hashed_password:
        return False
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES],
            hashed_password.encode("utf-8"),
        )
    except ValueError:
        return False


def token_lifetime() -> timedelta:
    return timedelta(hours=settings.JWT_EXPIRES_HOURS)


def create_access_token(user_id: uuid.UUID, email: str) -> str:
    """
    Issue a signed access token.

    Claims:
      - sub: user id (string UUID)
      - email: normalized email at issue time
      - iat / exp: issue and expiry timestamps
    """
    now = datetime.now(timezone.utc)
    claims = {
        "sub": str(user_id),
        "email": email,
        "iat": now,
        "exp": now + token_lifetime(),
    }
    return jwt.encode(claims, settings.JWT_SECRET, algorithm=settings.JWT_ALG)


def decode_access_token(token: str) -> dict[str, Any] | None:
    """
    Decode and verify an access token.

    Returns the claims, or None when the signature is wrong,
    the token is malformed, or it has expired.
    """
    try:
        return jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALG])
    except JWTError:
        return None
