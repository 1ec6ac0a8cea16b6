import uuid
from datetime import datetime, timedelta, timezone

from jose import jwt

from app.core.config import get_settings
from app.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


def test_hash_is_salted_and_verifiable():
    first = hash_password("password123")
    second = hash_password("password123")

    assert first != "password123"
    assert first != second
    assert verify_password("password123", first)
    assert verify_password("password123", second)
    assert not verify_password("password124", first)


def test_verify_rejects_malformed_hash():
    assert not verify_password("password123", "not-a-bcrypt-hash")
    assert not verify_password("", hash_password("password123"))


def test_token_round_trip_carries_identity():
    user_id = uuid.uuid4()

    claims = decode_access_token(create_access_token(user_id, "a@b.co"))

    assert claims["sub"] == str(user_id)
    assert claims["email"] == "a@b.co"
    assert claims["exp"] - claims["iat"] == 24 * 3600


def test_expired_token_is_rejected():
    settings = get_settings()
    past = datetime.now(timezone.utc) - timedelta(hours=1)
    token = jwt.encode(
        {"sub": str(uuid.uuid4()), "email": "a@b.co", "exp": past},
        settings.JWT_SECRET,
        algorithm=settings.JWT_ALG,
    )

    assert decode_access_token(token) is None


def test_foreign_signature_is_rejected():
    token = jwt.encode({"sub": str(uuid.uuid4()), "email": "a@b.co"}, "other-secret", algorithm="HS256")

    assert decode_access_token(token) is None
    assert decode_access_token("garbage") is None
