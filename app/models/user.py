# app/models/user.py
import uuid
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class User(SQLModel, table=True):
    """
    Registered customer account.

    Identity:
      - id: UUID, also the `sub` claim of issued access tokens
      - email: unique, stored trimmed and lower-cased

    The password is only ever stored as a bcrypt hash; read schemas
    never include `password_hash`.
    """

    __tablename__ = "users"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    first_name: str = Field(max_length=50)
    last_name: str = Field(max_length=50)

    email: str = Field(
        unique=True,
        index=True,
        max_length=255,
        description="Normalized (lower-case) login email",
    )

    password_hash: str = Field(description="bcrypt hash, never the plaintext")

    phone_number: str | None = Field(default=None, max_length=20)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )

    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Last profile change (UTC)",
    )
