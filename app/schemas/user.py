# app/schemas/user.py
import uuid
from datetime import datetime

from sqlmodel import SQLModel

from app.schemas.common import REQUEST_CONFIG, RESPONSE_CONFIG


# ----- Requests -----
#
# Fields are deliberately loose (all optional strings): the validators in
# app.core.validators produce itemized messages for missing/short values.


class UserRegister(SQLModel):
    """Payload for POST /users/register."""

    model_config = REQUEST_CONFIG

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    password: str | None = None


class UserLogin(SQLModel):
    """Payload for POST /users/login."""

    model_config = REQUEST_CONFIG

    email: str | None = None
    password: str | None = None


class UserProfileUpdate(SQLModel):
    """
    Payload for PUT /users/profile.

    Names and email are required; password and phone number only
    change when present.
    """

    model_config = REQUEST_CONFIG

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    password: str | None = None
    phone_number: str | None = None


# ----- Responses -----


class UserRead(SQLModel):
    """Response schema returned to clients. Never carries the password hash."""

    model_config = RESPONSE_CONFIG

    id: uuid.UUID
    first_name: str
    last_name: str
    email: str
    phone_number: str | None = None
    created_at: datetime


class UserResponse(SQLModel):
    model_config = RESPONSE_CONFIG

    message: str
    user: UserRead


class LoginResponse(SQLModel):
    model_config = RESPONSE_CONFIG

    message: str
    token: str
    expires_in: int
    user: UserRead
