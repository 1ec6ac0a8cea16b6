# app/routers/users.py
from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.core.auth import CurrentUser, get_current_user
from app.core.validators import (
    ensure_valid,
    validate_login,
    validate_profile_update,
    validate_registration,
)
from app.database import get_session
from app.repositories.user_repo import UserRepository
from app.schemas.user import (
    LoginResponse,
    UserLogin,
    UserProfileUpdate,
    UserRead,
    UserRegister,
    UserResponse,
)
from app.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["Users"])

repo = UserRepository()
service = UserService(repo)


# -------- Validated payloads --------
#
# Declared as dependencies so they run before the auth gate.


def registration_payload(payload: UserRegister) -> UserRegister:
    data = payload.model_dump(by_alias=True, exclude_unset=True)
    ensure_valid(validate_registration, data)
    return UserRegister.model_validate(data)


def login_payload(payload: UserLogin) -> UserLogin:
    data = payload.model_dump(by_alias=True, exclude_unset=True)
    ensure_valid(validate_login, data)
    return UserLogin.model_validate(data)


def profile_payload(payload: UserProfileUpdate) -> UserProfileUpdate:
    data = payload.model_dump(by_alias=True, exclude_unset=True)
    ensure_valid(validate_profile_update, data)
    return UserProfileUpdate.model_validate(data)


# -------- Endpoints --------


@router.post(
    "/register",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
def register(
    payload: UserRegister = Depends(registration_payload),
    session: Session = Depends(get_session),
):
    """
    Create an account.

    - 400 when a field is missing or malformed.
    - 409 when the (normalized) email is already registered.
    """
    user = service.register(session, payload)
    return UserResponse(
        message="User registered successfully",
        user=UserRead.model_validate(user),
    )


@router.post("/login", response_model=LoginResponse)
def login(
    payload: UserLogin = Depends(login_payload),
    session: Session = Depends(get_session),
):
    """
    Exchange email + password for a bearer token.

    Wrong email and wrong password produce the same 401.
    """
    token, expires_in, user = service.login(session, payload)
    return LoginResponse(
        message="Login successful",
        token=token,
        expires_in=expires_in,
        user=UserRead.model_validate(user),
    )


@router.put("/profile", response_model=UserResponse)
def update_profile(
    payload: UserProfileUpdate = Depends(profile_payload),
    session: Session = Depends(get_session),
    current_user: CurrentUser = Depends(get_current_user),
):
    """
    Update the caller's own profile.

    Auth:
      - Requires a valid bearer token; the user id comes from the token.
    """
    user = service.update_profile(session, current_user, payload)
    return UserResponse(
        message="Profile updated successfully",
        user=UserRead.model_validate(user),
    )
