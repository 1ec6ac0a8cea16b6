# app/services/user_service.py
import logging
from datetime import datetime, timezone

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from app.core.auth import CurrentUser
from app.core.errors import AuthenticationError, ConflictError, NotFoundError
from app.core.security import (
    create_access_token,
    hash_password,
    token_lifetime,
    verify_password,
)
from app.models.user import User
from app.repositories.user_repo import UserRepository
from app.schemas.user import UserLogin, UserProfileUpdate, UserRegister

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


class UserService:
    """
    Business logic for User.

    Responsibilities:
      - hash passwords explicitly (create always, update only when given)
      - enforce unique emails
      - issue access tokens on login
      - map domain outcomes to typed errors
    """

    def __init__(self, repo: UserRepository):
        self.repo = repo

    # ----- Persistence helpers -----

    def create_user(self, session: Session, payload: UserRegister) -> User:
        """Insert a user; the plaintext password is always hashed."""
        user = User(
            first_name=payload.first_name,
            last_name=payload.last_name,
            email=payload.email,
            password_hash=hash_password(payload.password),
        )
        try:
            return self.repo.create(session, user)
        except IntegrityError:
            # Lost a race against a concurrent registration
            session.rollback()
            raise ConflictError("A user with this email already exists")

    def update_user(
        self,
        session: Session,
        user: User,
        patch: UserProfileUpdate,
    ) -> User:
        """
        Apply a validated profile patch.

        The password is re-hashed only when the patch carries one.
        """
        user.first_name = patch.first_name
        user.last_name = patch.last_name
        user.email = patch.email
        if "phone_number" in patch.model_fields_set:
            user.phone_number = patch.phone_number
        if patch.password is not None:
            user.password_hash = hash_password(patch.password)
        user.updated_at = datetime.now(timezone.utc)
        try:
            return self.repo.update(session, user)
        except IntegrityError:
            session.rollback()
            raise ConflictError("Email is already in use by another user")

    # ----- Use cases -----

    def register(self, session: Session, payload: UserRegister) -> User:
        if self.repo.get_by_email(session, payload.email) is not None:
            raise ConflictError("A user with this email already exists")

        user = self.create_user(session, payload)
        logger.info("Registered user %s", user.id)
        return user

    def login(self, session: Session, payload: UserLogin) -> tuple[str, int, User]:
        """
        Check credentials and issue a token.

        Unknown email and wrong password are one failure with one
        message, so callers cannot probe which accounts exist.

        Returns:
            (token, lifetime in seconds, user)
        """
        user = self.repo.get_by_email(session, payload.email)
        valid = user is not None and verify_password(payload.password, user.password_hash)
        if not valid:
            raise AuthenticationError(INVALID_CREDENTIALS)

        token = create_access_token(user.id, user.email)
        return token, int(token_lifetime().total_seconds()), user

    def update_profile(
        self,
        session: Session,
        current_user: CurrentUser,
        payload: UserProfileUpdate,
    ) -> User:
        user = self.repo.get_by_id(session, current_user.id)
        if user is None:
            raise NotFoundError("User not found")

        if payload.email != user.email:
            other = self.repo.get_by_email(session, payload.email)
            if other is not None and other.id != user.id:
                raise ConflictError("Email is already in use by another user")

        return self.update_user(session, user, payload)
