# app/core/errors.py
import functools
import traceback
from dataclasses import dataclass
from typing import Any

from fastapi import status
from sqlalchemy.exc import InterfaceError, OperationalError


class AppError(Exception):
    """
    Base class for errors that map to a client-facing HTTP response.

    Services raise these; the exception handlers in `app.main`
    turn them into JSON bodies.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, errors: list[str] | None = None):
        super().__init__(message)
        self.message = message
        self.errors = errors


class ValidationError(AppError):
    """400 with an itemized list of problems."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, errors: list[str], message: str = "Validation error"):
        super().__init__(message, errors)


class AuthenticationError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(AppError):
    status_code = status.HTTP_409_CONFLICT


class StorageUnavailable(Exception):
    """
    The persistence layer could not be reached.

    Never rendered directly: read paths swap in fallback data,
    write paths let it bubble up to the generic 500 handler.
    """


def translate_storage_errors(func):
    """
    Repository method decorator: connectivity faults raised by
    SQLAlchemy are re-raised as StorageUnavailable.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (OperationalError, InterfaceError) as exc:
            raise StorageUnavailable(str(exc.orig or exc)) from exc

    return wrapper


@dataclass(frozen=True)
class ErrorDetailPolicy:
    """
    Whether 500 responses may carry exception detail and a stack trace.

    Built once at startup from settings and handed to `error_body`.
    """

    include_detail: bool = False


def error_body(exc: Exception, policy: ErrorDetailPolicy) -> dict[str, Any]:
    """
    Build the JSON body for an error response.

    AppError subclasses keep their own message; everything else is
    reported as a generic internal error.
    """
    if isinstance(exc, AppError):
        body: dict[str, Any] = {
            "status": "fail" if exc.status_code < 500 else "error",
            "message": exc.message,
        }
        if exc.errors is not None:
            body["errors"] = exc.errors
        return body

    body = {"status": "error", "message": "Internal server error"}
    if policy.include_detail:
        body["detail"] = str(exc)
        body["stack"] = traceback.format_exception(type(exc), exc, exc.__traceback__)
    return body
