"""Identity exceptions and error codes.

Every failure that crosses the storage or handler boundary is an
ApplicationError. The presentation layer maps the error code to a
transport status and keeps the message for server-side logs only.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for API clients.

    These codes are part of the public API contract. Should not be changed.
    """

    USER_ALREADY_EXISTS = "USER_ALREADY_EXISTS"
    USER_DOES_NOT_EXIST = "USER_DOES_NOT_EXIST"
    INCORRECT_PASSWORD = "INCORRECT_PASSWORD"
    DATABASE_ERROR = "DATABASE_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    APPLICATION_ERROR = "APPLICATION_ERROR"


class ApplicationError(Exception):
    """Base exception and catch-all kind for identity failures.

    Attributes
    ----------
    message
        Human-readable error message (logged, never sent to clients)
    code
        Stable error code for programmatic handling
    details
        Optional additional context (logged but not exposed to users)
    """

    def __init__(
        self,
        message: str = "Unexpected application error",
        code: ErrorCode = ErrorCode.APPLICATION_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r})"
        )


class UserAlreadyExistsError(ApplicationError):
    """Raised when a user with the same email address is already stored."""

    def __init__(self, email_address: str | None = None):
        self.email_address = email_address
        message = "User already exists"
        if email_address:
            message = f"User already exists: {email_address}"
        super().__init__(message, ErrorCode.USER_ALREADY_EXISTS)


class UserDoesNotExistError(ApplicationError):
    """Raised when no user matches the requested email address."""

    def __init__(self, email_address: str | None = None):
        self.email_address = email_address
        message = "User does not exist"
        if email_address:
            message = f"User does not exist: {email_address}"
        super().__init__(message, ErrorCode.USER_DOES_NOT_EXIST)


class IncorrectPasswordError(ApplicationError):
    """Raised when a password candidate does not match the stored hash."""

    def __init__(self, message: str = "The provided password is incorrect"):
        super().__init__(message, ErrorCode.INCORRECT_PASSWORD)


class DatabaseError(ApplicationError):
    """Raised when the storage backend could not complete an operation."""

    def __init__(self, detail: str):
        super().__init__(
            f"Error interacting with database: {detail}",
            ErrorCode.DATABASE_ERROR,
            {"detail": detail},
        )


class InvalidEmailError(ApplicationError):
    """Raised when email format is invalid."""

    def __init__(self, message: str = "Invalid email address"):
        super().__init__(message, ErrorCode.VALIDATION_ERROR)


class WeakPasswordError(ApplicationError):
    """Raised when a password doesn't meet strength requirements."""

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message, ErrorCode.VALIDATION_ERROR)


class InvalidNameError(ApplicationError):
    """Raised when a display name is blank."""

    def __init__(self, message: str = "Name cannot be empty"):
        super().__init__(message, ErrorCode.VALIDATION_ERROR)
