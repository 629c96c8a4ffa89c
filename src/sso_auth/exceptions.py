"""Authentication error taxonomy.

Every failure that may cross the boundary between the authentication
service and the transport layer is an ``AuthError`` carrying one
``ErrorCode``. Callers match on the class (or ``code``), never on the
message text.
"""

import copy
from enum import Enum


class ErrorCode(str, Enum):
    """Stable error codes for the authentication domain.

    These codes are part of the public API contract. Should not be changed.
    """

    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    INVALID_APP_ID = "INVALID_APP_ID"
    USER_EXISTS = "USER_EXISTS"
    USER_NOT_FOUND = "USER_NOT_FOUND"

    EMPTY_INPUT = "EMPTY_INPUT"
    INVALID_INPUT_SHAPE = "INVALID_INPUT_SHAPE"

    MALFORMED_KEY = "MALFORMED_KEY"
    KEY_UNAVAILABLE = "KEY_UNAVAILABLE"
    SIGNING_FAILED = "SIGNING_FAILED"
    INVALID_TOKEN = "INVALID_TOKEN"

    DEADLINE_EXCEEDED = "DEADLINE_EXCEEDED"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class AuthError(Exception):
    """Base exception for all authentication errors.

    Attributes
    ----------
    message
        Human-readable error message (safe for end users)
    code
        Stable error code for programmatic handling
    op
        Chain of operation names the error passed through, outermost first
    """

    code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str = "Authentication error", op: str | None = None):
        self.message = message
        self.op = op
        super().__init__(message)

    def wrap(self, op: str) -> "AuthError":
        """Return a copy of this error qualified with an operation name.

        The kind of the error is preserved, so ``raise err.wrap(op) from err``
        adds context without changing how callers classify the failure.
        """
        wrapped = copy.copy(self)
        wrapped.op = f"{op}: {self.op}" if self.op else op
        return wrapped

    def __str__(self) -> str:
        if self.op:
            return f"{self.op}: {self.message}"
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"op={self.op!r})"
        )


class InvalidCredentialsError(AuthError):
    """Raised when email or password is incorrect during login."""

    code = ErrorCode.INVALID_CREDENTIALS

    def __init__(self, message: str = "invalid credentials", op: str | None = None):
        super().__init__(message, op)


class InvalidAppIdError(AuthError):
    """Raised when a login names an app that is not provisioned."""

    code = ErrorCode.INVALID_APP_ID

    def __init__(self, message: str = "invalid app id", op: str | None = None):
        super().__init__(message, op)


class UserExistsError(AuthError):
    """Raised when registering an email that is already taken."""

    code = ErrorCode.USER_EXISTS

    def __init__(self, message: str = "user already exists", op: str | None = None):
        super().__init__(message, op)


class UserNotFoundError(AuthError):
    """Raised when a user id is unknown."""

    code = ErrorCode.USER_NOT_FOUND

    def __init__(self, message: str = "user not found", op: str | None = None):
        super().__init__(message, op)


class EmptyInputError(AuthError):
    """Raised when the password handed to the hasher is empty."""

    code = ErrorCode.EMPTY_INPUT

    def __init__(self, message: str = "password cannot be empty", op: str | None = None):
        super().__init__(message, op)


class InvalidInputShapeError(AuthError):
    """Raised when a stored hash or salt does not have the expected length."""

    code = ErrorCode.INVALID_INPUT_SHAPE

    def __init__(self, message: str = "invalid hash or salt length", op: str | None = None):
        super().__init__(message, op)


class MalformedKeyError(AuthError):
    """Raised when PEM key material cannot be parsed."""

    code = ErrorCode.MALFORMED_KEY

    def __init__(self, message: str = "malformed key", op: str | None = None):
        super().__init__(message, op)


class KeyUnavailableError(AuthError):
    """Raised when an app's signing key cannot be loaded."""

    code = ErrorCode.KEY_UNAVAILABLE

    def __init__(self, message: str = "signing key unavailable", op: str | None = None):
        super().__init__(message, op)


class SigningFailedError(AuthError):
    """Raised when a token could not be signed."""

    code = ErrorCode.SIGNING_FAILED

    def __init__(self, message: str = "failed to sign token", op: str | None = None):
        super().__init__(message, op)


class InvalidTokenError(AuthError):
    """Raised when a JWT token is invalid, expired, or malformed."""

    code = ErrorCode.INVALID_TOKEN

    def __init__(self, message: str = "Invalid or expired token", op: str | None = None):
        super().__init__(message, op)


class DeadlineExceededError(AuthError):
    """Raised when the caller's deadline passed before the call finished."""

    code = ErrorCode.DEADLINE_EXCEEDED

    def __init__(self, message: str = "operation timeout", op: str | None = None):
        super().__init__(message, op)


class InternalError(AuthError):
    """Opaque wrapper for unclassified failures (storage, I/O, bugs)."""

    code = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str = "internal error", op: str | None = None):
        super().__init__(message, op)
