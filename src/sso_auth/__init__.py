"""SSO Auth - Security primitives for the credential service.

This package is independent of storage and transport. It handles:
- Password hashing (Argon2id)
- RSA key pair generation and PEM parsing
- RS256 JWT token creation and verification
- The authentication error taxonomy

Architecture:
    sso_auth/
    ├── services/           # Pure logic (password hashing, keys, JWT)
    ├── schemas.py          # Data classes
    └── exceptions.py       # Error taxonomy

Usage:
    from sso_auth import JWTService, KeyService, PasswordHashingService
"""

from sso_auth.exceptions import (
    AuthError,
    DeadlineExceededError,
    EmptyInputError,
    ErrorCode,
    InternalError,
    InvalidAppIdError,
    InvalidCredentialsError,
    InvalidInputShapeError,
    InvalidTokenError,
    KeyUnavailableError,
    MalformedKeyError,
    SigningFailedError,
    UserExistsError,
    UserNotFoundError,
)
from sso_auth.schemas import KeyPair, PasswordData, TokenPayload
from sso_auth.services import JWTService, KeyService, PasswordHashingService

__all__ = [
    # Services
    "JWTService",
    "KeyService",
    "PasswordHashingService",
    # Schemas
    "KeyPair",
    "PasswordData",
    "TokenPayload",
    # Exceptions
    "AuthError",
    "DeadlineExceededError",
    "EmptyInputError",
    "ErrorCode",
    "InternalError",
    "InvalidAppIdError",
    "InvalidCredentialsError",
    "InvalidInputShapeError",
    "InvalidTokenError",
    "KeyUnavailableError",
    "MalformedKeyError",
    "SigningFailedError",
    "UserExistsError",
    "UserNotFoundError",
]
