"""Authentication services.

Provides password hashing, RSA key handling and JWT token management.
"""

from sso_auth.services.jwt_service import JWTService
from sso_auth.services.key_service import KeyService
from sso_auth.services.password_service import PasswordHashingService

__all__ = [
    "JWTService",
    "KeyService",
    "PasswordHashingService",
]
