"""Auth schemas and data structures.

These are simple data classes used for transferring auth data
between components.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class PasswordData:
    """Argon2id hash of a password together with the salt it was made with."""

    hash: bytes
    salt: bytes


@dataclass(frozen=True)
class KeyPair:
    """PEM-encoded RSA key pair.

    Attributes
    ----------
    private_key
        PKCS#1 ``RSA PRIVATE KEY`` block, used for signing tokens
    public_key
        SubjectPublicKeyInfo ``PUBLIC KEY`` block, handed to relying parties
    """

    private_key: str
    public_key: str

    def __repr__(self) -> str:
        return "KeyPair(private_key=<redacted>, public_key=...)"


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    This represents the data extracted from a verified JWT token.

    Attributes
    ----------
    user_id
        The unique identifier of the user
    email
        The user's email address
    app_id
        The app the token was issued for
    issued_at
        Token issue timestamp
    exp
        Token expiration timestamp
    """

    user_id: int
    email: str
    app_id: int
    issued_at: datetime
    exp: datetime

    def is_expired(self) -> bool:
        """Check if the token has expired."""
        return datetime.now(tz=self.exp.tzinfo) > self.exp
