"""Password hashing service using Argon2id.

Provides salted, memory-hard password hashing and constant-time
verification against a stored hash and salt.
"""

import hmac
import secrets

from argon2.low_level import Type, hash_secret_raw

from sso_auth.exceptions import EmptyInputError, InvalidInputShapeError
from sso_auth.schemas import PasswordData


class PasswordHashingService:
    """Service for secure password hashing and verification.

    Uses the raw Argon2id key derivation function with fixed parameters.
    Hash and salt are stored separately, so both have a fixed length
    that ``verify`` checks before doing any work.

    Examples
    --------
    >>> service = PasswordHashingService()
    >>> data = service.hash("my_secure_password")
    >>> service.verify("my_secure_password", data.salt, data.hash)
    True
    >>> service.verify("wrong_password", data.salt, data.hash)
    False
    """

    TIME_COST = 1
    MEMORY_COST = 64 * 1024  # KiB
    PARALLELISM = 4
    HASH_LENGTH = 32
    SALT_LENGTH = 16

    def __init__(
        self,
        time_cost: int = TIME_COST,
        memory_cost: int = MEMORY_COST,
        parallelism: int = PARALLELISM,
    ):
        """Initialize the password hashing service.

        Parameters
        ----------
        time_cost
            Number of Argon2 iterations.
        memory_cost
            Memory usage in KiB. The default of 64 MiB is what makes the
            function expensive to brute force; tests may lower it.
        parallelism
            Number of lanes.
        """
        self._time_cost = time_cost
        self._memory_cost = memory_cost
        self._parallelism = parallelism

    def hash(self, password: str) -> PasswordData:
        """Hash a plaintext password with a freshly generated salt.

        Parameters
        ----------
        password
            The plaintext password to hash

        Returns
        -------
        The derived hash and the salt used

        Raises
        ------
        EmptyInputError
            If password is empty
        """
        if not password:
            raise EmptyInputError

        salt = secrets.token_bytes(self.SALT_LENGTH)
        return PasswordData(hash=self._derive(password, salt), salt=salt)

    def verify(self, password: str, salt: bytes, expected_hash: bytes) -> bool:
        """Verify a password against a stored hash and salt.

        Parameters
        ----------
        password
            The plaintext password to check
        salt
            The salt stored alongside the hash
        expected_hash
            The stored hash

        Returns
        -------
        True if password matches, False otherwise

        Raises
        ------
        InvalidInputShapeError
            If salt or hash do not have the lengths this service produces
        EmptyInputError
            If password is empty
        """
        if len(salt) != self.SALT_LENGTH:
            msg = f"invalid salt length: expected {self.SALT_LENGTH}, got {len(salt)}"
            raise InvalidInputShapeError(msg)

        if len(expected_hash) != self.HASH_LENGTH:
            msg = (
                f"invalid hash length: expected {self.HASH_LENGTH}, "
                f"got {len(expected_hash)}"
            )
            raise InvalidInputShapeError(msg)

        if not password:
            raise EmptyInputError

        return hmac.compare_digest(self._derive(password, salt), expected_hash)

    def _derive(self, password: str, salt: bytes) -> bytes:
        return hash_secret_raw(
            secret=password.encode("utf-8"),
            salt=salt,
            time_cost=self._time_cost,
            memory_cost=self._memory_cost,
            parallelism=self._parallelism,
            hash_len=self.HASH_LENGTH,
            type=Type.ID,
        )
