"""User directory ports.

Split by capability: registration only writes, login and the admin
check only read.
"""

from abc import ABC, abstractmethod

from sso.domain.user.user import User


class UserSaver(ABC):
    """Write side of the user directory."""

    @abstractmethod
    async def save_user(
        self,
        email: str,
        password_hash: bytes,
        password_salt: bytes,
    ) -> int:
        """
        Create a new user and return the id assigned to it.

        Raises
        ------
        DuplicateEmailError
            If the email is already registered
        """


class UserProvider(ABC):
    """Read side of the user directory."""

    @abstractmethod
    async def find_by_email(self, email: str) -> User:
        """
        Find a user by their email address.

        Raises
        ------
        UserRecordNotFoundError
            If no user has this email
        """

    @abstractmethod
    async def is_admin(self, user_id: int) -> bool:
        """
        Read the admin flag of a user.

        Raises
        ------
        UserRecordNotFoundError
            If no user has this id
        """
