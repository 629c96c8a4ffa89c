"""User domain: registered accounts and the directory ports that store them."""

from sso.domain.user.exceptions import DuplicateEmailError, UserRecordNotFoundError
from sso.domain.user.repositories import UserProvider, UserSaver
from sso.domain.user.user import User

__all__ = [
    "DuplicateEmailError",
    "User",
    "UserProvider",
    "UserRecordNotFoundError",
    "UserSaver",
]
