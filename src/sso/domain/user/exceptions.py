"""User directory exceptions."""

from sso.domain.shared.exceptions import DuplicateRecordError, RecordNotFoundError


class DuplicateEmailError(DuplicateRecordError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"Email already registered: {email}")


class UserRecordNotFoundError(RecordNotFoundError):
    """No user record matches the lookup key."""

    def __init__(self, key: str | int) -> None:
        self.key = key
        super().__init__(f"User not found: {key}")
