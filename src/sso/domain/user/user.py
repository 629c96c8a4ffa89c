"""User record as stored in the account directory."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class User:
    """
    A registered account.

    Immutable once created. ``password_hash`` and ``password_salt`` are
    opaque bytes produced by the password hasher and are only ever
    compared through it.
    """

    id: int
    email: str
    password_hash: bytes = field(repr=False)
    password_salt: bytes = field(repr=False)
    is_admin: bool = False
