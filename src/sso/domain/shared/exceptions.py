"""Account directory exceptions.

Storage adapters raise these; the authentication service translates them
into ``sso_auth`` errors. They do not derive from ``AuthError``; an
untranslated one reaches the transport layer as an internal error.
"""


class DirectoryError(Exception):
    """Base exception for account directory failures."""


class RecordNotFoundError(DirectoryError):
    """Raised when a requested record does not exist."""


class DuplicateRecordError(DirectoryError):
    """Raised when a uniqueness constraint is violated."""
