from sso.domain.shared.exceptions import (
    DirectoryError,
    DuplicateRecordError,
    RecordNotFoundError,
)

__all__ = [
    "DirectoryError",
    "DuplicateRecordError",
    "RecordNotFoundError",
]
