from sso.infrastructure.persistence.sqlalchemy.repositories.app_repository import (
    AppRepositorySQLAlchemy,
)
from sso.infrastructure.persistence.sqlalchemy.repositories.user_repository import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "AppRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
]
