"""SQLAlchemy implementation of the account directory.

Provides:
- Base: Declarative base for the users and apps tables
- UserRepositorySQLAlchemy, AppRepositorySQLAlchemy: port implementations
- create_engine, create_tables: engine construction and schema setup
"""

from sso.infrastructure.persistence.sqlalchemy.init_db import create_engine, create_tables
from sso.infrastructure.persistence.sqlalchemy.models import AppModel, Base, UserModel
from sso.infrastructure.persistence.sqlalchemy.repositories import (
    AppRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)

__all__ = [
    "AppModel",
    "AppRepositorySQLAlchemy",
    "Base",
    "UserModel",
    "UserRepositorySQLAlchemy",
    "create_engine",
    "create_tables",
]
