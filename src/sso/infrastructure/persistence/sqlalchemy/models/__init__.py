from sso.infrastructure.persistence.sqlalchemy.models.app_model import AppModel
from sso.infrastructure.persistence.sqlalchemy.models.base import Base
from sso.infrastructure.persistence.sqlalchemy.models.user_model import UserModel

__all__ = [
    "AppModel",
    "Base",
    "UserModel",
]
