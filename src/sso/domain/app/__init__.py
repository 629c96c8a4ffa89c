"""App domain: client applications and their signing keys."""

from sso.domain.app.app import App
from sso.domain.app.exceptions import AppRecordNotFoundError
from sso.domain.app.repositories import AppProvider

__all__ = [
    "App",
    "AppProvider",
    "AppRecordNotFoundError",
]
