"""TokenIssuer - what the authentication service needs to mint tokens.

The actual implementation is provided by an adapter in the
infrastructure layer.
"""

from abc import ABC, abstractmethod
from datetime import timedelta

from sso.domain.app import App
from sso.domain.user import User


class TokenIssuer(ABC):
    """Port for issuing signed, app-scoped bearer tokens."""

    @abstractmethod
    def issue(self, user: User, app: App, ttl: timedelta) -> str:
        """
        Issue a token for ``user`` scoped to ``app``, valid for ``ttl``.

        Raises
        ------
        KeyUnavailableError
            If the app's signing key cannot be loaded
        SigningFailedError
            If signing fails
        """
