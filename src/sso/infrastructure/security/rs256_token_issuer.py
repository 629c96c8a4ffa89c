"""RS256 token issuer implementation."""

from datetime import timedelta

from sso.application.ports import TokenIssuer
from sso.domain.app import App
from sso.domain.user import User
from sso_auth.services import JWTService


class RS256TokenIssuer(TokenIssuer):
    """Issues JWTs signed with the app's own RSA private key."""

    def __init__(self, jwt_service: JWTService | None = None):
        self._jwt_service = jwt_service or JWTService()

    def issue(self, user: User, app: App, ttl: timedelta) -> str:
        return self._jwt_service.issue_token(
            user_id=user.id,
            email=user.email,
            app_id=app.id,
            private_key_pem=app.private_key,
            ttl=ttl,
        )
