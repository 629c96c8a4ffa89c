"""JWT token service.

Issues app-scoped tokens signed with RS256 using the app's private key,
and verifies them with the matching public key. Only the holder of the
private key can issue; any relying party with the public key can verify.
"""

import logging
from datetime import datetime, timedelta, timezone

import jwt

from sso_auth.exceptions import (
    InvalidTokenError,
    KeyUnavailableError,
    MalformedKeyError,
    SigningFailedError,
)
from sso_auth.schemas import TokenPayload
from sso_auth.services.key_service import KeyService

logger = logging.getLogger(__name__)


class JWTService:
    """Service for JWT token creation and verification.

    Stateless: keys are passed per call because every app has its own
    key pair, and nothing is cached between calls.

    Examples
    --------
    >>> service = JWTService()
    >>> token = service.issue_token(7, "a@x.com", 1, private_pem, timedelta(hours=1))
    >>> payload = service.verify_token(token, public_pem)
    >>> payload.user_id
    7
    """

    ALGORITHM = "RS256"

    def issue_token(
        self,
        user_id: int,
        email: str,
        app_id: int,
        private_key_pem: str,
        ttl: timedelta,
    ) -> str:
        """Create a signed token for a user of one app.

        Parameters
        ----------
        user_id
            The user's unique identifier
        email
            The user's email address
        app_id
            The app the token is scoped to
        private_key_pem
            The app's RSA private key in PEM format
        ttl
            Time until the token expires

        Returns
        -------
        The encoded JWT token string

        Raises
        ------
        KeyUnavailableError
            If the private key cannot be parsed
        SigningFailedError
            If signing fails
        """
        try:
            private_key = KeyService.parse_private_key(private_key_pem)
        except MalformedKeyError as e:
            logger.error("Failed to parse private key for app %s: %s", app_id, e)
            msg = f"failed to parse private key: {e.message}"
            raise KeyUnavailableError(msg) from e

        issued_at = int(datetime.now(tz=timezone.utc).timestamp())
        payload = {
            "sub": str(user_id),
            "uid": user_id,
            "email": email,
            "app_id": app_id,
            "iat": issued_at,
            "exp": issued_at + int(ttl.total_seconds()),
        }

        try:
            token = jwt.encode(payload, private_key, algorithm=self.ALGORITHM)
        except (jwt.PyJWTError, ValueError, TypeError) as e:
            logger.error("Failed to sign token for app %s: %s", app_id, e)
            msg = f"failed to sign token: {e}"
            raise SigningFailedError(msg) from e

        logger.debug("Token generated for user %s, app %s", user_id, app_id)
        return token

    def verify_token(self, token: str, public_key_pem: str) -> TokenPayload:
        """Verify and decode a JWT token.

        Parameters
        ----------
        token
            The JWT token string to verify
        public_key_pem
            The issuing app's RSA public key in PEM format

        Returns
        -------
        TokenPayload containing the decoded data

        Raises
        ------
        MalformedKeyError
            If the public key cannot be parsed
        InvalidTokenError
            If token is invalid, expired, or malformed
        """
        public_key = KeyService.parse_public_key(public_key_pem)

        try:
            payload = jwt.decode(
                token,
                public_key,
                algorithms=[self.ALGORITHM],
                options={"require": ["sub", "exp", "iat"]},
            )

            return TokenPayload(
                user_id=int(payload["uid"]),
                email=payload["email"],
                app_id=int(payload["app_id"]),
                issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
                exp=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            )

        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e
        except (KeyError, ValueError, TypeError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e
