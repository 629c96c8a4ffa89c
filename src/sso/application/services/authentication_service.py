"""Authentication service for user registration, login and role checks."""

from __future__ import annotations

import asyncio
import logging
from contextlib import contextmanager
from datetime import timedelta
from typing import TYPE_CHECKING, Iterator

from sso.domain.app import AppRecordNotFoundError
from sso.domain.user import DuplicateEmailError, UserRecordNotFoundError
from sso_auth import (
    AuthError,
    DeadlineExceededError,
    EmptyInputError,
    InternalError,
    InvalidAppIdError,
    InvalidCredentialsError,
    InvalidInputShapeError,
    UserExistsError,
    UserNotFoundError,
)

if TYPE_CHECKING:
    from sso.application.ports import TokenIssuer
    from sso.domain.app import AppProvider
    from sso.domain.user import UserProvider, UserSaver
    from sso_auth import PasswordHashingService

logger = logging.getLogger(__name__)


@contextmanager
def _error_boundary(op: str) -> Iterator[None]:
    """Qualify every failure with ``op`` and hide unclassified ones.

    Auth errors keep their kind. A collaborator timing out becomes
    ``DeadlineExceededError``; anything else becomes an opaque
    ``InternalError`` chained to the original exception.
    """
    try:
        yield
    except AuthError as e:
        raise e.wrap(op) from e
    except TimeoutError as e:
        logger.warning("%s: deadline exceeded", op)
        raise DeadlineExceededError(op=op) from e
    except Exception as e:
        logger.error("%s: unexpected failure: %r", op, e)
        raise InternalError(op=op) from e


class AuthenticationService:
    """
    Application service for user authentication.

    Orchestrates the account directory, the password hasher and the
    token issuer to provide:
    - Login with password, returning an app-scoped token
    - User registration
    - Admin role check

    This service is the only place where directory errors (record not
    found, duplicate) are turned into auth errors. Login reports an
    unknown email exactly like a wrong password, so callers cannot probe
    which accounts exist.
    """

    def __init__(
        self,
        user_saver: UserSaver,
        user_provider: UserProvider,
        app_provider: AppProvider,
        token_issuer: TokenIssuer,
        password_service: PasswordHashingService,
        token_ttl: timedelta,
    ):
        self._user_saver = user_saver
        self._user_provider = user_provider
        self._app_provider = app_provider
        self._token_issuer = token_issuer
        self._password_service = password_service
        self._token_ttl = token_ttl

    async def login(self, email: str, password: str, app_id: int) -> str:
        op = "Auth.Login"
        logger.info("%s: attempting to log in user %s", op, email)

        with _error_boundary(op):
            try:
                user = await self._user_provider.find_by_email(email)
            except UserRecordNotFoundError as e:
                logger.warning("%s: user not found: %s", op, email)
                raise InvalidCredentialsError from e

            try:
                matches = await asyncio.to_thread(
                    self._password_service.verify,
                    password,
                    user.password_salt,
                    user.password_hash,
                )
            except InvalidInputShapeError as e:
                logger.error("%s: stored credentials of user %s unusable: %s", op, user.id, e)
                raise InvalidCredentialsError from e
            except EmptyInputError as e:
                raise InvalidCredentialsError from e

            if not matches:
                logger.info("%s: invalid credentials for user %s", op, user.id)
                raise InvalidCredentialsError

            try:
                app = await self._app_provider.find_by_id(app_id)
            except AppRecordNotFoundError as e:
                logger.warning("%s: app not found: %s", op, app_id)
                raise InvalidAppIdError from e

            token = self._token_issuer.issue(user, app, self._token_ttl)

        logger.info("%s: user %s logged in to app %s", op, user.id, app.id)
        return token

    async def register(self, email: str, password: str) -> int:
        op = "Auth.Register"
        logger.info("%s: registering new user %s", op, email)

        with _error_boundary(op):
            password_data = await asyncio.to_thread(self._password_service.hash, password)

            try:
                user_id = await self._user_saver.save_user(
                    email,
                    password_data.hash,
                    password_data.salt,
                )
            except DuplicateEmailError as e:
                logger.warning("%s: email already registered: %s", op, email)
                raise UserExistsError from e

        logger.info("%s: user registered with id %s", op, user_id)
        return user_id

    async def is_admin(self, user_id: int) -> bool:
        op = "Auth.IsAdmin"
        logger.debug("%s: checking admin status of user %s", op, user_id)

        with _error_boundary(op):
            try:
                is_admin = await self._user_provider.is_admin(user_id)
            except UserRecordNotFoundError as e:
                logger.warning("%s: user not found: %s", op, user_id)
                raise UserNotFoundError from e

        logger.info("%s: user %s is_admin=%s", op, user_id, is_admin)
        return is_admin
