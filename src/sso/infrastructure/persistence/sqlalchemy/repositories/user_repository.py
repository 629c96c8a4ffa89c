"""SQLAlchemy implementation of the user directory ports."""

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from sso.domain.user import (
    DuplicateEmailError,
    User,
    UserProvider,
    UserRecordNotFoundError,
    UserSaver,
)
from sso.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(UserSaver, UserProvider):
    """SQLAlchemy implementation of the UserSaver and UserProvider ports.

    Changes are flushed, not committed; the caller owns the transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save_user(
        self,
        email: str,
        password_hash: bytes,
        password_salt: bytes,
    ) -> int:
        model = UserModel(
            email=email,
            password_hash=password_hash,
            password_salt=password_salt,
        )
        self._session.add(model)

        try:
            await self._session.flush()
        except IntegrityError as e:
            if "UNIQUE constraint failed" in str(e) or "unique" in str(e).lower():
                raise DuplicateEmailError(email) from e
            raise

        logger.info("Created user: %s (email: %s)", model.id, email)
        return model.id

    async def find_by_email(self, email: str) -> User:
        stmt = select(UserModel).where(UserModel.email == email)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            raise UserRecordNotFoundError(email)

        return self._map_to_domain(model)

    async def is_admin(self, user_id: int) -> bool:
        stmt = select(UserModel.is_admin).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        is_admin = result.scalar_one_or_none()

        if is_admin is None:
            raise UserRecordNotFoundError(user_id)

        return is_admin

    async def count(self) -> int:
        stmt = select(func.count()).select_from(UserModel)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    def _map_to_domain(self, model: UserModel) -> User:
        return User(
            id=model.id,
            email=model.email,
            password_hash=model.password_hash,
            password_salt=model.password_salt,
            is_admin=model.is_admin,
        )
