"""SQLAlchemy implementation of the app directory port."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from sso.domain.app import App, AppProvider, AppRecordNotFoundError
from sso.infrastructure.persistence.sqlalchemy.models import AppModel

logger = logging.getLogger(__name__)


class AppRepositorySQLAlchemy(AppProvider):
    """SQLAlchemy implementation of the AppProvider port.

    Also offers ``upsert`` for provisioning tooling; the authentication
    service itself only ever reads apps.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, app_id: int) -> App:
        model = await self._find_model_by_id(app_id)

        if model is None:
            raise AppRecordNotFoundError(app_id)

        return self._map_to_domain(model)

    async def upsert(self, app: App) -> None:
        """Insert the app, or replace name and keys of an existing one."""
        existing = await self._find_model_by_id(app.id)

        if existing:
            existing.name = app.name
            existing.private_key = app.private_key
            existing.public_key = app.public_key
            logger.info("Updated app: %s (name: %s)", app.id, app.name)
        else:
            self._session.add(self._map_to_model(app))
            logger.info("Created app: %s (name: %s)", app.id, app.name)

        await self._session.flush()

    async def _find_model_by_id(self, app_id: int) -> AppModel | None:
        stmt = select(AppModel).where(AppModel.id == app_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: AppModel) -> App:
        return App(
            id=model.id,
            name=model.name,
            private_key=model.private_key,
            public_key=model.public_key,
        )

    def _map_to_model(self, app: App) -> AppModel:
        return AppModel(
            id=app.id,
            name=app.name,
            private_key=app.private_key,
            public_key=app.public_key,
        )
