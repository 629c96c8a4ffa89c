"""FastAPI dependency injection for the SSO API.

Provides dependencies for:
- Settings
- Database sessions
- Service instances
"""

from functools import lru_cache
from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from sso.application.ports import TokenIssuer
from sso.application.services import AuthenticationService
from sso.infrastructure.persistence.sqlalchemy import (
    AppRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
    create_engine,
)
from sso.infrastructure.security import RS256TokenIssuer
from sso.presentation.api.config import get_api_settings
from sso_auth import PasswordHashingService
from sso_config.settings import Settings

SettingsDep = Annotated[Settings, Depends(get_api_settings)]


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache
def get_engine(database_url: str) -> AsyncEngine:
    """
    Get the shared async database engine for a database URL (singleton).

    The engine manages the connection pool and is reused across all requests.
    """
    return create_engine(database_url)


@lru_cache
def get_session_maker(database_url: str) -> async_sessionmaker[AsyncSession]:
    """Get the shared async session maker for a database URL (singleton)."""
    return async_sessionmaker(
        get_engine(database_url),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session(settings: SettingsDep) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request using the shared engine/pool.
    """
    async with get_session_maker(settings.database_url)() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_password_service() -> PasswordHashingService:
    """Get password hashing service."""
    return PasswordHashingService()


@lru_cache(maxsize=1)
def get_token_issuer() -> TokenIssuer:
    """Get the token issuer."""
    return RS256TokenIssuer()


def get_authentication_service(
    session: DBSession,
    settings: SettingsDep,
    password_service: PasswordHashingService = Depends(get_password_service),
    token_issuer: TokenIssuer = Depends(get_token_issuer),
) -> AuthenticationService:
    """
    Get authentication service with all dependencies.

    The service is built per request around the request's session.
    """
    user_repo = UserRepositorySQLAlchemy(session)
    app_repo = AppRepositorySQLAlchemy(session)

    return AuthenticationService(
        user_saver=user_repo,
        user_provider=user_repo,
        app_provider=app_repo,
        token_issuer=token_issuer,
        password_service=password_service,
        token_ttl=settings.token_ttl,
    )


AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]
