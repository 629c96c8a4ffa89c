"""Database initialization utilities."""

import logging
from pathlib import Path

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from sso.infrastructure.persistence.sqlalchemy.models import Base

logger = logging.getLogger(__name__)

# Applied to every new SQLite connection
SQLITE_PRAGMAS = (
    "PRAGMA journal_mode=WAL",
    "PRAGMA busy_timeout=5000",
    "PRAGMA foreign_keys=ON",
)


def _set_sqlite_pragmas(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    for pragma in SQLITE_PRAGMAS:
        cursor.execute(pragma)
    cursor.close()


def create_engine(database_url: str) -> AsyncEngine:
    """Create an async engine, making sure a SQLite file's directory exists.

    SQLite connections run in WAL mode with a busy timeout, so concurrent
    readers and a writer wait for each other instead of failing.
    """
    is_sqlite = database_url.startswith("sqlite")
    if is_sqlite and ":memory:" not in database_url:
        db_path = database_url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    engine = create_async_engine(
        database_url,
        echo=False,
        pool_pre_ping=True,
    )

    if is_sqlite:
        event.listen(engine.sync_engine, "connect", _set_sqlite_pragmas)

    return engine


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database schema is up to date (missing tables created if needed)")
