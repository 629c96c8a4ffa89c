"""Integration tests for engine creation on SQLite files."""

import pytest

from sso.infrastructure.persistence.sqlalchemy import create_engine, create_tables


@pytest.fixture
async def file_engine(tmp_path):
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path}/nested/dir/sso.db")
    yield engine
    await engine.dispose()


async def _pragma(engine, name: str):
    async with engine.connect() as conn:
        result = await conn.exec_driver_sql(f"PRAGMA {name}")
        return result.scalar()


class TestCreateEngine:
    @pytest.mark.asyncio
    async def test_creates_missing_parent_directory(self, tmp_path, file_engine):
        assert (tmp_path / "nested" / "dir").is_dir()

        await create_tables(file_engine)

        assert (tmp_path / "nested" / "dir" / "sso.db").exists()

    @pytest.mark.asyncio
    async def test_connections_use_write_ahead_log(self, file_engine):
        assert await _pragma(file_engine, "journal_mode") == "wal"

    @pytest.mark.asyncio
    async def test_connections_wait_on_locks(self, file_engine):
        assert await _pragma(file_engine, "busy_timeout") == 5000

    @pytest.mark.asyncio
    async def test_connections_enforce_foreign_keys(self, file_engine):
        assert await _pragma(file_engine, "foreign_keys") == 1
