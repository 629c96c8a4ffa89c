"""SSO CLI application using Typer.

This module provides command-line utilities for the SSO service:
provisioning client apps with RSA key pairs, creating the database
schema and running the HTTP API.
"""

import asyncio

import typer
import uvicorn
from rich.console import Console
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from sso.domain.app import App
from sso.infrastructure.persistence.sqlalchemy import (
    AppRepositorySQLAlchemy,
    create_engine,
    create_tables,
)
from sso.presentation.api.app import configure_logging
from sso.presentation.api.schemas.auth import MAX_ID
from sso_auth import KeyService
from sso_config.settings import Settings, get_settings, sqlite_url

app = typer.Typer(
    name="sso",
    help="SSO - single sign-on service CLI",
    no_args_is_help=True,
)
console = Console()

db_app = typer.Typer(
    name="db",
    help="Database utilities",
    no_args_is_help=True,
)
app.add_typer(db_app)

DB_OPTION = typer.Option(
    None,
    "--db",
    help="SQLite database file; overrides STORAGE_PATH from the configuration",
)


def _load_settings() -> Settings:
    settings = get_settings()
    configure_logging(settings.effective_log_level)
    return settings


def _resolve_storage(db: str | None) -> tuple[str, str]:
    """Return database URL and storage path, preferring an explicit --db path."""
    if db:
        configure_logging("INFO")
        return sqlite_url(db), db

    settings = _load_settings()
    return settings.database_url, settings.storage_path


async def _init_db(database_url: str) -> None:
    engine = create_engine(database_url)
    try:
        await create_tables(engine)
    finally:
        await engine.dispose()


async def _store_app(database_url: str, client_app: App) -> None:
    engine = create_engine(database_url)
    try:
        await create_tables(engine)
        session_maker = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        async with session_maker() as session:
            await AppRepositorySQLAlchemy(session).upsert(client_app)
            await session.commit()
    finally:
        await engine.dispose()


@app.command("keygen")
def keygen(
    app_id: int = typer.Option(
        1,
        "--app-id",
        min=1,
        max=MAX_ID,
        help="Id of the client app",
    ),
    app_name: str = typer.Option("Test", "--app-name", help="Name of the client app"),
    bits: int = typer.Option(
        KeyService.MIN_KEY_BITS,
        "--bits",
        help="RSA modulus size",
    ),
    db: str | None = DB_OPTION,
) -> None:
    """Generate an RSA key pair for a client app and store it.

    Creates the app, or replaces the name and keys of an existing one.
    Only the public key is printed; hand it to the client app so it can
    verify the tokens issued for it.
    """
    database_url, _ = _resolve_storage(db)

    try:
        key_pair = KeyService.generate_key_pair(bits)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1) from e

    client_app = App(
        id=app_id,
        name=app_name,
        private_key=key_pair.private_key,
        public_key=key_pair.public_key,
    )
    asyncio.run(_store_app(database_url, client_app))

    console.print(
        f"[bold green]Stored key pair for app {app_id} ({app_name})[/bold green]"
    )
    console.print(key_pair.public_key, markup=False, highlight=False, soft_wrap=True)


@db_app.command("init")
def init_db(db: str | None = DB_OPTION) -> None:
    """Create the users and apps tables if they do not exist."""
    database_url, storage_path = _resolve_storage(db)
    asyncio.run(_init_db(database_url))
    console.print(f"[green]Database ready at {storage_path}[/green]")


@app.command("serve")
def serve() -> None:
    """Run the HTTP API with uvicorn."""
    settings = _load_settings()
    uvicorn.run(
        "sso.presentation.api.app:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.effective_log_level.lower(),
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
