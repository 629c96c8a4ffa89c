"""Application settings loaded from environment variables.

Configuration file discovery (in priority order):
1. OS environment variables (always highest priority)
2. SSO_ENV_FILE environment variable (path to .env file)
3. config/.env.dev - local development
4. config/.env - production/Docker

Uses pydantic-settings for automatic type coercion and validation.
"""

from __future__ import annotations

import os
import re
from datetime import timedelta
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

from pydantic import computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Go-style durations: "1h", "10s", "1h30m"
_DURATION_PART = re.compile(r"(\d+(?:\.\d+)?)(ms|h|m|s)")
_DURATION_UNITS = {
    "h": "hours",
    "m": "minutes",
    "s": "seconds",
    "ms": "milliseconds",
}


def parse_duration(value: str) -> timedelta:
    """Parse a Go-style duration string such as ``"2h"`` or ``"1m30s"``."""
    text = value.strip()
    parts = _DURATION_PART.findall(text)
    if not parts or "".join(n + u for n, u in parts) != text:
        msg = f"invalid duration: {value!r}"
        raise ValueError(msg)

    total = timedelta()
    for number, unit in parts:
        total += timedelta(**{_DURATION_UNITS[unit]: float(number)})
    return total


def sqlite_url(storage_path: str) -> str:
    """Async SQLAlchemy URL for a SQLite database file."""
    return f"sqlite+aiosqlite:///{storage_path}"


def _find_project_root() -> Path:
    """Find the project root directory."""
    current = Path(__file__).resolve().parent

    for parent in [current, *current.parents]:
        if (parent / "config").is_dir():
            return parent
        if (parent / ".git").is_dir():
            return parent

    return Path.cwd()


def _resolve_env_file_path() -> Path | None:
    """Resolve the .env file path.

    Priority:
    1. SSO_ENV_FILE env var (full path)
    2. config/.env.dev (local development)
    3. config/.env (production)
    """
    env_file_path = os.environ.get("SSO_ENV_FILE")
    if env_file_path:
        path = Path(env_file_path)
        if not path.is_absolute():
            path = _find_project_root() / path
        if path.exists():
            return path

    config_dir = _find_project_root() / "config"

    dev_env = config_dir / ".env.dev"
    if dev_env.exists():
        return dev_env

    prod_env = config_dir / ".env"
    if prod_env.exists():
        return prod_env

    return None


class Settings(BaseSettings):
    """Application configuration loaded from environment variables.

    Values are loaded from:
    1. OS environment variables (highest priority)
    2. .env file (config/.env.dev or config/.env)
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Required (app fails without these)
    storage_path: str  # SQLite database file
    token_ttl: timedelta  # Lifetime of issued tokens

    # Application
    app_name: str = "SSO"
    env: Literal["local", "dev", "prod"] = "local"

    # API (API_ prefix)
    api_host: str = "0.0.0.0"  # NOQA: S104
    api_port: int = 44044
    api_timeout: timedelta = timedelta(seconds=10)  # Per-call deadline
    api_debug: bool = False

    # Logging; defaults to DEBUG for local/dev and INFO for prod
    log_level: str | None = None

    @field_validator("token_ttl", "api_timeout", mode="before")
    @classmethod
    def _parse_go_duration(cls, v: Any) -> Any:
        """Accept "1h"/"10s" style durations besides pydantic's own formats."""
        if isinstance(v, str) and _DURATION_PART.match(v.strip()):
            return parse_duration(v)
        return v

    @field_validator("token_ttl", "api_timeout")
    @classmethod
    def _validate_positive(cls, v: timedelta) -> timedelta:
        if v <= timedelta(0):
            msg = "duration must be positive"
            raise ValueError(msg)
        return v

    @field_validator("storage_path")
    @classmethod
    def _validate_storage_path(cls, v: str) -> str:
        if not v.strip():
            msg = "storage_path cannot be empty"
            raise ValueError(msg)
        return v

    # Computed properties
    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        """Construct the database URL from the storage path."""
        return sqlite_url(self.storage_path)

    @property
    def effective_log_level(self) -> str:
        """Log level to apply, derived from the environment when unset."""
        if self.log_level:
            return self.log_level.upper()
        return "INFO" if self.env == "prod" else "DEBUG"


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings.

    Required fields (storage_path, token_ttl) must be provided via
    environment variables or .env file.
    """
    return Settings()  # type: ignore[call-arg]  # pydantic-settings loads from env


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
