"""Shared application configuration package."""

from .settings import (
    Settings,
    clear_settings_cache,
    get_settings,
    parse_duration,
    sqlite_url,
)

__all__ = [
    "Settings",
    "clear_settings_cache",
    "get_settings",
    "parse_duration",
    "sqlite_url",
]
