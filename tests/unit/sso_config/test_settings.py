"""Unit tests for application settings."""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from sso_config import Settings, get_settings, parse_duration


class TestParseDuration:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("1h", timedelta(hours=1)),
            ("10s", timedelta(seconds=10)),
            ("1h30m", timedelta(hours=1, minutes=30)),
            ("2m5s", timedelta(minutes=2, seconds=5)),
            ("250ms", timedelta(milliseconds=250)),
            ("1.5h", timedelta(hours=1, minutes=30)),
            (" 5m ", timedelta(minutes=5)),
        ],
    )
    def test_parses_go_durations(self, text, expected):
        assert parse_duration(text) == expected

    @pytest.mark.parametrize("text", ["", "h", "10", "10x", "1h junk", "-5s"])
    def test_rejects_invalid_durations(self, text):
        with pytest.raises(ValueError, match="invalid duration"):
            parse_duration(text)


class TestSettings:
    """Tests for Settings validation and defaults."""

    def test_defaults(self, monkeypatch):
        for name in ("ENV", "API_PORT", "API_TIMEOUT"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None, storage_path="./storage/sso.db", token_ttl="1h")

        assert settings.token_ttl == timedelta(hours=1)
        assert settings.api_port == 44044
        assert settings.api_timeout == timedelta(seconds=10)
        assert settings.env == "local"
        assert settings.database_url == "sqlite+aiosqlite:///./storage/sso.db"

    def test_loads_from_environment(self, monkeypatch):
        monkeypatch.setenv("STORAGE_PATH", "/var/lib/sso/sso.db")
        monkeypatch.setenv("TOKEN_TTL", "30m")
        monkeypatch.setenv("API_TIMEOUT", "2s")
        monkeypatch.setenv("ENV", "prod")

        settings = Settings(_env_file=None)

        assert settings.storage_path == "/var/lib/sso/sso.db"
        assert settings.token_ttl == timedelta(minutes=30)
        assert settings.api_timeout == timedelta(seconds=2)
        assert settings.env == "prod"

    def test_integer_seconds_and_iso_durations_are_accepted(self):
        assert Settings(_env_file=None, storage_path="x.db", token_ttl=3600).token_ttl == (
            timedelta(hours=1)
        )
        assert Settings(_env_file=None, storage_path="x.db", token_ttl="PT2H").token_ttl == (
            timedelta(hours=2)
        )

    def test_missing_storage_path_fails(self, monkeypatch):
        monkeypatch.delenv("STORAGE_PATH", raising=False)

        with pytest.raises(ValidationError, match="storage_path"):
            Settings(_env_file=None, token_ttl="1h")

    def test_missing_token_ttl_fails(self, monkeypatch):
        monkeypatch.delenv("TOKEN_TTL", raising=False)

        with pytest.raises(ValidationError, match="token_ttl"):
            Settings(_env_file=None, storage_path="x.db")

    def test_empty_storage_path_fails(self):
        with pytest.raises(ValidationError, match="storage_path cannot be empty"):
            Settings(_env_file=None, storage_path="  ", token_ttl="1h")

    @pytest.mark.parametrize("ttl", ["0s", 0])
    def test_non_positive_ttl_fails(self, ttl):
        with pytest.raises(ValidationError, match="duration must be positive"):
            Settings(_env_file=None, storage_path="x.db", token_ttl=ttl)

    @pytest.mark.parametrize(
        ("env", "log_level", "expected"),
        [
            ("local", None, "DEBUG"),
            ("dev", None, "DEBUG"),
            ("prod", None, "INFO"),
            ("prod", "warning", "WARNING"),
        ],
    )
    def test_effective_log_level(self, env, log_level, expected):
        settings = Settings(
            _env_file=None,
            storage_path="x.db",
            token_ttl="1h",
            env=env,
            log_level=log_level,
        )

        assert settings.effective_log_level == expected

    def test_get_settings_is_cached(self, monkeypatch):
        monkeypatch.setenv("STORAGE_PATH", "cached.db")
        monkeypatch.setenv("TOKEN_TTL", "1h")

        assert get_settings() is get_settings()
