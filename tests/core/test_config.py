"""Tests for application configuration."""
import pytest
from pydantic import ValidationError

from core.config import Settings


class TestCorsOriginsParsing:
    """Tests for CORS origins parsing from environment variables."""

    def test_parse_single_origin_string(self) -> None:
        """Single origin string is parsed correctly."""
        settings = Settings(
            _env_file=None,
            database_url="postgresql://test",
            CORS_ORIGINS="http://localhost:3000",
            DEV_MODE="false",
        )
        assert settings.cors_origins == ["http://localhost:3000"]

    def test_parse_origins_with_whitespace_and_trailing_comma(self) -> None:
        """Whitespace is stripped and empty entries filtered."""
        settings = Settings(
            _env_file=None,
            database_url="postgresql://test",
            CORS_ORIGINS="  http://localhost:3000 , https://example.com ,",
            DEV_MODE="false",
        )
        assert settings.cors_origins == [
            "http://localhost:3000",
            "https://example.com",
        ]

    def test_parse_empty_string(self) -> None:
        """Empty string results in empty list."""
        settings = Settings(
            _env_file=None,
            database_url="postgresql://test",
            CORS_ORIGINS="",
            DEV_MODE="false",
        )
        assert settings.cors_origins == []

    def test_default_cors_origins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Default CORS origins is localhost:3000."""
        monkeypatch.delenv("CORS_ORIGINS", raising=False)
        settings = Settings(
            _env_file=None,
            database_url="postgresql://test",
            DEV_MODE="false",
        )
        assert settings.cors_origins == ["http://localhost:3000"]


class TestApiTokenAndLogging:
    """Tests for token and logging settings."""

    def test_api_token_read_from_alias(self) -> None:
        """API_TOKEN populates api_token."""
        settings = Settings(
            _env_file=None,
            database_url="postgresql://test",
            API_TOKEN="secret",
            DEV_MODE="false",
        )
        assert settings.api_token == "secret"

    def test_api_token_read_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """API_TOKEN is picked up from the process environment."""
        monkeypatch.setenv("API_TOKEN", "from-env")
        settings = Settings(_env_file=None, database_url="postgresql://test")
        assert settings.api_token == "from-env"

    def test_log_level_defaults_to_info(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """LOG_LEVEL defaults to INFO."""
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        settings = Settings(_env_file=None, database_url="postgresql://test")
        assert settings.log_level == "INFO"

    def test_database_url_is_required(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Settings cannot be built without a database URL."""
        monkeypatch.delenv("DATABASE_URL", raising=False)
        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestDevModeSecurityValidation:
    """Tests for DEV_MODE security guard against production database usage."""

    def test__dev_mode_allowed_with_localhost_database(self) -> None:
        """DEV_MODE can be enabled with localhost database."""
        settings = Settings(
            _env_file=None,
            database_url="postgresql://localhost:5432/test",
            DEV_MODE="true",
        )
        assert settings.dev_mode is True

    def test__dev_mode_allowed_with_sqlite_database(self) -> None:
        """DEV_MODE can be enabled with a SQLite database."""
        settings = Settings(
            _env_file=None,
            database_url="sqlite+aiosqlite:///./bookmarks.db",
            DEV_MODE="true",
        )
        assert settings.dev_mode is True

    def test__dev_mode_blocked_with_remote_database(self) -> None:
        """DEV_MODE cannot be enabled with a remote database."""
        with pytest.raises(ValidationError, match="DEV_MODE cannot be enabled"):
            Settings(
                _env_file=None,
                database_url="postgresql://db.example.com:5432/prod",
                DEV_MODE="true",
            )

    def test__remote_database_allowed_without_dev_mode(self) -> None:
        """Remote databases are fine when DEV_MODE is off."""
        settings = Settings(
            _env_file=None,
            database_url="postgresql://db.example.com:5432/prod",
            DEV_MODE="false",
        )
        assert settings.dev_mode is False
