"""Tests for Settings parsing."""

from pathlib import Path

from pydantic import SecretStr

from bse_config.settings import Settings


def _settings(**overrides) -> Settings:
    return Settings(jwt_secret_key=SecretStr("test-secret"), **overrides)


class TestDatabaseUrl:
    def test_postgres_url_from_components(self):
        settings = _settings(
            postgres_host="db",
            postgres_port=5433,
            postgres_user="bse",
            postgres_password=SecretStr("pw"),
            postgres_db="site",
        )

        assert settings.database_url == "postgresql+asyncpg://bse:pw@db:5433/site"
        assert settings.database_type == "postgresql"

    def test_override_wins(self):
        settings = _settings(database_url_override="sqlite+aiosqlite:///./data/bse.db")

        assert settings.database_url == "sqlite+aiosqlite:///./data/bse.db"
        assert settings.database_type == "sqlite"


class TestUploadSettings:
    def test_defaults(self):
        settings = _settings()

        assert settings.storage_root == Path("wwwroot")
        assert settings.upload_max_file_size_bytes == 5 * 1024 * 1024
        assert settings.allowed_extensions == frozenset(
            {".jpg", ".jpeg", ".png", ".gif", ".webp"}
        )

    def test_extensions_normalized(self):
        settings = _settings(upload_allowed_extensions="PNG, .Jpg ,")

        assert settings.allowed_extensions == frozenset({".png", ".jpg"})

    def test_extensions_accept_list(self):
        settings = _settings(upload_allowed_extensions=["gif", ".webp"])

        assert settings.allowed_extensions == frozenset({".gif", ".webp"})


class TestCorsOrigins:
    def test_comma_separated(self):
        settings = _settings(api_cors_origins="http://a.test, http://b.test")

        assert settings.cors_origins == ["http://a.test", "http://b.test"]

    def test_wildcard_default(self):
        assert _settings().cors_origins == ["*"]


def test_jwt_defaults():
    settings = _settings()

    assert settings.jwt_issuer == "BSE"
    assert settings.jwt_audience == "BSE-clients"
    assert settings.jwt_expiration_days == 7
