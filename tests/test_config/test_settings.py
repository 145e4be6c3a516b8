"""Testes para config.settings."""

from __future__ import annotations

from dataclasses import fields

import pytest

from config.settings import (
    DEFAULT_PORT,
    BaseSettings,
    DatabaseSettings,
    PhoneSettings,
    TelegramSettings,
    convert_database_url,
    get_base_settings,
    get_database_settings,
    get_telegram_settings,
)


class TestBaseSettings:
    """Testes para BaseSettings."""

    def test_defaults(self) -> None:
        settings = BaseSettings()

        assert settings.port == DEFAULT_PORT == 10000
        assert settings.validate() == []
        assert settings.is_strict is False

    def test_invalid_port(self) -> None:
        assert BaseSettings(port=70000).validate() == ["PORT fora do intervalo válido: 70000"]

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "prod")
        monkeypatch.setenv("PORT", "8080")
        get_base_settings.cache_clear()
        try:
            settings = get_base_settings()
            assert settings.environment == "production"
            assert settings.port == 8080
        finally:
            get_base_settings.cache_clear()

    def test_invalid_log_level_reported_and_falls_back_to_info(self) -> None:
        settings = BaseSettings(log_level="LOUD")

        assert settings.validate() == ["LOG_LEVEL inválido: LOUD (usando INFO)"]
        assert settings.effective_log_level == "INFO"
        assert BaseSettings(log_level="DEBUG").effective_log_level == "DEBUG"

    def test_non_numeric_port_falls_back(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "abc")
        get_base_settings.cache_clear()
        try:
            assert get_base_settings().port == DEFAULT_PORT
        finally:
            get_base_settings.cache_clear()


class TestTelegramSettings:
    """Testes para TelegramSettings."""

    def test_missing_token(self) -> None:
        assert "TELEGRAM_BOT_TOKEN não configurado" in TelegramSettings().validate()

    def test_bot_token_alias_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("TELEGRAM_BOT_TOKEN", raising=False)
        monkeypatch.setenv("BOT_TOKEN", "999:xyz")
        get_telegram_settings.cache_clear()
        try:
            assert get_telegram_settings().bot_token == "999:xyz"
        finally:
            get_telegram_settings.cache_clear()

    def test_fields(self) -> None:
        """Só o que o envio de sendMessage usa."""
        assert {f.name for f in fields(TelegramSettings)} == {
            "bot_token",
            "webhook_secret",
            "api_base_url",
            "request_timeout_seconds",
        }

    def test_invalid_timeout(self) -> None:
        errors = TelegramSettings(bot_token="1:a", request_timeout_seconds=0).validate()

        assert len(errors) == 1

class TestDatabaseSettings:
    """Testes para DatabaseSettings e convert_database_url."""

    def test_provider_postgres_url_is_converted(self) -> None:
        assert convert_database_url("postgres://u:p@db.host:5432/contacts") == (
            "postgresql+psycopg://u:p@db.host:5432/contacts?sslmode=prefer"
        )

    def test_existing_query_is_kept(self) -> None:
        assert convert_database_url("postgres://u:p@h/db?sslmode=require") == (
            "postgresql+psycopg://u:p@h/db?sslmode=require"
        )

    def test_sqlalchemy_urls_unchanged(self) -> None:
        assert convert_database_url("sqlite:///./x.db") == "sqlite:///./x.db"

    def test_url_without_scheme_is_invalid(self) -> None:
        with pytest.raises(ValueError):
            convert_database_url("localhost/db")

    def test_postgres_without_database_is_invalid(self) -> None:
        with pytest.raises(ValueError):
            convert_database_url("postgres://u:p@h:5432/")

    def test_empty_url_falls_back_to_sqlite(self) -> None:
        settings = DatabaseSettings()

        assert settings.sqlalchemy_url == "sqlite:///./contacts.db"
        assert settings.validate() == ["DATABASE_URL não configurado (usando SQLite local)"]

    def test_memory_backend_needs_no_url(self) -> None:
        assert DatabaseSettings(backend="memory").validate() == []

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DATABASE_URL", "postgres://u:p@h:5432/db")
        monkeypatch.setenv("CONTACT_STORE_BACKEND", "MEMORY")
        monkeypatch.setenv("DATABASE_SEED_ON_STARTUP", "false")
        get_database_settings.cache_clear()
        try:
            settings = get_database_settings()
            assert settings.backend == "memory"
            assert settings.seed_on_startup is False
            assert settings.sqlalchemy_url.startswith("postgresql+psycopg://")
        finally:
            get_database_settings.cache_clear()


class TestPhoneSettings:
    """Testes para PhoneSettings."""

    def test_default_region_country_code(self) -> None:
        settings = PhoneSettings()

        assert settings.region == "SY"
        assert settings.country_code == "963"
        assert settings.validate() == []

    def test_unknown_region(self) -> None:
        assert PhoneSettings(region="XX").validate() == ["PHONE_REGION desconhecida: XX"]
