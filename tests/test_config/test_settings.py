"""Testes das settings (base e Discord)."""

from __future__ import annotations

import pytest

from config.settings import (
    DISCORD_API_BASE_URL,
    BaseSettings,
    DiscordSettings,
    get_base_settings,
    get_discord_settings,
)

PUBLIC_KEY = "a" * 64


@pytest.fixture(autouse=True)
def _clear_caches():
    get_base_settings.cache_clear()
    get_discord_settings.cache_clear()
    yield
    get_base_settings.cache_clear()
    get_discord_settings.cache_clear()


class TestDiscordSettings:
    def test_valid(self) -> None:
        settings = DiscordSettings(bot_token="t", application_id="1", public_key=PUBLIC_KEY)

        assert settings.validate() == []
        assert settings.api_endpoint == f"{DISCORD_API_BASE_URL}/v10"

    def test_missing_credentials(self) -> None:
        errors = DiscordSettings().validate()

        assert len(errors) == 3
        assert any("DISCORD_PUBLIC_KEY" in error for error in errors)

    def test_malformed_public_key(self) -> None:
        settings = DiscordSettings(bot_token="t", application_id="1", public_key="xyz")

        assert settings.validate() == ["DISCORD_PUBLIC_KEY deve ter 64 caracteres hexadecimais"]

    def test_non_positive_timeout(self) -> None:
        settings = DiscordSettings(
            bot_token="t",
            application_id="1",
            public_key=PUBLIC_KEY,
            request_timeout_seconds=0,
        )

        assert settings.validate() == ["DISCORD_REQUEST_TIMEOUT_SECONDS deve ser > 0"]

    def test_load_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DISCORD_BOT_TOKEN", "token")
        monkeypatch.setenv("DISCORD_APPLICATION_ID", "123")
        monkeypatch.setenv("DISCORD_PUBLIC_KEY", PUBLIC_KEY)
        monkeypatch.setenv("DISCORD_API_VERSION", "v9")
        monkeypatch.setenv("DISCORD_REQUEST_TIMEOUT_SECONDS", "1.5")

        settings = get_discord_settings()

        assert settings.bot_token == "token"
        assert settings.api_endpoint.endswith("/v9")
        assert settings.request_timeout_seconds == 1.5
        assert get_discord_settings() is settings


class TestBaseSettings:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("prod", "production"), ("staging", "staging"), ("anything", "development")],
    )
    def test_environment_parsing(
        self,
        monkeypatch: pytest.MonkeyPatch,
        raw: str,
        expected: str,
    ) -> None:
        monkeypatch.setenv("ENVIRONMENT", raw)

        assert get_base_settings().environment == expected

    def test_strict_environments(self) -> None:
        assert BaseSettings(environment="staging").is_strict is True
        assert BaseSettings(environment="production").is_strict is True
        assert BaseSettings().is_strict is False

    def test_invalid_log_level(self) -> None:
        assert BaseSettings(log_level="LOUD").validate() == ["LOG_LEVEL inválido: LOUD"]
