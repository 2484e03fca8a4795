"""Testes unitários para config/settings.py.

Valida valores padrão, endpoints e métodos de validação.
"""

from __future__ import annotations

import pytest

from mastermind_client.config.settings import (
    DEFAULT_API_BASE_URL,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    Settings,
    get_settings,
)


class TestSettingsDefaults:
    """Testes para valores padrão de Settings."""

    def test_default_endpoint(self) -> None:
        """Endpoint padrão é o servidor público do jogo."""
        s = Settings()
        assert s.api_base_url == DEFAULT_API_BASE_URL == "https://mastermind.darkube.app"

    def test_default_timeout_is_bounded(self) -> None:
        s = Settings()
        assert s.request_timeout_seconds == DEFAULT_REQUEST_TIMEOUT_SECONDS == 10.0

    def test_default_environment_is_development(self) -> None:
        s = Settings()
        assert s.is_development is True
        assert s.is_production is False

    def test_defaults_are_valid(self) -> None:
        assert Settings().validate_all() == []


class TestSettingsEnv:
    """Leitura de variáveis MASTERMIND_*."""

    def test_reads_prefixed_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MASTERMIND_API_BASE_URL", "http://localhost:8080")
        monkeypatch.setenv("MASTERMIND_COLOR_OUTPUT", "false")
        s = Settings()
        assert s.api_base_url == "http://localhost:8080"
        assert s.color_output is False

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()


class TestSettingsDerived:
    """Valores derivados."""

    def test_user_agent(self) -> None:
        s = Settings(service_name="svc", version="9.9")
        assert s.user_agent == "svc/9.9"


class TestSettingsValidation:
    """Métodos validate_*."""

    def test_rejects_non_http_url(self) -> None:
        errors = Settings(api_base_url="ftp://example.test").validate_api_config()
        assert any("http://" in e for e in errors)

    def test_rejects_empty_url(self) -> None:
        errors = Settings(api_base_url="  ").validate_api_config()
        assert errors == ["MASTERMIND_API_BASE_URL é obrigatório"]

    def test_rejects_plain_http_in_production(self) -> None:
        errors = Settings(
            api_base_url="http://example.test", environment="production"
        ).validate_api_config()
        assert any("https" in e for e in errors)

    @pytest.mark.parametrize("timeout", [0, -1.0])
    def test_rejects_non_positive_timeout(self, timeout: float) -> None:
        errors = Settings(request_timeout_seconds=timeout).validate_api_config()
        assert any("TIMEOUT" in e for e in errors)

    def test_rejects_unknown_log_level_and_format(self) -> None:
        errors = Settings(log_level="LOUD", log_format="xml").validate_logging_config()
        assert len(errors) == 2

    def test_log_level_case_insensitive(self) -> None:
        assert Settings(log_level="debug").validate_logging_config() == []
