"""Testes de settings carregadas do ambiente."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from config.settings import (
    GRAPH_API_VERSION,
    WhatsAppSettings,
    get_base_settings,
    get_whatsapp_settings,
)


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Iterator[None]:
    get_whatsapp_settings.cache_clear()
    get_base_settings.cache_clear()
    yield
    get_whatsapp_settings.cache_clear()
    get_base_settings.cache_clear()


def test_whatsapp_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WHATSAPP_VERIFY_TOKEN", "verify")
    monkeypatch.setenv("WHATSAPP_ACCESS_TOKEN", "token")
    monkeypatch.setenv("WHATSAPP_PHONE_NUMBER_ID", "111")
    monkeypatch.setenv("WHATSAPP_BUSINESS_ACCOUNT_ID", "222")
    monkeypatch.setenv("WHATSAPP_REQUEST_TIMEOUT_SECONDS", "5")
    monkeypatch.delenv("WHATSAPP_API_VERSION", raising=False)

    settings = get_whatsapp_settings()

    assert settings.api_version == GRAPH_API_VERSION == "v16.0"
    assert settings.api_endpoint == "https://graph.facebook.com/v16.0"
    assert settings.messages_path == "/111/messages"
    assert settings.media_path == "/111/media"
    assert settings.templates_path == "/222/message_templates"
    assert settings.request_timeout_seconds == 5.0
    assert settings.validate() == []
    assert get_whatsapp_settings() is settings


def test_whatsapp_settings_validate_reports_missing_fields() -> None:
    errors = WhatsAppSettings(request_timeout_seconds=0).validate()

    assert "WHATSAPP_VERIFY_TOKEN não configurado" in errors
    assert "WHATSAPP_BUSINESS_ACCOUNT_ID não configurado" in errors
    assert "WHATSAPP_PHONE_NUMBER_ID não configurado" in errors
    assert "WHATSAPP_ACCESS_TOKEN não configurado" in errors
    assert "WHATSAPP_REQUEST_TIMEOUT_SECONDS deve ser > 0" in errors


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("prod", "production"), ("STAGING", "staging"), ("qualquer", "development")],
)
def test_base_settings_environment(
    monkeypatch: pytest.MonkeyPatch, raw: str, expected: str
) -> None:
    monkeypatch.setenv("ENVIRONMENT", raw)

    settings = get_base_settings()

    assert settings.environment == expected
    assert settings.is_strict is (expected != "development")


def test_base_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SERVICE_NAME", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = get_base_settings()

    assert settings.service_name == "wa_dispatcher"
    assert settings.log_level == "DEBUG"
    assert settings.validate() == []
