"""Testes de validate_runtime_settings."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from app.bootstrap import initialize_app, validate_runtime_settings
from config.logging import CorrelationIdFilter
from config.settings import WhatsAppSettings, get_base_settings

VALID = WhatsAppSettings(
    verify_token="verify",
    access_token="token",
    phone_number_id="111",
    business_account_id="222",
)


@pytest.fixture(autouse=True)
def _clear_base_cache() -> Iterator[None]:
    get_base_settings.cache_clear()
    yield
    get_base_settings.cache_clear()


def test_valid_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")

    assert validate_runtime_settings(VALID) == []


def test_invalid_settings_warn_in_development(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "development")

    errors = validate_runtime_settings(WhatsAppSettings())

    assert "whatsapp: WHATSAPP_ACCESS_TOKEN não configurado" in errors


def test_invalid_settings_fail_in_production(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")

    with pytest.raises(RuntimeError, match="Configuração inválida para production"):
        validate_runtime_settings(WhatsAppSettings())


def test_initialize_app_installs_json_handler(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")

    initialize_app()

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert any(isinstance(f, CorrelationIdFilter) for f in root.handlers[0].filters)
