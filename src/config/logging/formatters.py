"""Formatter JSON com campos padronizados.

Exemplo de output:
    {
        "asctime": "2026-10-19 10:30:00,123",
        "level": "INFO",
        "logger": "app.dispatch.router",
        "message": "dispatch_identity",
        "correlation_id": "abc-123",
        "service": "wa_dispatcher",
        "kind": "button"
    }
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos obrigatórios em todo log estruturado
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria JsonFormatter com os campos obrigatórios renomeados."""
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
