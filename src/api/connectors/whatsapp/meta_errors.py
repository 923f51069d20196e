"""Erros e helpers de parsing para API Meta/WhatsApp."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class WhatsAppApiError:
    """Erro retornado pela API Meta/WhatsApp."""

    error_type: str
    error_code: int
    error_message: str
    details: str | None = None


def parse_meta_error(response_data: Any) -> WhatsAppApiError | None:
    """Extrai informações de erro do response da Meta.

    Formato Meta:
        {"error": {"type": "...", "code": 131047, "message": "...",
                   "error_data": {"details": "..."}}}

    Args:
        response_data: Response JSON já desserializado

    Returns:
        WhatsAppApiError se houver erro, None se sucesso
    """
    if not isinstance(response_data, dict):
        return None
    error_obj = response_data.get("error")
    if not error_obj or not isinstance(error_obj, dict):
        return None

    error_data = error_obj.get("error_data")
    details = error_data.get("details") if isinstance(error_data, dict) else None

    try:
        error_code = int(error_obj.get("code") or 0)
    except (TypeError, ValueError):
        error_code = 0

    return WhatsAppApiError(
        error_type=str(error_obj.get("type", "unknown")),
        error_code=error_code,
        error_message=str(error_obj.get("message", "Erro desconhecido")),
        details=details,
    )
