"""Helpers de logging para API Meta/WhatsApp (sem PII)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .meta_errors import WhatsAppApiError

logger = logging.getLogger(__name__)


def log_meta_error(
    meta_error: WhatsAppApiError,
    method: str,
    endpoint: str,
    status_code: int,
) -> None:
    """Loga erro da Meta sem expor tokens, telefones ou conteúdo."""
    logger.warning(
        "meta_api_error",
        extra={
            "method": method,
            "endpoint": endpoint,
            "status_code": status_code,
            "error_type": meta_error.error_type,
            "error_code": meta_error.error_code,
        },
    )


def log_success(method: str, endpoint: str, status_code: int) -> None:
    """Loga sucesso sem expor dados sensíveis."""
    logger.debug(
        "meta_api_success",
        extra={
            "method": method,
            "endpoint": endpoint,
            "status_code": status_code,
        },
    )
