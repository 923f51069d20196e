"""Correlation_id por entrega de webhook.

Guardado em ContextVar: cada entrega concorrente enxerga o próprio valor,
inclusive dentro dos handlers assíncronos que ela dispara.
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

CORRELATION_ID_HEADER = "x-correlation-id"

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def generate_correlation_id() -> str:
    """Gera um novo correlation_id (UUID v4)."""
    return str(uuid.uuid4())


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual ou string vazia."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id; gera um novo quando ausente.

    Returns:
        Token para reset_correlation_id().
    """
    return _correlation_id.set(correlation_id or generate_correlation_id())


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o valor anterior."""
    _correlation_id.reset(token)
