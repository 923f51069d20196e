"""Configuração centralizada de logging JSON."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "wa_dispatcher"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Instala handler JSON único no logger raiz.

    Chamada uma vez no bootstrap. Chamadas repetidas substituem o handler
    anterior em vez de duplicar saída.

    Args:
        level: Nível de log (case-insensitive).
        service_name: Valor do campo `service` em todo record.
        correlation_id_getter: Função que retorna o correlation_id corrente.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger do módulo; o filter do handler raiz injeta o contexto."""
    return logging.getLogger(name)
