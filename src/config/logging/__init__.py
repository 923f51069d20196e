"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (app/bootstrap)
    configure_logging(level="INFO", service_name="wa_dispatcher")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("dispatch_default", extra={"kind": "text"})

Todo log carrega correlation_id e service. Nunca logar telefone ou texto
de mensagem.
"""

from config.logging.config import (
    DEFAULT_SERVICE_NAME,
    VALID_LOG_LEVELS,
    configure_logging,
    get_logger,
)
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "DEFAULT_SERVICE_NAME",
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "VALID_LOG_LEVELS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
