"""Bootstrap da aplicação: inicialização e validação de runtime.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings

    initialize_app()
    validate_runtime_settings()
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_whatsapp_settings

if TYPE_CHECKING:
    from config.settings import WhatsAppSettings

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging estruturado JSON com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings(whatsapp: WhatsAppSettings | None = None) -> list[str]:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` apenas registra alerta.

    Returns:
        Lista de erros encontrados (vazia = OK)

    Raises:
        RuntimeError: Settings inválidas em ambiente estrito
    """
    base = get_base_settings()
    errors: list[str] = [f"base: {error}" for error in base.validate()]
    wa_settings = whatsapp or get_whatsapp_settings()
    errors.extend(f"whatsapp: {error}" for error in wa_settings.validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return errors

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.is_strict:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")
    return errors
