"""Settings específicas de WhatsApp.

Configurações do canal WhatsApp via Graph API.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Constantes do Graph API
GRAPH_API_VERSION: str = "v16.0"
GRAPH_API_BASE_URL: str = "https://graph.facebook.com"


@dataclass(frozen=True)
class WhatsAppSettings:
    """Configurações do canal WhatsApp.

    Attributes:
        verify_token: Token para verificação de webhook (hub.verify_token)
        app_secret: Secret do app Meta para validação HMAC (opcional)
        access_token: Token de acesso à Graph API
        phone_number_id: ID do número de telefone do negócio
        business_account_id: ID da conta de negócios (WABA), o tenant
        api_version: Versão da Graph API (ex: v16.0)
        api_base_url: URL base da Graph API
        request_timeout_seconds: Timeout para requisições HTTP
        media_upload_timeout_seconds: Timeout para upload de mídia
    """

    # Credenciais
    verify_token: str = ""
    app_secret: str = ""
    access_token: str = ""
    phone_number_id: str = ""
    business_account_id: str = ""

    # API
    api_version: str = GRAPH_API_VERSION
    api_base_url: str = GRAPH_API_BASE_URL

    # Timeouts
    request_timeout_seconds: float = 30.0
    media_upload_timeout_seconds: float = 120.0

    @property
    def api_endpoint(self) -> str:
        """URL base completa da API com versão."""
        return f"{self.api_base_url}/{self.api_version}"

    @property
    def messages_path(self) -> str:
        """Path relativo para envio de mensagens."""
        return f"/{self.phone_number_id}/messages"

    @property
    def media_path(self) -> str:
        """Path relativo para upload de mídia."""
        return f"/{self.phone_number_id}/media"

    @property
    def templates_path(self) -> str:
        """Path relativo de templates da WABA."""
        return f"/{self.business_account_id}/message_templates"

    def validate(self) -> list[str]:
        """Valida configurações mínimas de WhatsApp.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.verify_token:
            errors.append("WHATSAPP_VERIFY_TOKEN não configurado")

        if not self.business_account_id:
            errors.append("WHATSAPP_BUSINESS_ACCOUNT_ID não configurado")

        if not self.phone_number_id:
            errors.append("WHATSAPP_PHONE_NUMBER_ID não configurado")

        if not self.access_token:
            errors.append("WHATSAPP_ACCESS_TOKEN não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("WHATSAPP_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.media_upload_timeout_seconds <= 0:
            errors.append("WHATSAPP_MEDIA_UPLOAD_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> WhatsAppSettings:
    """Carrega WhatsAppSettings a partir de variáveis de ambiente."""
    return WhatsAppSettings(
        verify_token=os.getenv("WHATSAPP_VERIFY_TOKEN", ""),
        app_secret=os.getenv("WHATSAPP_APP_SECRET", ""),
        access_token=os.getenv("WHATSAPP_ACCESS_TOKEN", ""),
        phone_number_id=os.getenv("WHATSAPP_PHONE_NUMBER_ID", ""),
        business_account_id=os.getenv("WHATSAPP_BUSINESS_ACCOUNT_ID", ""),
        api_version=os.getenv("WHATSAPP_API_VERSION", GRAPH_API_VERSION),
        api_base_url=os.getenv("WHATSAPP_API_BASE_URL", GRAPH_API_BASE_URL),
        request_timeout_seconds=float(
            os.getenv("WHATSAPP_REQUEST_TIMEOUT_SECONDS", "30")
        ),
        media_upload_timeout_seconds=float(
            os.getenv("WHATSAPP_MEDIA_UPLOAD_TIMEOUT_SECONDS", "120")
        ),
    )


@lru_cache(maxsize=1)
def get_whatsapp_settings() -> WhatsAppSettings:
    """Retorna instância cacheada de WhatsAppSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
