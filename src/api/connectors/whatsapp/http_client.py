"""Cliente HTTP especializado para WhatsApp/Meta Graph API.

É o colaborador "transport" do dispatcher: `request(method, path, ...)`
devolve o JSON da Meta ou levanta HttpError. Handlers, outbound, mídia e
templates passam todos por aqui.

- Authorization Bearer em toda chamada
- Erros Meta (error.type, error.code) convertidos em HttpError
- Logging estruturado sem tokens, números ou conteúdo
"""

from __future__ import annotations

import json
import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Any

from api.connectors.whatsapp.http_base import HttpClient, HttpClientConfig, HttpError
from api.connectors.whatsapp.meta_errors import parse_meta_error
from api.connectors.whatsapp.meta_logging import log_meta_error, log_success

if TYPE_CHECKING:
    import httpx

    from config.settings import WhatsAppSettings

logger: logging.Logger = logging.getLogger(__name__)


class WhatsAppHttpClient(HttpClient):
    """Cliente HTTP para a Graph API com autenticação por access_token."""

    def __init__(
        self,
        access_token: str,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Inicializa cliente WhatsApp.

        Args:
            access_token: Bearer token da Graph API
            config: Configuração HTTP base (base_url com versão)
            transport: Transport httpx alternativo (testes)

        Raises:
            ValueError: Se access_token estiver vazio
        """
        if not access_token or not access_token.strip():
            raise ValueError(
                "access_token é obrigatório. Verifique se WHATSAPP_ACCESS_TOKEN está configurado."
            )
        config = config or HttpClientConfig()
        config = replace(
            config,
            default_headers={
                **config.default_headers,
                "Authorization": f"Bearer {access_token}",
            },
        )
        super().__init__(config, transport=transport)

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
        files: dict[str, Any] | None = None,
        timeout: float | None = None,
    ) -> dict[str, Any]:
        """Executa chamada à Graph API.

        Args:
            method: Verbo HTTP (GET, POST, DELETE)
            path: Path relativo à versão da API (ex: /123/messages)
            json: Corpo JSON
            params: Query string
            data: Campos de formulário (multipart junto com files)
            files: Arquivos para upload multipart
            timeout: Timeout específico da chamada

        Returns:
            Response JSON da Meta

        Raises:
            HttpError: Falha de rede, status >= 400 ou erro Meta no corpo
        """
        response = await self.send(
            method,
            path,
            json=json,
            params=params,
            data=data,
            files=files,
            timeout=timeout,
        )
        return self._process_response(response, method, path)

    def _process_response(
        self,
        response: httpx.Response,
        method: str,
        endpoint: str,
    ) -> dict[str, Any]:
        response_data = self._decode(response, endpoint)

        meta_error = parse_meta_error(response_data)
        if meta_error:
            log_meta_error(meta_error, method, endpoint, response.status_code)
            raise HttpError(
                f"Meta API error: {meta_error.error_type} ({meta_error.error_code})",
                status_code=response.status_code,
                details={
                    "error_type": meta_error.error_type,
                    "error_code": meta_error.error_code,
                    "error_message": meta_error.error_message,
                    "details": meta_error.details,
                },
            )

        if response.status_code >= 400:
            logger.warning(
                "meta_api_http_error",
                extra={"method": method, "endpoint": endpoint, "status_code": response.status_code},
            )
            raise HttpError("http_status_error", status_code=response.status_code)

        log_success(method, endpoint, response.status_code)
        if isinstance(response_data, dict):
            return response_data
        return {"data": response_data}

    def _decode(self, response: httpx.Response, endpoint: str) -> Any:
        if not response.content:
            return {}
        try:
            return response.json()
        except json.JSONDecodeError as e:
            if response.status_code >= 400:
                raise HttpError("http_status_error", status_code=response.status_code) from e
            logger.error("meta_api_invalid_json", extra={"endpoint": endpoint})
            raise HttpError("Response JSON inválido", status_code=response.status_code) from e


def create_whatsapp_http_client(
    settings: WhatsAppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> WhatsAppHttpClient:
    """Factory para criar cliente WhatsApp a partir das settings.

    Args:
        settings: WhatsAppSettings opcional. Se None, carrega do ambiente.
        transport: Transport httpx alternativo (testes)

    Returns:
        Cliente HTTP configurado para a Graph API.
    """
    # Import local para evitar dependência circular
    from config.settings import get_whatsapp_settings

    whatsapp = settings or get_whatsapp_settings()
    config = HttpClientConfig(
        base_url=whatsapp.api_endpoint,
        timeout_seconds=whatsapp.request_timeout_seconds,
    )
    return WhatsAppHttpClient(whatsapp.access_token, config=config, transport=transport)
