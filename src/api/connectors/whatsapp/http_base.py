"""Cliente HTTP base para conectores da camada API.

Uma tentativa por chamada: política de retry fica a cargo de quem chama.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    base_url: str = ""
    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpError(Exception):
    """Erro de requisição HTTP sem dados sensíveis."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details or {}


class HttpClient:
    """Cliente HTTP assíncrono com um httpx.AsyncClient reutilizável."""

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def config(self) -> HttpClientConfig:
        return self._config

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._config.base_url,
                headers=self._config.default_headers,
                timeout=self._config.timeout_seconds,
                verify=self._config.verify_ssl,
                transport=self._transport,
            )
        return self._client

    async def send(
        self,
        method: str,
        url: str,
        *,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
        files: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> httpx.Response:
        """Executa a requisição.

        Raises:
            HttpError: Em timeout ou falha de conexão
        """
        client = self._get_client()
        try:
            return await client.request(
                method,
                url,
                json=json,
                params=params,
                data=data,
                files=files,
                headers=headers,
                timeout=timeout if timeout is not None else self._config.timeout_seconds,
            )
        except httpx.TimeoutException as exc:
            logger.warning("http_timeout", extra={"method": method, "endpoint": url})
            raise HttpError("http_timeout") from exc
        except httpx.TransportError as exc:
            logger.warning(
                "http_connection_error",
                extra={"method": method, "endpoint": url, "error_type": type(exc).__name__},
            )
            raise HttpError("http_connection_error") from exc

    async def aclose(self) -> None:
        """Fecha o AsyncClient subjacente."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None
