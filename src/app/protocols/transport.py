"""Protocolo de transporte usado pelo app.

Evita dependência direta da camada api: handlers e serviços de saída
dependem apenas de `request(method, path, ...)`.
"""

from __future__ import annotations

from typing import Any, Protocol


class TransportProtocol(Protocol):
    """Contrato mínimo para chamadas à Graph API."""

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
    ) -> dict[str, Any]: ...
