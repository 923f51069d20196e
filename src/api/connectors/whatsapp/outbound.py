"""Envio de mensagens outbound via Graph API.

Operações finas sobre o transport: montam o payload e fazem um POST em
/{phone_number_id}/messages. Falhas de envio propagam como HttpError;
apenas o recibo de leitura é tolerante a falhas.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from api.connectors.whatsapp.http_base import HttpError
from api.payload_builders.whatsapp import (
    build_message_payload,
    build_read_receipt_payload,
    build_template_body,
)
from app.constants.whatsapp import OutboundType

if TYPE_CHECKING:
    from app.protocols.transport import TransportProtocol

logger = logging.getLogger(__name__)

# Meta recusa recibo de leitura para mensagens anteriores à última vista
_LAST_SEEN_MARKER = "last-seen message in this conversation"


@dataclass(frozen=True, slots=True)
class ReadReceiptResult:
    """Resultado de mark_as_read.

    success=True com acknowledged=False indica a recusa benigna "last-seen".
    """

    success: bool
    acknowledged: bool = False
    error: str | None = None


class WhatsAppOutbound:
    """Operações de envio para um número de negócio."""

    def __init__(self, transport: TransportProtocol, phone_number_id: str) -> None:
        self._transport = transport
        self._messages_path = f"/{phone_number_id}/messages"

    async def _post_message(self, to: str, message_type: str, body: Any) -> dict[str, Any]:
        payload = build_message_payload(to, message_type, body)
        response = await self._transport.request("POST", self._messages_path, json=payload)
        logger.info("outbound_message_sent", extra={"message_type": str(message_type)})
        return response

    async def mark_as_read(self, message_id: str | None) -> ReadReceiptResult | None:
        """Marca mensagem inbound como lida.

        Returns:
            None se message_id vazio; caso contrário o resultado do recibo.
            Nunca levanta HttpError.
        """
        if not message_id:
            return None
        try:
            await self._transport.request(
                "POST",
                self._messages_path,
                json=build_read_receipt_payload(message_id),
            )
        except HttpError as exc:
            details = exc.details.get("details")
            if isinstance(details, str) and _LAST_SEEN_MARKER in details:
                logger.info("read_receipt_not_acknowledged", extra={"reason": "last_seen"})
                return ReadReceiptResult(success=True, acknowledged=False, error=details)
            logger.warning(
                "read_receipt_failed",
                extra={"status_code": exc.status_code, "error": str(exc)},
            )
            return ReadReceiptResult(success=False, error=str(exc))
        return ReadReceiptResult(success=True, acknowledged=True)

    async def send_text(self, to: str, body: dict[str, Any]) -> dict[str, Any]:
        """Envia mensagem de texto. `body` segue o formato Meta ({"body": ...})."""
        return await self._post_message(to, OutboundType.TEXT, body)

    async def send_document(
        self,
        to: str,
        body: dict[str, Any],
        is_sticker: bool = False,
    ) -> dict[str, Any]:
        """Envia documento (ou sticker) já hospedado ou previamente enviado."""
        message_type = OutboundType.STICKER if is_sticker else OutboundType.DOCUMENT
        return await self._post_message(to, message_type, body)

    async def send_template(
        self,
        to: str,
        template_name: str,
        language_code: str,
        components: list[dict[str, Any]] | None = None,
    ) -> dict[str, Any]:
        """Envia template aprovado."""
        body = build_template_body(template_name, language_code, components)
        return await self._post_message(to, OutboundType.TEMPLATE, body)

    async def send_interactive(self, to: str, components: dict[str, Any]) -> dict[str, Any]:
        """Envia mensagem interativa (listas, botões)."""
        return await self._post_message(to, OutboundType.INTERACTIVE, components)
