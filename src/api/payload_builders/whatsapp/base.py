"""Envelope comum de mensagens outbound."""

from __future__ import annotations

from typing import Any


def build_message_payload(to: str, message_type: str, body: Any) -> dict[str, Any]:
    """Constrói o payload de /messages.

    Args:
        to: Telefone do destinatário
        message_type: Tipo (text, document, sticker, template, interactive)
        body: Conteúdo específico do tipo, enviado sob a chave do tipo

    Returns:
        Payload completo conforme API Meta
    """
    return {
        "messaging_product": "whatsapp",
        "recipient_type": "individual",
        "to": to,
        "type": str(message_type),
        str(message_type): body,
    }


def build_read_receipt_payload(message_id: str) -> dict[str, Any]:
    """Payload para marcar uma mensagem inbound como lida."""
    return {
        "messaging_product": "whatsapp",
        "status": "read",
        "message_id": message_id,
    }
