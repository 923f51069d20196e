"""Normalizer de envelopes de webhook WhatsApp Business API.

Responsabilidades:
- Validar shape do envelope e identidade do tenant (WABA)
- Extrair o único registro ativo (messages[0] ou statuses[0])
- Produzir mensagem canônica com folding de kinds

Apenas entry[0] e changes[0] são lidos: a Meta entrega lotes de um item.
Função pura: o envelope de entrada nunca é alterado.
"""

from __future__ import annotations

import copy
import logging
from typing import Any

from app.constants.whatsapp import WEBHOOK_OBJECT, MessageKind, RawMessageType
from app.protocols.errors import EnvelopeValidationError
from app.protocols.models import (
    CanonicalMessage,
    DegradedMessage,
    ParsedWebhook,
    Sender,
    StatusNotification,
    UserMessage,
)

from ._extraction_helpers import (
    copy_block,
    extract_body,
    extract_contact_name,
    extract_errors,
    extract_interactive_reply,
    extract_thread,
    first_item,
    is_unsupported,
)

logger = logging.getLogger(__name__)


def parse_envelope(envelope: Any, expected_tenant_id: str) -> ParsedWebhook:
    """Valida e normaliza um envelope de webhook.

    Args:
        envelope: Payload JSON já desserializado
        expected_tenant_id: WABA ID configurado para esta instância

    Returns:
        ParsedWebhook com a mensagem canônica (ou None para ping vazio)

    Raises:
        EnvelopeValidationError: Se o envelope for malformado ou de outro tenant
    """
    if not envelope or not isinstance(envelope, dict):
        raise EnvelopeValidationError("envelope is required")

    entry = first_item(envelope.get("entry"))
    if not isinstance(entry, dict):
        raise EnvelopeValidationError(
            'envelope is not a valid whatsapp message. Hint: check the "entry" property'
        )

    tenant_id = entry.get("id")
    if tenant_id != expected_tenant_id:
        raise EnvelopeValidationError(
            "tenant id mismatch. Hint: the message is not intended for this "
            "WhatsApp Business Account."
        )

    if envelope.get("object") != WEBHOOK_OBJECT:
        raise EnvelopeValidationError(
            'envelope is not a valid whatsapp message. Hint: check the "object" property'
        )

    change = first_item(entry.get("changes"))
    if not isinstance(change, dict):
        raise EnvelopeValidationError(
            'envelope is not a valid whatsapp message. Hint: check the "changes" property'
        )

    value = change.get("value")
    if not isinstance(value, dict):
        value = {}

    contact = copy_block(first_item(value.get("contacts")))
    status = first_item(value.get("statuses"))
    message = first_item(value.get("messages"))

    canonical: CanonicalMessage | None = None
    if isinstance(status, dict):
        canonical = normalize_status(status)
    elif isinstance(message, dict):
        canonical = normalize_message(message, contact)
    else:
        logger.warning(
            "unidentified_webhook_payload",
            extra={"tenant_id": tenant_id, "value_keys": sorted(value.keys())},
        )

    return ParsedWebhook(
        tenant_id=tenant_id,
        metadata=copy_block(value.get("metadata")),
        contact=contact,
        message=canonical,
    )


def normalize_status(status: dict[str, Any]) -> StatusNotification:
    """Converte statuses[0] em StatusNotification.

    Payloads de status nunca trazem nome de perfil.
    """
    return StatusNotification(
        notification_kind=str(status.get("status", "")),
        sender=Sender(phone=str(status.get("recipient_id", "")), name=None),
        message_id=status.get("id"),
        errors=extract_errors(status),
        raw=copy.deepcopy(status),
    )


def normalize_message(
    msg: dict[str, Any],
    contact: dict[str, Any] | None,
) -> UserMessage | DegradedMessage:
    """Converte messages[0] em UserMessage (ou DegradedMessage).

    Args:
        msg: Mensagem bruta
        contact: contacts[0] do mesmo change, se houver
    """
    message_type = str(msg.get("type", ""))
    sender = Sender(phone=str(msg.get("from", "")), name=extract_contact_name(contact))
    message_id = msg.get("id") or None

    if is_unsupported(message_type):
        errors = extract_errors(msg)
        if errors:
            logger.info(
                "unsupported_message_with_errors",
                extra={"message_id": message_id, "error_count": len(errors)},
            )
            return DegradedMessage(
                kind=MessageKind.UNKNOWN_MESSAGE,
                message_id=message_id,
                sender=sender,
                errors=errors,
                raw=copy.deepcopy(msg),
            )
        return _build_user_message(msg, MessageKind.UNKNOWN_MESSAGE, sender, message_id)

    if message_type == RawMessageType.INTERACTIVE:
        kind, list_reply, button_reply = extract_interactive_reply(msg)
        return _build_user_message(
            msg,
            kind or message_type,
            sender,
            message_id,
            list_reply=list_reply,
            button_reply=button_reply,
        )

    return _build_user_message(msg, message_type, sender, message_id)


def _build_user_message(
    msg: dict[str, Any],
    kind: str,
    sender: Sender,
    message_id: str | None,
    *,
    list_reply: dict[str, Any] | None = None,
    button_reply: dict[str, Any] | None = None,
) -> UserMessage:
    message_type = str(msg.get("type", ""))
    return UserMessage(
        kind=str(kind),
        message_id=message_id,
        sender=sender,
        body=extract_body(msg, message_type),
        list_reply=list_reply,
        button_reply=button_reply,
        thread=extract_thread(msg),
        timestamp=msg.get("timestamp"),
        raw=copy.deepcopy(msg),
    )
