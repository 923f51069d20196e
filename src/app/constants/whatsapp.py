"""Enums de domínio para tipos de mensagem WhatsApp."""

from __future__ import annotations

from enum import StrEnum

# Valor fixo de `object` em todo envelope de webhook do WhatsApp Business
WEBHOOK_OBJECT = "whatsapp_business_account"


class RawMessageType(StrEnum):
    """Tipos de mensagem como chegam no payload da Meta."""

    TEXT = "text"
    IMAGE = "image"
    DOCUMENT = "document"
    BUTTON = "button"
    INTERACTIVE = "interactive"
    UNSUPPORTED = "unsupported"


class InteractiveReplyType(StrEnum):
    """Sub-tipos de resposta interativa."""

    LIST_REPLY = "list_reply"
    BUTTON_REPLY = "button_reply"


class MessageKind(StrEnum):
    """Kinds normalizados usados como chave primária de dispatch."""

    TEXT = "text"
    IMAGE = "image"
    DOCUMENT = "document"
    BUTTON = "button"
    RADIO_BUTTON = "radio_button"
    SIMPLE_BUTTON = "simple_button"
    UNKNOWN_MESSAGE = "unknown_message"


class ReservedKind(StrEnum):
    """Kinds reservados e obrigatórios no registry."""

    DEFAULT = "DEFAULT"
    ERROR = "ERROR"


class OutboundType(StrEnum):
    """Tipos de conteúdo enviados pela API Meta/WhatsApp."""

    TEXT = "text"
    DOCUMENT = "document"
    STICKER = "sticker"
    TEMPLATE = "template"
    INTERACTIVE = "interactive"
