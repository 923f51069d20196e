"""Normalizer WhatsApp: validação e normalização de envelopes de webhook.

Responsabilidades:
- Validar envelope (shape, object, tenant)
- Extrair messages[0] ou statuses[0]
- Produzir mensagem canônica (UserMessage, StatusNotification, DegradedMessage)

Kinds dobrados: interactive/list_reply → radio_button,
interactive/button_reply → simple_button, unsupported → unknown_message.
"""

from .normalizer import normalize_message, normalize_status, parse_envelope

__all__ = [
    "normalize_message",
    "normalize_status",
    "parse_envelope",
]
