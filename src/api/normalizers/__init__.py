"""Normalizers por canal: conversão de payloads externos para modelos internos.

Estrutura:
- whatsapp/: normalizer WhatsApp Business API
"""

from .whatsapp import normalize_message, normalize_status, parse_envelope

__all__ = [
    "normalize_message",
    "normalize_status",
    "parse_envelope",
]
