"""Builders de payload para API Meta/WhatsApp."""

from api.payload_builders.whatsapp.base import (
    build_message_payload,
    build_read_receipt_payload,
)
from api.payload_builders.whatsapp.template import build_template_body

__all__ = [
    "build_message_payload",
    "build_read_receipt_payload",
    "build_template_body",
]
