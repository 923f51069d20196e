"""Webhook WhatsApp: verificação, assinatura e parsing seguro."""

from ..signature import SIGNATURE_HEADER, SignatureResult, verify_meta_signature
from .receive import (
    InvalidJsonError,
    InvalidSignatureError,
    WebhookRequestError,
    parse_webhook_request,
)
from .verify import WebhookChallengeError, verify_webhook_challenge

__all__ = [
    "SIGNATURE_HEADER",
    "InvalidJsonError",
    "InvalidSignatureError",
    "SignatureResult",
    "WebhookChallengeError",
    "WebhookRequestError",
    "parse_webhook_request",
    "verify_meta_signature",
    "verify_webhook_challenge",
]
