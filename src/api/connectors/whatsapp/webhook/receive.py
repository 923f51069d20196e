"""Recepção do POST do webhook: assinatura e decodificação do corpo.

Não interpreta o envelope; isso é papel do normalizer.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from ..signature import SignatureResult, verify_meta_signature

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)


class WebhookRequestError(ValueError):
    """Erro base para falhas de recepção do webhook."""


class InvalidSignatureError(WebhookRequestError):
    """Assinatura ausente ou divergente."""


class InvalidJsonError(WebhookRequestError):
    """Corpo vazio, JSON inválido ou que não é objeto."""


def parse_webhook_request(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: str | None,
) -> tuple[dict[str, Any], SignatureResult]:
    """Valida assinatura (quando há secret) e decodifica o JSON.

    Raises:
        InvalidSignatureError: Assinatura inválida
        InvalidJsonError: Corpo não decodifica em um objeto JSON

    Returns:
        (envelope, SignatureResult)
    """
    signature = verify_meta_signature(raw_body, headers, secret)
    if not signature.valid:
        logger.warning("webhook_signature_rejected", extra={"reason": signature.error})
        raise InvalidSignatureError(signature.error or "invalid_signature")

    if not raw_body or not raw_body.strip():
        raise InvalidJsonError("empty_body")

    try:
        envelope = json.loads(raw_body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonError("invalid_json") from exc

    if not isinstance(envelope, dict):
        raise InvalidJsonError("payload_not_object")

    return envelope, signature
