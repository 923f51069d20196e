"""Validação de assinatura HMAC do webhook (X-Hub-Signature-256)."""

from __future__ import annotations

import hashlib
import hmac
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

SIGNATURE_HEADER = "x-hub-signature-256"
_SIGNATURE_PREFIX = "sha256="


@dataclass(frozen=True, slots=True)
class SignatureResult:
    """Resultado da validação.

    skipped=True quando não há app secret configurado.
    """

    valid: bool
    skipped: bool = False
    error: str | None = None


def _get_header(headers: Mapping[str, str], name: str) -> str | None:
    for key, value in headers.items():
        if key.lower() == name:
            return value
    return None


def verify_meta_signature(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: str | None,
) -> SignatureResult:
    """Compara a assinatura enviada pela Meta com o HMAC-SHA256 do corpo.

    Args:
        raw_body: Corpo bruto do request
        headers: Headers recebidos (case-insensitive)
        secret: App secret; se vazio a validação é ignorada

    Returns:
        SignatureResult
    """
    if not secret:
        return SignatureResult(valid=True, skipped=True)

    header = _get_header(headers, SIGNATURE_HEADER)
    if not header:
        return SignatureResult(valid=False, error="missing_signature")
    if not header.startswith(_SIGNATURE_PREFIX):
        return SignatureResult(valid=False, error="invalid_signature_format")

    expected = hmac.new(secret.encode("utf-8"), raw_body, hashlib.sha256).hexdigest()
    received = header[len(_SIGNATURE_PREFIX):]
    if not hmac.compare_digest(expected, received):
        return SignatureResult(valid=False, error="signature_mismatch")
    return SignatureResult(valid=True)
