"""Verificação de webhook exigida pela Meta (GET hub.challenge)."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

SUBSCRIBE_MODE = "subscribe"


class WebhookChallengeError(ValueError):
    """Erro de verificação do desafio do webhook."""


def verify_webhook_challenge(
    hub_mode: str | None,
    hub_verify_token: str | None,
    hub_challenge: str | None,
    expected_token: str | None,
) -> str:
    """Valida challenge de webhook e retorna o conteúdo a ser respondido.

    Args:
        hub_mode: Valor de hub.mode
        hub_verify_token: Valor de hub.verify_token
        hub_challenge: Valor de hub.challenge
        expected_token: Token configurado no servidor

    Raises:
        WebhookChallengeError: Parâmetro ausente, modo diferente de
            "subscribe" ou token divergente

    Returns:
        hub.challenge, a ser devolvido como texto puro
    """
    if not expected_token:
        raise WebhookChallengeError("missing_verify_token")

    if not hub_mode or not hub_verify_token or not hub_challenge:
        raise WebhookChallengeError("missing_parameters")

    if hub_mode != SUBSCRIBE_MODE or hub_verify_token != expected_token:
        logger.warning("webhook_verification_failed", extra={"hub_mode": hub_mode})
        raise WebhookChallengeError("verification_failed")

    logger.info("webhook_verified")
    return hub_challenge
