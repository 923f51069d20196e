"""Endpoints de webhook do WhatsApp.

Endpoints:
- GET /webhook/whatsapp: verificação de webhook (Meta challenge)
- POST /webhook/whatsapp: recebimento de eventos inbound

Fluxo do POST:
1. Valida assinatura HMAC (quando há app secret) e decodifica o JSON
2. Entrega o envelope ao bot (normalize → read receipt → dispatch)
3. 200 "Success!"; ValidationError → 400; demais falhas → 500
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse, PlainTextResponse

from api.connectors.whatsapp.webhook import (
    InvalidJsonError,
    InvalidSignatureError,
    WebhookChallengeError,
    parse_webhook_request,
)
from app.observability import (
    CORRELATION_ID_HEADER,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.protocols.errors import ValidationError

if TYPE_CHECKING:
    from app.bot import WhatsAppBot

logger = logging.getLogger(__name__)

WEBHOOK_PATH = "/webhook/whatsapp"
SUCCESS_BODY = "Success!"


def create_webhook_router(bot: WhatsAppBot) -> APIRouter:
    """Cria o router de webhook ligado a um bot já construído."""
    router = APIRouter(prefix=WEBHOOK_PATH)

    @router.get("", response_class=PlainTextResponse)
    async def verify_webhook(request: Request) -> Response:
        """Responde hub.challenge como texto puro, ou 403."""
        try:
            challenge = bot.verify_challenge(
                request.query_params.get("hub.mode"),
                request.query_params.get("hub.verify_token"),
                request.query_params.get("hub.challenge"),
            )
        except WebhookChallengeError as exc:
            logger.warning(
                "webhook_challenge_rejected",
                extra={"channel": "whatsapp", "error": str(exc)},
            )
            return PlainTextResponse("Forbidden", status_code=status.HTTP_403_FORBIDDEN)
        return PlainTextResponse(challenge, status_code=status.HTTP_200_OK)

    @router.post("", response_model=None)
    async def receive_webhook(request: Request) -> Response:
        """Processa um envelope inbound de forma síncrona."""
        token = set_correlation_id(request.headers.get(CORRELATION_ID_HEADER))
        try:
            raw_body = await request.body()
            try:
                envelope, signature = parse_webhook_request(
                    raw_body,
                    dict(request.headers),
                    bot.settings.app_secret or None,
                )
            except InvalidSignatureError:
                return PlainTextResponse(
                    "Unauthorized", status_code=status.HTTP_401_UNAUTHORIZED
                )
            except InvalidJsonError as exc:
                logger.warning(
                    "webhook_json_invalid",
                    extra={"channel": "whatsapp", "error": str(exc)},
                )
                return PlainTextResponse(
                    "Bad Request", status_code=status.HTTP_400_BAD_REQUEST
                )

            logger.info(
                "webhook_received",
                extra={
                    "channel": "whatsapp",
                    "correlation_id": get_correlation_id(),
                    "signature_skipped": signature.skipped,
                    "payload_size": len(raw_body),
                },
            )

            try:
                await bot.handle_webhook(envelope)
            except ValidationError as exc:
                logger.warning(
                    "webhook_rejected",
                    extra={"channel": "whatsapp", "error_type": type(exc).__name__},
                )
                return JSONResponse(
                    {"error": str(exc)}, status_code=status.HTTP_400_BAD_REQUEST
                )
            except Exception as exc:
                logger.exception("webhook_processing_failed", extra={"channel": "whatsapp"})
                return JSONResponse(
                    {"error": str(exc) or type(exc).__name__},
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                )

            return PlainTextResponse(SUCCESS_BODY, status_code=status.HTTP_200_OK)
        finally:
            reset_correlation_id(token)

    return router
