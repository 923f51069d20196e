"""Router principal do WhatsApp: agrega os endpoints do canal."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter

from api.routes.whatsapp.webhook import create_webhook_router

if TYPE_CHECKING:
    from app.bot import WhatsAppBot


def create_whatsapp_router(bot: WhatsAppBot) -> APIRouter:
    """Webhook (GET challenge, POST eventos) do bot informado."""
    router = APIRouter()
    router.include_router(create_webhook_router(bot))
    return router
