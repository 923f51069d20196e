"""Rotas HTTP do canal WhatsApp."""

from api.routes.whatsapp.router import create_whatsapp_router
from api.routes.whatsapp.webhook import WEBHOOK_PATH, create_webhook_router

__all__ = ["WEBHOOK_PATH", "create_webhook_router", "create_whatsapp_router"]
