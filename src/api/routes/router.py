"""Agregador de rotas.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router(bot))
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.whatsapp.router import create_whatsapp_router

if TYPE_CHECKING:
    from app.bot import WhatsAppBot


def create_api_router(bot: WhatsAppBot) -> APIRouter:
    """Cria router principal com health e webhook WhatsApp.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Health check na raiz
    api_router.include_router(health_router, tags=["health"])

    # WhatsApp (/webhook/whatsapp)
    api_router.include_router(create_whatsapp_router(bot), tags=["whatsapp"])

    return api_router
