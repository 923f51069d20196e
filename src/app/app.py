"""Aplicação ASGI (FastAPI) do dispatcher.

Uso:
    builder = BotBuilder(get_whatsapp_settings())
    builder.text("oi", on_greeting).default(on_default).error_message(on_error)
    app = create_app(builder.build())

    uvicorn meu_bot:app --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import initialize_app, validate_runtime_settings
from config.logging import get_logger
from config.settings import get_base_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from app.bot import WhatsAppBot

logger = get_logger(__name__)


def create_app(bot: WhatsAppBot) -> FastAPI:
    """Cria e configura a aplicação FastAPI para um bot construído.

    Returns:
        Aplicação FastAPI configurada.
    """
    service_name = get_base_settings().service_name

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Configura logging e valida settings no startup; fecha o cliente HTTP no shutdown."""
        initialize_app()
        logger.info("app_starting", extra={"service": service_name})
        validate_runtime_settings(bot.settings)
        app.state.bot = bot

        yield

        logger.info("app_shutting_down", extra={"service": service_name})
        await bot.aclose()

    fastapi_app = FastAPI(
        title="wa_dispatcher",
        description="Dispatcher de webhooks WhatsApp Business",
        version="1.0.0",
        lifespan=lifespan,
    )
    fastapi_app.include_router(create_api_router(bot))

    logger.info("app_configured", extra={"service": service_name})
    return fastapi_app
