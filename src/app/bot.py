"""Bot WhatsApp: registro de handlers e processamento de webhooks.

Uso:
    builder = BotBuilder(get_whatsapp_settings())

    @builder.text("oi")
    async def greet(props: CallbackProps) -> None:
        await bot.outbound.send_text(props.sender, {"body": "Olá!"})

    builder.default(on_default).error_message(on_error)
    bot = builder.build()

    await bot.handle_webhook(envelope)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.connectors.whatsapp.http_client import create_whatsapp_http_client
from api.connectors.whatsapp.media import WhatsAppMedia
from api.connectors.whatsapp.outbound import WhatsAppOutbound
from api.connectors.whatsapp.templates import TemplateManager
from api.connectors.whatsapp.webhook import verify_webhook_challenge
from api.normalizers.whatsapp import parse_envelope
from app.constants.whatsapp import MessageKind, ReservedKind
from app.dispatch import DispatchRouter, HandlerRegistryBuilder
from app.protocols.errors import ConfigurationError
from app.protocols.models import UserMessage

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.protocols.models import Handler, ParsedWebhook
    from app.protocols.transport import TransportProtocol
    from config.settings import WhatsAppSettings

logger = logging.getLogger(__name__)

MANDATORY_FIELDS = (
    "verify_token",
    "business_account_id",
    "phone_number_id",
    "access_token",
)


class BotBuilder:
    """Acumula handlers e produz um WhatsAppBot pronto para uso.

    Cada método de registro aceita o callback diretamente (e devolve o
    builder) ou, sem callback, funciona como decorator.
    """

    def __init__(
        self,
        settings: WhatsAppSettings,
        http_client: TransportProtocol | None = None,
    ) -> None:
        for field_name in MANDATORY_FIELDS:
            if not getattr(settings, field_name, None):
                raise ConfigurationError(f"{field_name} is mandatory!")
        self._settings = settings
        self._http_client = http_client
        self._registry = HandlerRegistryBuilder()

    def _register(
        self,
        kind: str,
        identity: str | None,
        callback: Handler | None,
    ) -> Any:
        if callback is not None:
            self._registry.add(kind, identity, callback)
            return self

        def decorator(func: Handler) -> Handler:
            self._registry.add(kind, identity, func)
            return func

        return decorator

    def text(self, message: str, callback: Handler | None = None) -> Any:
        """Handler para um texto exato recebido."""
        return self._register(MessageKind.TEXT, message, callback)

    def image(self, callback: Handler | None = None) -> Any:
        """Handler único para qualquer imagem recebida."""
        return self._register(MessageKind.IMAGE, None, callback)

    def document(self, callback: Handler | None = None) -> Any:
        """Handler único para qualquer documento recebido."""
        return self._register(MessageKind.DOCUMENT, None, callback)

    def button(self, payload: str, callback: Handler | None = None) -> Any:
        """Handler para o payload de um botão de template."""
        return self._register(MessageKind.BUTTON, payload, callback)

    def interactive_radio(self, radio_id: str, callback: Handler | None = None) -> Any:
        """Handler para o id de uma opção de lista interativa."""
        return self._register(MessageKind.RADIO_BUTTON, radio_id, callback)

    def interactive_button(self, button_id: str, callback: Handler | None = None) -> Any:
        """Handler para o id de um botão interativo."""
        return self._register(MessageKind.SIMPLE_BUTTON, button_id, callback)

    def default(self, callback: Handler | None = None) -> Any:
        """Handler obrigatório acionado quando nenhum outro casa."""
        return self._register(ReservedKind.DEFAULT, None, callback)

    def error_message(self, callback: Handler | None = None) -> Any:
        """Handler obrigatório acionado em qualquer falha de processamento."""
        return self._register(ReservedKind.ERROR, None, callback)

    def build(self) -> WhatsAppBot:
        """Sela o registry e monta o bot.

        Raises:
            ConfigurationError: DEFAULT ou ERROR não registrados
        """
        registry = self._registry.finish()
        http_client = self._http_client or create_whatsapp_http_client(self._settings)
        logger.info("whatsapp_bot_built", extra={"kinds": sorted(registry.kinds())})
        return WhatsAppBot(self._settings, DispatchRouter(registry), http_client)


class WhatsAppBot:
    """Bot pronto: normaliza, confirma leitura e despacha webhooks."""

    def __init__(
        self,
        settings: WhatsAppSettings,
        router: DispatchRouter,
        http_client: TransportProtocol,
    ) -> None:
        self._settings = settings
        self._router = router
        self._http_client = http_client
        self._outbound = WhatsAppOutbound(http_client, settings.phone_number_id)
        self._media = WhatsAppMedia(
            http_client,
            settings.phone_number_id,
            upload_timeout_seconds=settings.media_upload_timeout_seconds,
        )
        self._templates = TemplateManager(http_client, settings.business_account_id)

    @property
    def settings(self) -> WhatsAppSettings:
        return self._settings

    @property
    def router(self) -> DispatchRouter:
        return self._router

    @property
    def http_client(self) -> TransportProtocol:
        return self._http_client

    @property
    def outbound(self) -> WhatsAppOutbound:
        return self._outbound

    @property
    def media(self) -> WhatsAppMedia:
        return self._media

    @property
    def templates(self) -> TemplateManager:
        return self._templates

    def verify_challenge(
        self,
        hub_mode: str | None,
        hub_verify_token: str | None,
        hub_challenge: str | None,
    ) -> str:
        """Responde ao desafio de verificação do webhook.

        Raises:
            WebhookChallengeError: Parâmetros ausentes ou token divergente
        """
        return verify_webhook_challenge(
            hub_mode, hub_verify_token, hub_challenge, self._settings.verify_token
        )

    async def handle_webhook(self, envelope: Any) -> ParsedWebhook:
        """Processa um envelope de webhook.

        1. Normaliza (falha vai para ERROR sem remetente e é relançada)
        2. Mensagem de usuário: marca como lida (falha vai para ERROR
           com o remetente e é relançada)
        3. Despacha pelo router

        Returns:
            ParsedWebhook normalizado
        """
        try:
            parsed = parse_envelope(envelope, self._settings.business_account_id)
        except Exception as exc:
            await self._router.report_error(None, exc)
            raise

        message = parsed.message
        if message is None:
            return parsed

        if isinstance(message, UserMessage):
            try:
                await self._outbound.mark_as_read(message.message_id)
            except Exception as exc:
                await self._router.report_error(message.sender.phone, exc)
                raise

        await self._router.route(message)
        return parsed

    async def aclose(self) -> None:
        """Fecha o cliente HTTP, quando ele expõe aclose()."""
        close: Callable[[], Any] | None = getattr(self._http_client, "aclose", None)
        if close is not None:
            await close()
