"""Dispatch router: entrega a mensagem canônica ao handler correto.

Algoritmo por entrega:
1. Status e mensagens degradadas não são despachados
2. image/document com catch-all registrado: invoca e encerra
3. Calcula a identidade do payload pelo kind
4. (kind, identidade) registrado: invoca com {sender, data}
5. Caso contrário: DEFAULT com {sender} apenas
6. Qualquer falha vai para ERROR com {sender} e é relançada

Sem estado entre entregas: é seguro processar webhooks concorrentes.
"""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING

from app.constants.whatsapp import MessageKind
from app.protocols.models import CallbackProps, UserMessage

if TYPE_CHECKING:
    from app.protocols.models import CanonicalMessage, Handler

    from .registry import HandlerRegistry

logger = logging.getLogger(__name__)

# Kinds cujos handlers nunca usam identidade
_MEDIA_KINDS = frozenset({MessageKind.IMAGE, MessageKind.DOCUMENT})


def resolve_identity(message: UserMessage) -> str | None:
    """Calcula a identidade de dispatch de uma mensagem.

    text → corpo, button → payload, radio_button/simple_button → id da resposta.
    Demais kinds não têm identidade.
    """
    kind = message.kind
    if kind == MessageKind.TEXT:
        value = message.body.get("body")
    elif kind == MessageKind.BUTTON:
        value = message.body.get("payload")
    elif kind == MessageKind.RADIO_BUTTON:
        value = (message.list_reply or {}).get("id")
    elif kind == MessageKind.SIMPLE_BUTTON:
        value = (message.button_reply or {}).get("id")
    else:
        return None
    return value if isinstance(value, str) and value else None


async def invoke_handler(handler: Handler, props: CallbackProps) -> None:
    """Invoca handler síncrono ou assíncrono e aguarda a conclusão."""
    result = handler(props)
    if inspect.isawaitable(result):
        await result


class DispatchRouter:
    """Router imutável construído a partir de um HandlerRegistry selado."""

    def __init__(self, registry: HandlerRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> HandlerRegistry:
        return self._registry

    async def route(self, message: CanonicalMessage) -> None:
        """Despacha uma mensagem canônica.

        Raises:
            Exception: A falha original do handler, depois de reportada ao ERROR
        """
        sender: str | None = None
        try:
            if not isinstance(message, UserMessage):
                logger.debug(
                    "notification_not_dispatched",
                    extra={"message_type": type(message).__name__},
                )
                return

            sender = message.sender.phone
            await self._dispatch(message, sender)
        except Exception as exc:
            await self.report_error(sender, exc)
            raise

    async def _dispatch(self, message: UserMessage, sender: str) -> None:
        kind = message.kind

        if kind in _MEDIA_KINDS:
            handler = self._registry.catch_all(kind)
            if handler is not None:
                logger.info("dispatch_catch_all", extra={"kind": kind})
                await invoke_handler(handler, CallbackProps(sender=sender, data=message))
                return

        identity = resolve_identity(message)
        if identity is not None:
            handler = self._registry.lookup(kind, identity)
            if handler is not None:
                logger.info("dispatch_identity", extra={"kind": kind})
                await invoke_handler(handler, CallbackProps(sender=sender, data=message))
                return

        logger.info("dispatch_default", extra={"kind": kind, "has_identity": identity is not None})
        await invoke_handler(self._registry.default, CallbackProps(sender=sender))

    async def report_error(self, sender: str | None, exc: BaseException) -> None:
        """Entrega a falha ao handler ERROR.

        Uma falha do próprio ERROR é apenas logada: quem chama sempre
        relança a exceção original.
        """
        logger.warning(
            "dispatch_failed",
            extra={"error_type": type(exc).__name__, "sender_known": sender is not None},
        )
        try:
            await invoke_handler(self._registry.error, CallbackProps(sender=sender))
        except Exception:
            logger.exception("error_handler_failed")
