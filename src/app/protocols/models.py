"""Modelo canônico de mensagens inbound.

O normalizer produz exatamente uma das variantes abaixo por webhook:

- UserMessage: mensagem enviada pelo usuário (despachável)
- StatusNotification: status de entrega (sent, delivered, read, failed)
- DegradedMessage: mensagem `unsupported` com erros reportados pela Meta

Todas são imutáveis. Os blocos herdados do payload (`body`, `raw`, ...)
são cópias profundas, nunca aliases do envelope recebido.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Sender:
    """Remetente de uma mensagem ou destinatário de um status."""

    phone: str
    name: str | None = None


@dataclass(frozen=True, slots=True)
class Thread:
    """Mensagem citada (reply-context).

    O nome de quem enviou a mensagem citada não vem no payload.
    """

    phone: str | None
    message_id: str | None
    name: str | None = None


@dataclass(frozen=True, slots=True)
class UserMessage:
    """Mensagem de usuário normalizada.

    Attributes:
        kind: Kind efetivo após folding (text, radio_button, ...)
        message_id: ID da mensagem na Meta (wamid)
        sender: Remetente (telefone + nome de perfil quando disponível)
        body: Bloco específico do tipo original (ex: {"body": "oi"} para text)
        list_reply: Resposta de lista, copiada para o nível raiz
        button_reply: Resposta de botão interativo, copiada para o nível raiz
        thread: Mensagem citada, quando houver
        timestamp: Timestamp unix (string) informado pela Meta
        raw: Cópia da mensagem original
    """

    kind: str
    message_id: str | None
    sender: Sender
    body: dict[str, Any] = field(default_factory=dict)
    list_reply: dict[str, Any] | None = None
    button_reply: dict[str, Any] | None = None
    thread: Thread | None = None
    timestamp: str | None = None
    raw: dict[str, Any] = field(default_factory=dict)

    @property
    def is_message(self) -> bool:
        return True

    @property
    def is_notification_message(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class StatusNotification:
    """Notificação de status de entrega. Nunca é despachada para handlers."""

    notification_kind: str
    sender: Sender
    message_id: str | None = None
    errors: tuple[dict[str, Any], ...] = ()
    raw: dict[str, Any] = field(default_factory=dict)

    @property
    def is_message(self) -> bool:
        return False

    @property
    def is_notification_message(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class DegradedMessage:
    """Mensagem `unsupported` que veio acompanhada de erros da Meta.

    Mantém visibilidade da falha do lado do provedor sem derrubar o pipeline.
    """

    kind: str
    message_id: str | None
    sender: Sender
    errors: tuple[dict[str, Any], ...]
    raw: dict[str, Any] = field(default_factory=dict)

    @property
    def is_message(self) -> bool:
        return False

    @property
    def is_notification_message(self) -> bool:
        return True


CanonicalMessage = UserMessage | StatusNotification | DegradedMessage


@dataclass(frozen=True, slots=True)
class ParsedWebhook:
    """Resultado da normalização de um envelope.

    `metadata` e `contact` descrevem o número do tenant e o contato e são
    anexados sempre que presentes, independente da variante da mensagem.
    `message` é None para pings vazios (nem messages nem statuses).
    """

    tenant_id: str
    metadata: dict[str, Any] | None
    contact: dict[str, Any] | None
    message: CanonicalMessage | None


@dataclass(frozen=True, slots=True)
class CallbackProps:
    """Argumento entregue a todo handler registrado."""

    sender: str | None
    data: UserMessage | None = None


Handler = Callable[[CallbackProps], Awaitable[None] | None]
