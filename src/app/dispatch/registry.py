"""Registry de handlers em dois níveis: kind → (catch-all | identidade → handler).

Disciplina write-once/read-many:
1. HandlerRegistryBuilder recebe os registros no startup
2. finish() valida DEFAULT/ERROR e sela o builder
3. HandlerRegistry é imutável e compartilhado entre entregas concorrentes

Registrar depois do finish() é violação de pré-condição e levanta
ConfigurationError.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from app.constants.whatsapp import MessageKind, ReservedKind
from app.protocols.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.protocols.models import Handler

logger = logging.getLogger(__name__)

# Kinds que aceitam apenas um handler, sem identidade
CATCH_ALL_KINDS = frozenset(
    {
        MessageKind.IMAGE,
        MessageKind.DOCUMENT,
        ReservedKind.DEFAULT,
        ReservedKind.ERROR,
    }
)

# Kinds roteados por identidade do payload
IDENTITY_KINDS = frozenset(
    {
        MessageKind.TEXT,
        MessageKind.BUTTON,
        MessageKind.RADIO_BUTTON,
        MessageKind.SIMPLE_BUTTON,
    }
)


@dataclass(frozen=True, slots=True)
class CatchAll:
    """Handler único para o kind inteiro."""

    handler: Handler


@dataclass(frozen=True, slots=True)
class ByIdentity:
    """Handlers indexados pela identidade do payload."""

    handlers: Mapping[str, Handler]


Route = CatchAll | ByIdentity


class HandlerRegistry:
    """Registry selado. Apenas leitura."""

    __slots__ = ("_routes",)

    def __init__(self, routes: Mapping[str, Route]) -> None:
        self._routes = MappingProxyType(dict(routes))

    def catch_all(self, kind: str) -> Handler | None:
        """Retorna o handler catch-all do kind, se registrado."""
        route = self._routes.get(kind)
        if isinstance(route, CatchAll):
            return route.handler
        return None

    def lookup(self, kind: str, identity: str) -> Handler | None:
        """Retorna o handler de (kind, identity), se registrado."""
        route = self._routes.get(kind)
        if isinstance(route, ByIdentity):
            return route.handlers.get(identity)
        return None

    @property
    def default(self) -> Handler:
        handler = self.catch_all(ReservedKind.DEFAULT)
        if handler is None:
            raise ConfigurationError("default handler is required!")
        return handler

    @property
    def error(self) -> Handler:
        handler = self.catch_all(ReservedKind.ERROR)
        if handler is None:
            raise ConfigurationError("errorMessage handler is required!")
        return handler

    def kinds(self) -> frozenset[str]:
        return frozenset(self._routes)


class HandlerRegistryBuilder:
    """Acumula registros de handlers até o finish()."""

    def __init__(self) -> None:
        self._catch_all: dict[str, Handler] = {}
        self._by_identity: dict[str, dict[str, Handler]] = {}
        self._sealed = False

    @property
    def sealed(self) -> bool:
        return self._sealed

    def add(self, kind: str, identity: str | None, handler: Handler) -> HandlerRegistryBuilder:
        """Registra um handler.

        Args:
            kind: Kind de dispatch (text, image, DEFAULT, ...)
            identity: Identidade do payload; None para kinds catch-all
            handler: Callback síncrono ou assíncrono

        Returns:
            O próprio builder (encadeável)

        Raises:
            ConfigurationError: Builder selado, kind desconhecido,
                identidade ausente/indevida ou registro duplicado
        """
        if self._sealed:
            raise ConfigurationError("handler registry is sealed; register handlers before finish()")
        if not callable(handler):
            raise ConfigurationError(f"{kind} handler must be callable")

        if kind in CATCH_ALL_KINDS:
            self._add_catch_all(kind, identity, handler)
        elif kind in IDENTITY_KINDS:
            self._add_identity(kind, identity, handler)
        else:
            raise ConfigurationError(f"unknown handler kind: {kind}")

        logger.debug("handler_registered", extra={"kind": str(kind), "has_identity": bool(identity)})
        return self

    def _add_catch_all(self, kind: str, identity: str | None, handler: Handler) -> None:
        if identity is not None:
            raise ConfigurationError(f"{kind} handlers do not take an identity")
        if kind in self._catch_all:
            raise ConfigurationError(f"{kind} handler already exists")
        self._catch_all[kind] = handler

    def _add_identity(self, kind: str, identity: str | None, handler: Handler) -> None:
        if not identity:
            raise ConfigurationError(f"{kind} handlers require an identity")
        handlers = self._by_identity.setdefault(kind, {})
        if identity in handlers:
            raise ConfigurationError(f"{identity} handler already exists")
        handlers[identity] = handler

    def finish(self) -> HandlerRegistry:
        """Sela o builder e produz o registry imutável.

        Raises:
            ConfigurationError: Se DEFAULT ou ERROR não foram registrados
        """
        if ReservedKind.DEFAULT not in self._catch_all:
            raise ConfigurationError("default handler is required!")
        if ReservedKind.ERROR not in self._catch_all:
            raise ConfigurationError("errorMessage handler is required!")

        routes: dict[str, Route] = {
            str(kind): CatchAll(handler) for kind, handler in self._catch_all.items()
        }
        for kind, handlers in self._by_identity.items():
            routes[str(kind)] = ByIdentity(MappingProxyType(dict(handlers)))

        self._sealed = True
        logger.info("handler_registry_sealed", extra={"kinds": sorted(routes)})
        return HandlerRegistry(routes)
