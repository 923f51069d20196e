"""Dispatch inbound: registry de handlers e router.

Uso:
    builder = HandlerRegistryBuilder()
    builder.add("text", "oi", on_greeting)
    builder.add("DEFAULT", None, on_default)
    builder.add("ERROR", None, on_error)

    router = DispatchRouter(builder.finish())
    await router.route(parsed.message)
"""

from .registry import (
    CATCH_ALL_KINDS,
    IDENTITY_KINDS,
    ByIdentity,
    CatchAll,
    HandlerRegistry,
    HandlerRegistryBuilder,
)
from .router import DispatchRouter, invoke_handler, resolve_identity

__all__ = [
    "CATCH_ALL_KINDS",
    "IDENTITY_KINDS",
    "ByIdentity",
    "CatchAll",
    "DispatchRouter",
    "HandlerRegistry",
    "HandlerRegistryBuilder",
    "invoke_handler",
    "resolve_identity",
]
