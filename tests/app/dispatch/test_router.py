"""Testes do DispatchRouter."""

from __future__ import annotations

from typing import Any

import pytest

from app.dispatch import DispatchRouter, HandlerRegistryBuilder, resolve_identity
from app.protocols.models import (
    CallbackProps,
    DegradedMessage,
    Sender,
    StatusNotification,
    UserMessage,
)

PHONE = "5511999990000"


class Recorder:
    """Handler que registra as chamadas recebidas."""

    def __init__(self, name: str, calls: list[tuple[str, CallbackProps]]) -> None:
        self.name = name
        self.calls = calls

    async def __call__(self, props: CallbackProps) -> None:
        self.calls.append((self.name, props))


def _message(kind: str, **fields: Any) -> UserMessage:
    return UserMessage(
        kind=kind,
        message_id="wamid.1",
        sender=Sender(phone=PHONE, name="Maria"),
        **fields,
    )


def _router(calls: list[tuple[str, CallbackProps]], **extra: Any) -> DispatchRouter:
    builder = HandlerRegistryBuilder()
    builder.add("DEFAULT", None, Recorder("default", calls))
    builder.add("ERROR", None, Recorder("error", calls))
    for (kind, identity), name in extra.get("handlers", {}).items():
        builder.add(kind, identity, Recorder(name, calls))
    return DispatchRouter(builder.finish())


class TestResolveIdentity:
    def test_text(self) -> None:
        assert resolve_identity(_message("text", body={"body": "oi"})) == "oi"

    def test_button(self) -> None:
        assert resolve_identity(_message("button", body={"payload": "P1"})) == "P1"

    def test_radio_button(self) -> None:
        assert resolve_identity(_message("radio_button", list_reply={"id": "opt"})) == "opt"

    def test_simple_button(self) -> None:
        assert resolve_identity(_message("simple_button", button_reply={"id": "yes"})) == "yes"

    def test_kinds_without_identity(self) -> None:
        assert resolve_identity(_message("image", body={"id": "m1"})) is None
        assert resolve_identity(_message("unknown_message")) is None

    def test_empty_identity_is_none(self) -> None:
        assert resolve_identity(_message("text", body={"body": ""})) is None


class TestRoute:
    @pytest.mark.asyncio
    async def test_identity_match_receives_message(self) -> None:
        calls: list[tuple[str, CallbackProps]] = []
        router = _router(calls, handlers={("button", "ORDER_1"): "order"})
        message = _message("button", body={"payload": "ORDER_1"})

        await router.route(message)

        assert calls == [("order", CallbackProps(sender=PHONE, data=message))]

    @pytest.mark.asyncio
    async def test_unmatched_text_goes_to_default_without_data(self) -> None:
        calls: list[tuple[str, CallbackProps]] = []
        router = _router(calls, handlers={("text", "oi"): "greet"})

        await router.route(_message("text", body={"body": "tchau"}))

        assert calls == [("default", CallbackProps(sender=PHONE))]
        assert calls[0][1].data is None

    @pytest.mark.asyncio
    async def test_image_catch_all(self) -> None:
        calls: list[tuple[str, CallbackProps]] = []
        router = _router(calls, handlers={("image", None): "image"})
        message = _message("image", body={"id": "m1"})

        await router.route(message)

        assert calls == [("image", CallbackProps(sender=PHONE, data=message))]

    @pytest.mark.asyncio
    async def test_document_without_catch_all_goes_to_default(self) -> None:
        calls: list[tuple[str, CallbackProps]] = []
        router = _router(calls)

        await router.route(_message("document", body={"id": "d1"}))

        assert [name for name, _ in calls] == ["default"]

    @pytest.mark.asyncio
    async def test_interactive_kinds(self) -> None:
        calls: list[tuple[str, CallbackProps]] = []
        router = _router(
            calls,
            handlers={("radio_button", "opt_1"): "radio", ("simple_button", "yes"): "button"},
        )

        await router.route(_message("radio_button", list_reply={"id": "opt_1"}))
        await router.route(_message("simple_button", button_reply={"id": "yes"}))

        assert [name for name, _ in calls] == ["radio", "button"]

    @pytest.mark.asyncio
    async def test_status_notification_dispatches_nothing(self) -> None:
        calls: list[tuple[str, CallbackProps]] = []
        router = _router(calls, handlers={("text", "oi"): "greet"})
        status = StatusNotification(
            notification_kind="delivered",
            sender=Sender(phone="15551234567"),
        )

        await router.route(status)

        assert calls == []

    @pytest.mark.asyncio
    async def test_degraded_message_dispatches_nothing(self) -> None:
        calls: list[tuple[str, CallbackProps]] = []
        router = _router(calls)
        degraded = DegradedMessage(
            kind="unknown_message",
            message_id="wamid.1",
            sender=Sender(phone=PHONE),
            errors=({"code": 131051},),
        )

        await router.route(degraded)

        assert calls == []

    @pytest.mark.asyncio
    async def test_sync_handlers_are_supported(self) -> None:
        seen: list[CallbackProps] = []
        builder = HandlerRegistryBuilder()
        builder.add("DEFAULT", None, seen.append)
        builder.add("ERROR", None, seen.append)
        router = DispatchRouter(builder.finish())

        await router.route(_message("text", body={"body": "x"}))

        assert seen == [CallbackProps(sender=PHONE)]


class TestErrorPath:
    @pytest.mark.asyncio
    async def test_handler_failure_reports_error_and_reraises(self) -> None:
        calls: list[tuple[str, CallbackProps]] = []

        async def boom(props: CallbackProps) -> None:
            raise RuntimeError("boom")

        builder = HandlerRegistryBuilder()
        builder.add("DEFAULT", None, Recorder("default", calls))
        builder.add("ERROR", None, Recorder("error", calls))
        builder.add("text", "oi", boom)
        router = DispatchRouter(builder.finish())

        with pytest.raises(RuntimeError, match="boom"):
            await router.route(_message("text", body={"body": "oi"}))

        assert calls == [("error", CallbackProps(sender=PHONE))]

    @pytest.mark.asyncio
    async def test_error_handler_failure_keeps_original_exception(self) -> None:
        def failing_default(props: CallbackProps) -> None:
            raise KeyError("original")

        def failing_error(props: CallbackProps) -> None:
            raise ValueError("secondary")

        builder = HandlerRegistryBuilder()
        builder.add("DEFAULT", None, failing_default)
        builder.add("ERROR", None, failing_error)
        router = DispatchRouter(builder.finish())

        with pytest.raises(KeyError, match="original"):
            await router.route(_message("text", body={"body": "x"}))

    @pytest.mark.asyncio
    async def test_report_error_without_sender(self) -> None:
        calls: list[tuple[str, CallbackProps]] = []
        router = _router(calls)

        await router.report_error(None, ValueError("bad envelope"))

        assert calls == [("error", CallbackProps(sender=None))]
