"""Testes de WhatsAppOutbound."""

from __future__ import annotations

import pytest

from api.connectors.whatsapp.http_base import HttpError
from api.connectors.whatsapp.outbound import ReadReceiptResult, WhatsAppOutbound
from tests.fakes.fake_transport import FakeTransport


def _outbound(*responses) -> tuple[WhatsAppOutbound, FakeTransport]:
    transport = FakeTransport(responses=list(responses))
    return WhatsAppOutbound(transport, "111"), transport


@pytest.mark.asyncio
async def test_send_text() -> None:
    outbound, transport = _outbound({"messages": [{"id": "wamid.OUT"}]})

    result = await outbound.send_text("5511999990000", {"body": "Olá", "preview_url": False})

    assert result == {"messages": [{"id": "wamid.OUT"}]}
    request = transport.requests[0]
    assert request.method == "POST"
    assert request.path == "/111/messages"
    assert request.json == {
        "messaging_product": "whatsapp",
        "recipient_type": "individual",
        "to": "5511999990000",
        "type": "text",
        "text": {"body": "Olá", "preview_url": False},
    }


@pytest.mark.asyncio
async def test_send_document_and_sticker() -> None:
    outbound, transport = _outbound()

    await outbound.send_document("5511", {"id": "media-1", "filename": "a.pdf"})
    await outbound.send_document("5511", {"id": "media-2"}, is_sticker=True)

    assert transport.requests[0].json["type"] == "document"
    assert transport.requests[0].json["document"] == {"id": "media-1", "filename": "a.pdf"}
    assert transport.requests[1].json["type"] == "sticker"
    assert transport.requests[1].json["sticker"] == {"id": "media-2"}


@pytest.mark.asyncio
async def test_send_template() -> None:
    outbound, transport = _outbound()
    components = [{"type": "body", "parameters": [{"type": "text", "text": "Ana"}]}]

    await outbound.send_template("5511", "order_update", "pt_BR", components)

    assert transport.requests[0].json["template"] == {
        "name": "order_update",
        "language": {"code": "pt_BR"},
        "components": components,
    }


@pytest.mark.asyncio
async def test_send_template_without_components() -> None:
    outbound, transport = _outbound()

    await outbound.send_template("5511", "hello_world", "en_US")

    assert "components" not in transport.requests[0].json["template"]


@pytest.mark.asyncio
async def test_send_interactive() -> None:
    outbound, transport = _outbound()
    interactive = {"type": "button", "body": {"text": "Confirma?"}, "action": {"buttons": []}}

    await outbound.send_interactive("5511", interactive)

    assert transport.requests[0].json["type"] == "interactive"
    assert transport.requests[0].json["interactive"] == interactive


@pytest.mark.asyncio
async def test_send_failure_propagates() -> None:
    outbound, _ = _outbound(HttpError("http_status_error", status_code=500))

    with pytest.raises(HttpError):
        await outbound.send_text("5511", {"body": "x"})


@pytest.mark.asyncio
async def test_mark_as_read_success() -> None:
    outbound, transport = _outbound({"success": True})

    result = await outbound.mark_as_read("wamid.IN")

    assert result == ReadReceiptResult(success=True, acknowledged=True)
    assert transport.requests[0].json == {
        "messaging_product": "whatsapp",
        "status": "read",
        "message_id": "wamid.IN",
    }


@pytest.mark.asyncio
async def test_mark_as_read_skips_empty_id() -> None:
    outbound, transport = _outbound()

    assert await outbound.mark_as_read(None) is None
    assert await outbound.mark_as_read("") is None
    assert transport.requests == []


@pytest.mark.asyncio
async def test_mark_as_read_last_seen_is_benign() -> None:
    error = HttpError(
        "Meta API error",
        status_code=400,
        details={
            "error_code": 100,
            "details": "Message cannot be marked as read: it is older than the "
            "last-seen message in this conversation.",
        },
    )
    outbound, _ = _outbound(error)

    result = await outbound.mark_as_read("wamid.OLD")

    assert result is not None
    assert result.success is True
    assert result.acknowledged is False


@pytest.mark.asyncio
async def test_mark_as_read_failure_does_not_raise() -> None:
    outbound, _ = _outbound(HttpError("http_connection_error"))

    result = await outbound.mark_as_read("wamid.IN")

    assert result == ReadReceiptResult(success=False, error="http_connection_error")


@pytest.mark.asyncio
async def test_mark_as_read_ignores_non_string_details() -> None:
    error = HttpError("Meta API error", status_code=400, details={"details": {"code": 1}})
    outbound, _ = _outbound(error)

    result = await outbound.mark_as_read("wamid.IN")

    assert result == ReadReceiptResult(success=False, error="Meta API error")
