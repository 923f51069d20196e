"""Testes de upload e consulta de mídia."""

from __future__ import annotations

from pathlib import Path

import pytest

from api.connectors.whatsapp.media import (
    SUPPORTED_MEDIA_TYPES,
    WhatsAppMedia,
    resolve_media_type,
)
from app.protocols.errors import MediaValidationError
from tests.fakes.fake_transport import FakeTransport


class TestResolveMediaType:
    def test_pdf(self) -> None:
        media_type = resolve_media_type("contrato.PDF")

        assert media_type.mime_type == "application/pdf"
        assert media_type.max_size_bytes == 100 * 1024 * 1024

    def test_webp_static_and_animated(self) -> None:
        assert resolve_media_type("s.webp").max_size_bytes == 100 * 1024
        assert resolve_media_type("s.webp", is_webp_animated=True).max_size_bytes == 500 * 1024

    def test_unsupported_extension(self) -> None:
        with pytest.raises(MediaValidationError, match="Unsupported media type: .exe"):
            resolve_media_type("setup.exe")

    def test_no_extension(self) -> None:
        with pytest.raises(MediaValidationError, match="<none>"):
            resolve_media_type("README")

    def test_table_has_image_types(self) -> None:
        assert SUPPORTED_MEDIA_TYPES[".png"][0] == "image/png"
        assert SUPPORTED_MEDIA_TYPES[".jpeg"][0] == "image/jpeg"


@pytest.mark.asyncio
async def test_upload_media(tmp_path: Path) -> None:
    file_path = tmp_path / "foto.png"
    file_path.write_bytes(b"\x89PNG fake")
    transport = FakeTransport(responses=[{"id": "media-1"}])
    media = WhatsAppMedia(transport, "111", upload_timeout_seconds=120.0)

    result = await media.upload_media(file_path)

    assert result == {"id": "media-1"}
    request = transport.requests[0]
    assert request.method == "POST"
    assert request.path == "/111/media"
    assert request.data == {"type": "image/png", "messaging_product": "whatsapp"}
    assert request.files == {"file": ("foto.png", b"\x89PNG fake", "image/png")}
    assert request.timeout == 120.0


@pytest.mark.asyncio
async def test_upload_media_too_large(tmp_path: Path) -> None:
    file_path = tmp_path / "sticker.webp"
    file_path.write_bytes(b"x" * (100 * 1024 + 1))
    transport = FakeTransport()
    media = WhatsAppMedia(transport, "111")

    with pytest.raises(MediaValidationError, match="cannot exceed 100 KB"):
        await media.upload_media(file_path)

    assert transport.requests == []


@pytest.mark.asyncio
async def test_upload_animated_webp_uses_larger_limit(tmp_path: Path) -> None:
    file_path = tmp_path / "sticker.webp"
    file_path.write_bytes(b"x" * (200 * 1024))
    transport = FakeTransport(responses=[{"id": "media-2"}])
    media = WhatsAppMedia(transport, "111")

    assert await media.upload_media(file_path, is_webp_animated=True) == {"id": "media-2"}


@pytest.mark.asyncio
async def test_fetch_media_url() -> None:
    payload = {"url": "https://lookaside.test/x", "mime_type": "image/jpeg", "id": "m1"}
    transport = FakeTransport(responses=[payload])
    media = WhatsAppMedia(transport, "111")

    assert await media.fetch_media_url("m1") == payload
    assert transport.requests[0].method == "GET"
    assert transport.requests[0].path == "/m1"


@pytest.mark.asyncio
async def test_fetch_media_url_requires_id() -> None:
    media = WhatsAppMedia(FakeTransport(), "111")

    with pytest.raises(MediaValidationError):
        await media.fetch_media_url("")
