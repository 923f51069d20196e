"""Upload e consulta de mídia na Graph API.

Responsabilidades:
- Tabela de tipos suportados e limites de tamanho da Meta
- Validar extensão e tamanho antes do upload
- Upload multipart em /{phone_number_id}/media
- Resolver URL de download de uma mídia recebida
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from app.protocols.errors import MediaValidationError

if TYPE_CHECKING:
    from app.protocols.transport import TransportProtocol

logger = logging.getLogger(__name__)

_KB = 1024
_MB = 1024 * 1024


@dataclass(frozen=True, slots=True)
class MediaType:
    """Tipo de mídia resolvido para um arquivo."""

    mime_type: str
    max_size_bytes: int


@dataclass(frozen=True, slots=True)
class WebpLimits:
    """Webp tem limites distintos para sticker animado e estático."""

    animated: int
    static: int


SUPPORTED_MEDIA_TYPES: dict[str, tuple[str, int | WebpLimits]] = {
    # Áudio
    ".aac": ("audio/aac", 16 * _MB),
    ".amr": ("audio/amr", 16 * _MB),
    ".mp3": ("audio/mpeg", 16 * _MB),
    ".m4a": ("audio/mp4", 16 * _MB),
    ".ogg": ("audio/ogg", 16 * _MB),
    # Documentos
    ".txt": ("text/plain", 100 * _MB),
    ".xls": ("application/vnd.ms-excel", 100 * _MB),
    ".xlsx": ("application/vnd.openxmlformats-officedocument.spreadsheetml.sheet", 100 * _MB),
    ".doc": ("application/msword", 100 * _MB),
    ".docx": (
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        100 * _MB,
    ),
    ".ppt": ("application/vnd.ms-powerpoint", 100 * _MB),
    ".pptx": (
        "application/vnd.openxmlformats-officedocument.presentationml.presentation",
        100 * _MB,
    ),
    ".pdf": ("application/pdf", 100 * _MB),
    # Imagens
    ".jpeg": ("image/jpeg", 5 * _MB),
    ".jpg": ("image/jpeg", 5 * _MB),
    ".png": ("image/png", 5 * _MB),
    # Stickers
    ".webp": ("image/webp", WebpLimits(animated=500 * _KB, static=100 * _KB)),
    # Vídeo
    ".3gp": ("video/3gp", 16 * _MB),
    ".mp4": ("video/mp4", 16 * _MB),
}


def resolve_media_type(file_path: str | Path, is_webp_animated: bool = False) -> MediaType:
    """Resolve mime type e limite de tamanho pela extensão.

    Raises:
        MediaValidationError: Se a extensão não for suportada pela Meta
    """
    extension = Path(file_path).suffix.lower()
    entry = SUPPORTED_MEDIA_TYPES.get(extension)
    if entry is None:
        raise MediaValidationError(f"Unsupported media type: {extension or '<none>'}")

    mime_type, limit = entry
    if isinstance(limit, WebpLimits):
        limit = limit.animated if is_webp_animated else limit.static
    return MediaType(mime_type=mime_type, max_size_bytes=limit)


def _format_size(size_bytes: int) -> str:
    if size_bytes >= _MB:
        return f"{size_bytes / _MB:g} MB"
    return f"{size_bytes / _KB:g} KB"


class WhatsAppMedia:
    """Operações de mídia para um número de negócio."""

    def __init__(
        self,
        transport: TransportProtocol,
        phone_number_id: str,
        upload_timeout_seconds: float | None = None,
    ) -> None:
        self._transport = transport
        self._media_path = f"/{phone_number_id}/media"
        self._upload_timeout = upload_timeout_seconds

    async def upload_media(
        self,
        file_path: str | Path,
        is_webp_animated: bool = False,
    ) -> dict[str, Any]:
        """Faz upload de um arquivo local.

        Args:
            file_path: Caminho do arquivo
            is_webp_animated: Aplica limite de sticker animado para .webp

        Returns:
            Response da Meta ({"id": "<media_id>"})

        Raises:
            MediaValidationError: Tipo não suportado ou arquivo acima do limite
            HttpError: Falha no upload
        """
        path = Path(file_path)
        media_type = resolve_media_type(path, is_webp_animated)

        stat = await asyncio.to_thread(path.stat)
        if stat.st_size > media_type.max_size_bytes:
            raise MediaValidationError(
                f"Size of the file with type {media_type.mime_type} cannot exceed "
                f"{_format_size(media_type.max_size_bytes)}"
            )

        content = await asyncio.to_thread(path.read_bytes)
        response = await self._transport.request(
            "POST",
            self._media_path,
            data={"type": media_type.mime_type, "messaging_product": "whatsapp"},
            files={"file": (path.name, content, media_type.mime_type)},
            timeout=self._upload_timeout,
        )
        logger.info(
            "media_uploaded",
            extra={"mime_type": media_type.mime_type, "size_bytes": stat.st_size},
        )
        return response

    async def fetch_media_url(self, media_id: str) -> dict[str, Any]:
        """Consulta metadados de uma mídia (url, mime_type, sha256, file_size)."""
        if not media_id:
            raise MediaValidationError("media_id is required")
        return await self._transport.request("GET", f"/{media_id}")
