"""Endpoint de health check (liveness)."""

from __future__ import annotations

from datetime import UTC, datetime

from fastapi import APIRouter
from pydantic import BaseModel

from config.settings import get_base_settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe: verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=get_base_settings().service_name,
        timestamp=datetime.now(UTC).isoformat(),
    )
