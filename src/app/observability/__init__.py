"""Observabilidade: correlation_id propagado entre webhook, dispatch e logs."""

from app.observability.correlation import (
    CORRELATION_ID_HEADER,
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)

__all__ = [
    "CORRELATION_ID_HEADER",
    "generate_correlation_id",
    "get_correlation_id",
    "reset_correlation_id",
    "set_correlation_id",
]
