"""Rotas HTTP da API: adapters de entrada.

- routes/whatsapp/: webhook WhatsApp (challenge + eventos)
- routes/health/: liveness
- router.py: agrega os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
