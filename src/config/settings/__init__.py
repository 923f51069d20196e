"""Agregador de settings do dispatcher.

Re-exporta settings e getters cacheados de cada módulo.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    DEFAULT_SERVICE_NAME,
    BaseSettings,
    Environment,
    get_base_settings,
)

# Channel-specific settings
from config.settings.whatsapp import (
    GRAPH_API_BASE_URL,
    GRAPH_API_VERSION,
    WhatsAppSettings,
    get_whatsapp_settings,
)

__all__ = [
    # Constants
    "DEFAULT_SERVICE_NAME",
    "GRAPH_API_BASE_URL",
    "GRAPH_API_VERSION",
    # Base
    "BaseSettings",
    "Environment",
    # Channels
    "WhatsAppSettings",
    "get_base_settings",
    "get_whatsapp_settings",
]
