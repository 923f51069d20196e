"""Connectors: adapters de borda para APIs externas.

Estrutura:
- whatsapp/: WhatsApp Business (Graph API)
"""

__all__: list[str] = []
