"""Payload builders por canal: construção de payloads para APIs externas.

Estrutura:
- whatsapp/: WhatsApp Business API
"""

__all__: list[str] = []
