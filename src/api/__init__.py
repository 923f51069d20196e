"""API: camada de borda com a Meta Graph API.

Subpastas:
- connectors/: transport HTTP, outbound, mídia, templates e webhook
- normalizers/: envelope de webhook → mensagem canônica
- payload_builders/: payloads de envio da Graph API
- routes/: endpoints HTTP (webhook, health)

NÃO PODE conter: registry de handlers nem regras de dispatch.
"""
