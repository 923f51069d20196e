"""Conector WhatsApp - adapter de borda para Meta Graph API.

Único ponto de IO do dispatcher com a Meta:
- HTTP client (transport) com autenticação Bearer
- Envio outbound e recibo de leitura
- Upload e consulta de mídia
- CRUD e pré-validação de templates
- Webhook (verify, receive, assinatura)
"""

from .http_base import HttpClient, HttpClientConfig, HttpError
from .http_client import WhatsAppHttpClient, create_whatsapp_http_client
from .media import SUPPORTED_MEDIA_TYPES, MediaType, WhatsAppMedia, resolve_media_type
from .meta_errors import WhatsAppApiError, parse_meta_error
from .outbound import ReadReceiptResult, WhatsAppOutbound
from .signature import SignatureResult, verify_meta_signature
from .templates import TemplateManager

__all__ = [
    "SUPPORTED_MEDIA_TYPES",
    "HttpClient",
    "HttpClientConfig",
    "HttpError",
    "MediaType",
    "ReadReceiptResult",
    "SignatureResult",
    "TemplateManager",
    "WhatsAppApiError",
    "WhatsAppHttpClient",
    "WhatsAppMedia",
    "WhatsAppOutbound",
    "create_whatsapp_http_client",
    "parse_meta_error",
    "resolve_media_type",
    "verify_meta_signature",
]
