"""Protocolos e contratos do core da aplicação."""

from .errors import (
    ConfigurationError,
    EnvelopeValidationError,
    MediaValidationError,
    TemplateValidationError,
    ValidationError,
)
from .models import (
    CallbackProps,
    CanonicalMessage,
    DegradedMessage,
    Handler,
    ParsedWebhook,
    Sender,
    StatusNotification,
    Thread,
    UserMessage,
)
from .transport import TransportProtocol

__all__ = [
    "CallbackProps",
    "CanonicalMessage",
    "ConfigurationError",
    "DegradedMessage",
    "EnvelopeValidationError",
    "Handler",
    "MediaValidationError",
    "ParsedWebhook",
    "Sender",
    "StatusNotification",
    "TemplateValidationError",
    "Thread",
    "TransportProtocol",
    "UserMessage",
    "ValidationError",
]
