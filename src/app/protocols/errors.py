"""Taxonomia de erros do dispatcher.

- ValidationError: entrada externa inválida (envelope, template, mídia).
  Levantado de forma síncrona e nunca recuperado internamente.
- ConfigurationError: registro de handlers ou settings inválidos.
  Só ocorre no startup; fatal para a inicialização.

Falhas de dispatch (exceções dentro de handlers) não têm classe própria:
a exceção original é reportada ao handler ERROR e propagada ao chamador.
"""

from __future__ import annotations


class ValidationError(Exception):
    """Erro de validação de payload."""


class EnvelopeValidationError(ValidationError):
    """Envelope de webhook malformado ou de outro tenant."""


class TemplateValidationError(ValidationError):
    """Template viola limites da Graph API."""


class MediaValidationError(ValidationError):
    """Arquivo de mídia com tipo não suportado ou acima do limite."""


class ConfigurationError(Exception):
    """Configuração inválida detectada no startup."""
