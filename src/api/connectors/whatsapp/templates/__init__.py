"""Templates WhatsApp: modelos, pré-validação, parsing e CRUD."""

from .manager import TemplateManager
from .models import (
    TemplateButton,
    TemplateCategory,
    TemplateComponent,
    TemplateFilters,
    TemplateMetadata,
    TemplatePage,
    TemplateParameter,
    TemplateStatus,
    WhatsAppTemplate,
)
from .parser import extract_parameters, parse_template_page, parse_template_response
from .validation import validate_components, validate_template, validate_template_name

__all__ = [
    "TemplateButton",
    "TemplateCategory",
    "TemplateComponent",
    "TemplateFilters",
    "TemplateManager",
    "TemplateMetadata",
    "TemplatePage",
    "TemplateParameter",
    "TemplateStatus",
    "WhatsAppTemplate",
    "extract_parameters",
    "parse_template_page",
    "parse_template_response",
    "validate_components",
    "validate_template",
    "validate_template_name",
]
