"""Pré-validação de templates contra os limites da Graph API.

Evita round-trip para a Meta em erros detectáveis localmente:
tamanhos de texto, quantidade de botões e variáveis sem exemplo.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from app.protocols.errors import TemplateValidationError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .models import TemplateButton, TemplateComponent, WhatsAppTemplate

MAX_NAME_LENGTH = 512
MAX_HEADER_TEXT_LENGTH = 60
MAX_BODY_TEXT_LENGTH = 1024
MAX_FOOTER_TEXT_LENGTH = 60
MAX_BUTTONS = 10
MAX_BUTTON_TEXT_LENGTH = 25
MAX_PHONE_NUMBER_LENGTH = 20

_NAME_PATTERN = re.compile(r"^[a-z_]+$")
_NAMED_PARAMETER = re.compile(r"\{\{[a-zA-Z0-9_]+\}\}")
_POSITIONAL_PARAMETER = re.compile(r"\{\{\d+\}\}")


def _validate_text_length(text: str | None, max_length: int, error_message: str) -> None:
    if text is not None and len(text) > max_length:
        raise TemplateValidationError(error_message)


def _validate_example_count(text: str | None, example_count: int | None) -> None:
    """Exemplo, quando informado, precisa cobrir todas as variáveis do texto."""
    if not text or example_count is None:
        return
    matches = _NAMED_PARAMETER.findall(text)
    if matches and example_count != len(matches):
        raise TemplateValidationError(
            "The example must contain as many variables as there are in the text."
        )


def _header_example_count(component: TemplateComponent) -> int | None:
    if not component.example:
        return None
    header_text = component.example.get("header_text")
    return len(header_text) if isinstance(header_text, list) else None


def _body_example_count(component: TemplateComponent) -> int | None:
    if not component.example:
        return None
    body_text = component.example.get("body_text")
    if isinstance(body_text, list) and body_text and isinstance(body_text[0], list):
        return len(body_text[0])
    return None


def _validate_button(button: TemplateButton) -> None:
    _validate_text_length(
        button.text,
        MAX_BUTTON_TEXT_LENGTH,
        f"Template button text cannot exceed {MAX_BUTTON_TEXT_LENGTH} characters!",
    )
    button_type = button.type.upper()
    if button_type == "PHONE_NUMBER":
        _validate_text_length(
            button.phone_number,
            MAX_PHONE_NUMBER_LENGTH,
            f"Template PhoneNumber button number cannot exceed "
            f"{MAX_PHONE_NUMBER_LENGTH} characters!",
        )
    elif button_type == "URL":
        url = button.url or ""
        example_count = len(button.example) if button.example is not None else None
        _validate_example_count(url, example_count)
        variables = _POSITIONAL_PARAMETER.findall(url)
        if len(variables) > 1 or (variables and not url.endswith(variables[0])):
            raise TemplateValidationError(
                "Template URL button supports only 1 variable, appended to the end of the URL string."
            )


def validate_components(components: Sequence[TemplateComponent]) -> None:
    """Valida componentes HEADER, BODY, FOOTER e BUTTONS.

    Raises:
        TemplateValidationError: Na primeira violação encontrada
    """
    for component in components:
        comp_type = component.type.upper()
        if comp_type == "HEADER":
            _validate_text_length(
                component.text,
                MAX_HEADER_TEXT_LENGTH,
                f"Template Header text cannot exceed {MAX_HEADER_TEXT_LENGTH} characters!",
            )
            _validate_example_count(component.text, _header_example_count(component))
        elif comp_type == "BODY":
            _validate_text_length(
                component.text,
                MAX_BODY_TEXT_LENGTH,
                f"Body text cannot exceed {MAX_BODY_TEXT_LENGTH} characters!",
            )
            _validate_example_count(component.text, _body_example_count(component))
        elif comp_type == "FOOTER":
            _validate_text_length(
                component.text,
                MAX_FOOTER_TEXT_LENGTH,
                f"Template Footer text cannot exceed {MAX_FOOTER_TEXT_LENGTH} characters!",
            )
        elif comp_type == "BUTTONS":
            buttons = component.buttons or []
            if len(buttons) > MAX_BUTTONS:
                raise TemplateValidationError(
                    f"Template cannot have more than {MAX_BUTTONS} buttons!"
                )
            for button in buttons:
                _validate_button(button)


def validate_template_name(name: str) -> None:
    """Nome: até 512 caracteres, apenas minúsculas e underscore."""
    _validate_text_length(
        name,
        MAX_NAME_LENGTH,
        f"Template Name cannot exceed {MAX_NAME_LENGTH} characters!",
    )
    if not _NAME_PATTERN.match(name):
        raise TemplateValidationError(
            "Template name cannot have uppercase letters, only lowercase and "
            "underscores are allowed!"
        )


def validate_template(template: WhatsAppTemplate) -> None:
    """Valida template completo para criação."""
    validate_template_name(template.name)
    validate_components(template.components)
