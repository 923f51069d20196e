"""Builder para mensagens de template."""

from __future__ import annotations

from typing import Any


def build_template_body(
    template_name: str,
    language_code: str,
    components: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Constrói o bloco `template` de uma mensagem.

    Args:
        template_name: Nome do template aprovado
        language_code: Código de idioma (ex: pt_BR)
        components: Parâmetros por componente, quando o template tem variáveis

    Returns:
        Bloco template conforme API Meta
    """
    template_obj: dict[str, Any] = {
        "name": template_name,
        "language": {"code": language_code},
    }
    if components:
        template_obj["components"] = components
    return template_obj
