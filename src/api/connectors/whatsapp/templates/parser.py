"""Parser de resposta da API Meta para templates."""

from __future__ import annotations

import re
from typing import Any

from .models import TemplateMetadata, TemplatePage, TemplateParameter

_POSITIONAL_PARAMETER = re.compile(r"\{\{(\d+)\}\}")


def extract_parameters(components: list[dict]) -> list[TemplateParameter]:
    """Extrai parâmetros posicionais dos componentes do template."""
    params: list[TemplateParameter] = []
    index = 1

    for component in components:
        comp_type = str(component.get("type", "")).upper()

        if comp_type == "HEADER":
            header_format = component.get("format", "TEXT")
            if header_format in ("IMAGE", "VIDEO", "DOCUMENT"):
                params.append(TemplateParameter(type=header_format.lower(), index=index))
                index += 1
            else:
                for _ in _POSITIONAL_PARAMETER.findall(component.get("text") or ""):
                    params.append(TemplateParameter(type="text", index=index))
                    index += 1

        if comp_type == "BODY":
            for _ in _POSITIONAL_PARAMETER.findall(component.get("text") or ""):
                params.append(TemplateParameter(type="text", index=index))
                index += 1

    return params


def parse_template_response(data: dict[str, Any]) -> TemplateMetadata:
    """Converte um item da listagem em TemplateMetadata."""
    components = data.get("components") or []
    return TemplateMetadata(
        id=data.get("id"),
        name=data.get("name", ""),
        language=data.get("language", ""),
        category=data.get("category", ""),
        status=data.get("status", ""),
        components=components,
        parameters=extract_parameters(components),
    )


def parse_template_page(response: dict[str, Any]) -> TemplatePage:
    """Converte a resposta paginada da listagem."""
    paging = response.get("paging") or {}
    cursors = paging.get("cursors") or {}
    return TemplatePage(
        templates=[
            parse_template_response(item)
            for item in response.get("data") or []
            if isinstance(item, dict)
        ],
        before=cursors.get("before"),
        after=cursors.get("after"),
        next_url=paging.get("next"),
    )
