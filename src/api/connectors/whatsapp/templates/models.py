"""Modelos de template WhatsApp."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TemplateCategory(StrEnum):
    """Categorias de template conforme Meta."""

    AUTHENTICATION = "AUTHENTICATION"
    MARKETING = "MARKETING"
    UTILITY = "UTILITY"


class TemplateStatus(StrEnum):
    """Status de aprovação de template."""

    APPROVED = "APPROVED"
    IN_APPEAL = "IN_APPEAL"
    PENDING = "PENDING"
    REJECTED = "REJECTED"
    PENDING_DELETION = "PENDING_DELETION"
    DELETED = "DELETED"
    DISABLED = "DISABLED"
    PAUSED = "PAUSED"
    LIMIT_EXCEEDED = "LIMIT_EXCEEDED"


class TemplateButton(BaseModel):
    """Botão de template (PHONE_NUMBER, URL, QUICK_REPLY, COPY_CODE)."""

    model_config = ConfigDict(extra="allow")

    type: str
    text: str = ""
    phone_number: str | None = None
    url: str | None = None
    example: list[str] | None = None


class TemplateComponent(BaseModel):
    """Componente de template (HEADER, BODY, FOOTER, BUTTONS)."""

    model_config = ConfigDict(extra="allow")

    type: str
    format: str | None = None
    text: str | None = None
    buttons: list[TemplateButton] | None = None
    url: str | None = None
    example: dict[str, Any] | None = None


class WhatsAppTemplate(BaseModel):
    """Definição de template enviada para criação."""

    model_config = ConfigDict(extra="allow")

    name: str
    category: TemplateCategory
    language: str
    components: list[TemplateComponent] = Field(default_factory=list)
    allow_category_change: bool | None = None
    id: str | None = None
    status: TemplateStatus | None = None

    def to_payload(self) -> dict[str, Any]:
        """Serializa para o corpo da Graph API (sem campos nulos)."""
        return self.model_dump(mode="json", exclude_none=True)


class TemplateFilters(BaseModel):
    """Filtros aceitos pela listagem de templates."""

    name: str | None = None
    category: TemplateCategory | None = None
    language: str | None = None
    status: TemplateStatus | None = None
    rejected_reason: str | None = None
    name_or_content: str | None = None
    content: str | None = None

    def to_params(self) -> dict[str, str]:
        dumped = self.model_dump(mode="json", exclude_none=True)
        return {key: str(value) for key, value in dumped.items()}


@dataclass(frozen=True)
class TemplateParameter:
    """Parâmetro posicional de template."""

    type: str
    index: int


@dataclass
class TemplateMetadata:
    """Template como devolvido pela listagem da Meta."""

    name: str
    language: str
    category: str
    status: str
    components: list[dict]
    id: str | None = None
    parameters: list[TemplateParameter] = field(default_factory=list)


@dataclass
class TemplatePage:
    """Página de templates com cursores de paginação."""

    templates: list[TemplateMetadata]
    before: str | None = None
    after: str | None = None
    next_url: str | None = None
