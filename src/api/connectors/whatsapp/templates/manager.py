"""CRUD de templates da WABA via Graph API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Literal

from .models import TemplateComponent, TemplateFilters, TemplatePage, WhatsAppTemplate
from .parser import parse_template_page
from .validation import validate_components, validate_template

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.protocols.transport import TransportProtocol

    from .models import TemplateCategory

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 25


class TemplateManager:
    """Gerencia templates de uma conta de negócios (WABA)."""

    def __init__(self, transport: TransportProtocol, business_account_id: str) -> None:
        self._transport = transport
        self._templates_path = f"/{business_account_id}/message_templates"

    async def create_template(self, template: WhatsAppTemplate | dict[str, Any]) -> dict[str, Any]:
        """Cria um template após pré-validação.

        Returns:
            {"id", "status", "category"} conforme a Meta

        Raises:
            TemplateValidationError: Template viola limites locais
            HttpError: Meta recusou a criação
        """
        if isinstance(template, dict):
            template = WhatsAppTemplate.model_validate(template)
        validate_template(template)
        response = await self._transport.request(
            "POST", self._templates_path, json=template.to_payload()
        )
        logger.info("template_created", extra={"category": str(template.category)})
        return response

    async def fetch_templates(
        self,
        filters: TemplateFilters | dict[str, Any] | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        paging_type: Literal["before", "after"] | None = None,
        cursor: str | None = None,
    ) -> TemplatePage:
        """Lista templates com filtros e paginação por cursor."""
        if isinstance(filters, dict):
            filters = TemplateFilters.model_validate(filters)
        params: dict[str, Any] = filters.to_params() if filters else {}
        params["limit"] = str(page_size)
        if paging_type and cursor:
            params[paging_type] = cursor

        response = await self._transport.request("GET", self._templates_path, params=params)
        return parse_template_page(response)

    async def edit_template(
        self,
        template_id: str,
        *,
        category: TemplateCategory | None = None,
        components: Sequence[TemplateComponent | dict[str, Any]] | None = None,
    ) -> dict[str, Any]:
        """Edita categoria e/ou componentes de um template existente.

        O nome não é editável e por isso não é validado aqui.
        """
        body: dict[str, Any] = {}
        if components is not None:
            parsed = [TemplateComponent.model_validate(item) for item in components]
            validate_components(parsed)
            body["components"] = [
                item.model_dump(mode="json", exclude_none=True) for item in parsed
            ]
        if category is not None:
            body["category"] = str(category)

        response = await self._transport.request("POST", f"/{template_id}", json=body)
        logger.info("template_edited", extra={"fields": sorted(body)})
        return response

    async def delete_template(self, template_id: str, template_name: str) -> dict[str, Any]:
        """Remove um template pelo id (hsm_id) e nome."""
        response = await self._transport.request(
            "DELETE",
            self._templates_path,
            params={"hsm_id": template_id, "name": template_name},
        )
        logger.info("template_deleted")
        return response
