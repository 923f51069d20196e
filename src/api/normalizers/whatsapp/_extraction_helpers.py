"""Helpers de extração de campos do payload WhatsApp.

Separado de normalizer.py para manter SRP.
Nenhuma função aqui altera o payload recebido: blocos são sempre copiados.
"""

from __future__ import annotations

import copy
from typing import Any

from app.constants.whatsapp import InteractiveReplyType, MessageKind, RawMessageType
from app.protocols.models import Thread


def first_item(value: Any) -> Any | None:
    """Retorna o primeiro item de uma lista ou None."""
    if isinstance(value, list) and value:
        return value[0]
    return None


def copy_block(value: Any) -> dict[str, Any] | None:
    """Cópia profunda de um bloco dict; None para qualquer outro tipo."""
    if isinstance(value, dict):
        return copy.deepcopy(value)
    return None


def extract_contact_name(contact: dict[str, Any] | None) -> str | None:
    """Extrai o nome de perfil de contacts[0]."""
    if not isinstance(contact, dict):
        return None
    profile = contact.get("profile")
    if not isinstance(profile, dict):
        return None
    return profile.get("name") or None


def extract_errors(block: dict[str, Any]) -> tuple[dict[str, Any], ...]:
    """Extrai lista de erros reportados pela Meta."""
    errors = block.get("errors")
    if not isinstance(errors, list):
        return ()
    return tuple(copy.deepcopy(item) for item in errors if isinstance(item, dict))


def extract_interactive_reply(
    msg: dict[str, Any],
) -> tuple[str | None, dict[str, Any] | None, dict[str, Any] | None]:
    """Resolve o kind de uma mensagem interativa.

    Returns:
        (kind, list_reply, button_reply). kind é None para sub-tipos
        não mapeados, caso em que o tipo bruto é mantido.
    """
    interactive_block = msg.get("interactive")
    if not isinstance(interactive_block, dict):
        return None, None, None
    interactive_type = interactive_block.get("type")
    if interactive_type == InteractiveReplyType.LIST_REPLY:
        return (
            MessageKind.RADIO_BUTTON,
            copy_block(interactive_block.get("list_reply")),
            None,
        )
    if interactive_type == InteractiveReplyType.BUTTON_REPLY:
        return (
            MessageKind.SIMPLE_BUTTON,
            None,
            copy_block(interactive_block.get("button_reply")),
        )
    return None, None, None


def extract_body(msg: dict[str, Any], message_type: str) -> dict[str, Any]:
    """Extrai o bloco específico do tipo (msg[type])."""
    return copy_block(msg.get(message_type)) or {}


def extract_thread(msg: dict[str, Any]) -> Thread | None:
    """Extrai reply-context (mensagem citada)."""
    context = msg.get("context")
    if not isinstance(context, dict):
        return None
    return Thread(phone=context.get("from"), message_id=context.get("id"))


def is_unsupported(message_type: str | None) -> bool:
    return message_type == RawMessageType.UNSUPPORTED
