"""Montagem da resposta enviada ao usuário após a consulta."""

from __future__ import annotations

from app.constants.lookup_replies import (
    CONTACT_FOUND_TEMPLATE,
    CONTACT_NOT_FOUND_TEMPLATE,
    INTERNAL_ERROR_TEMPLATE,
    LINE_TYPE_LABELS,
    UNPARSEABLE_REPLY,
    WRONG_REGION_REPLY,
)
from app.domain.contact import Contact, LineType
from app.domain.phone import Classification, NumberRejected, RejectionReason

# Caracteres com significado no parse_mode "Markdown" da Bot API
_MARKDOWN_SPECIALS = str.maketrans({c: f"\\{c}" for c in "_*`["})


def escape_markdown(text: str) -> str:
    """Escapa _ * ` [ para texto dinâmico dentro de mensagem Markdown."""
    return text.translate(_MARKDOWN_SPECIALS)


def line_type_label(line_type: LineType) -> str:
    """Rótulo localizado do tipo de linha."""
    return LINE_TYPE_LABELS[line_type]


def format_lookup_reply(
    normalized: str,
    classification: Classification,
    contact: Contact | None = None,
) -> str:
    """Escolhe e preenche o texto de resposta.

    Com contato encontrado, o rótulo vem do tipo gravado no contato; sem
    contato, vem da classificação do plano de numeração.
    """
    if isinstance(classification, NumberRejected):
        if classification.reason is RejectionReason.UNPARSEABLE:
            return UNPARSEABLE_REPLY
        return WRONG_REGION_REPLY

    if contact is not None:
        return CONTACT_FOUND_TEMPLATE.format(
            name=escape_markdown(contact.name),
            label=line_type_label(contact.line_type),
            number=escape_markdown(normalized),
        )

    return CONTACT_NOT_FOUND_TEMPLATE.format(
        number=escape_markdown(normalized),
        label=line_type_label(classification.line_type),
    )


def format_internal_error(exc: BaseException) -> str:
    """Resposta genérica para falhas inesperadas, com a mensagem original."""
    return INTERNAL_ERROR_TEMPLATE.format(message=escape_markdown(str(exc)))
