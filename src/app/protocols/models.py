"""Modelos trocados entre a borda (api) e o núcleo (app)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class InboundTextMessage:
    """Mensagem de texto já extraída do update do canal."""

    update_id: int
    chat_id: int
    message_id: int
    text: str


@dataclass(frozen=True, slots=True)
class OutboundTextRequest:
    """Pedido de envio de uma mensagem de texto."""

    chat_id: int
    text: str
    parse_mode: str | None = "Markdown"


@dataclass(frozen=True, slots=True)
class OutboundMessageResponse:
    """Resultado do envio outbound."""

    success: bool
    message_id: int | None = None
    error_code: str | None = None
    error_message: str | None = None
