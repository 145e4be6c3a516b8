"""Builder do payload de sendMessage."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.protocols.models import OutboundTextRequest

MAX_TEXT_LENGTH = 4096


def build_send_message_payload(request: OutboundTextRequest) -> dict[str, Any]:
    """Constrói o JSON de sendMessage conforme a Bot API.

    Raises:
        ValueError: Texto vazio ou acima de 4096 caracteres.
    """
    if not request.text:
        raise ValueError("text não pode ser vazio")
    if len(request.text) > MAX_TEXT_LENGTH:
        raise ValueError(f"text excede {MAX_TEXT_LENGTH} caracteres")

    payload: dict[str, Any] = {
        "chat_id": request.chat_id,
        "text": request.text,
    }
    if request.parse_mode:
        payload["parse_mode"] = request.parse_mode
    return payload
