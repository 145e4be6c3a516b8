"""Extração da mensagem de texto de um TelegramUpdate.

Apenas `message.text` é considerado; edições, callbacks e mídias são
ignorados.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from api.connectors.telegram.models import TelegramMessage, TelegramUpdate


def extract_text_message(update: TelegramUpdate) -> TelegramMessage | None:
    """Retorna a mensagem se ela tiver texto não vazio."""
    message = update.message
    if message is None or message.text is None:
        return None
    if not message.text.strip():
        return None
    return message
