"""Normalizer Telegram - converte o update para o modelo interno."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.normalizers.telegram.extractor import extract_text_message
from app.protocols.models import InboundTextMessage

if TYPE_CHECKING:
    from api.connectors.telegram.models import TelegramUpdate


def normalize_update(update: TelegramUpdate) -> InboundTextMessage | None:
    """Converte update em InboundTextMessage; None quando não há texto."""
    message = extract_text_message(update)
    if message is None:
        return None
    return InboundTextMessage(
        update_id=update.update_id,
        chat_id=message.chat.id,
        message_id=message.message_id,
        text=(message.text or "").strip(),
    )
