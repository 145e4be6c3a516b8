"""Schema tipado do update recebido no webhook (subconjunto da Bot API).

Campos desconhecidos são ignorados; apenas o necessário para responder a
mensagens de texto é declarado.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _TelegramModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class TelegramUser(_TelegramModel):
    id: int
    is_bot: bool = False
    first_name: str = ""
    username: str | None = None


class TelegramChat(_TelegramModel):
    id: int
    type: str = "private"


class TelegramMessage(_TelegramModel):
    message_id: int
    date: int = 0
    chat: TelegramChat
    from_user: TelegramUser | None = Field(default=None, alias="from")
    text: str | None = None


class TelegramUpdate(_TelegramModel):
    """Um update do webhook. Só `message` é processado."""

    update_id: int
    message: TelegramMessage | None = None
    edited_message: TelegramMessage | None = None
