"""Conector Telegram: cliente da Bot API, schema do update e webhook."""

from .http_client import TelegramHttpClient, create_telegram_http_client
from .models import TelegramChat, TelegramMessage, TelegramUpdate, TelegramUser

__all__ = [
    "TelegramChat",
    "TelegramHttpClient",
    "TelegramMessage",
    "TelegramUpdate",
    "TelegramUser",
    "create_telegram_http_client",
]
