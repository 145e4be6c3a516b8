"""Agregador de settings do raqam_bot.

Re-exporta as settings de cada domínio. Cada arquivo isola um grupo de
variáveis de ambiente.
"""

from __future__ import annotations

from config.settings.base import (
    DEFAULT_PORT,
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.database import (
    ContactStoreBackend,
    DatabaseSettings,
    convert_database_url,
    get_database_settings,
)
from config.settings.phone import PhoneSettings, get_phone_settings
from config.settings.telegram import (
    TELEGRAM_API_BASE_URL,
    TelegramSettings,
    get_telegram_settings,
)

__all__ = [
    "DEFAULT_PORT",
    "TELEGRAM_API_BASE_URL",
    "BaseSettings",
    "ContactStoreBackend",
    "DatabaseSettings",
    "Environment",
    "PhoneSettings",
    "TelegramSettings",
    "convert_database_url",
    "get_base_settings",
    "get_database_settings",
    "get_phone_settings",
    "get_telegram_settings",
]
