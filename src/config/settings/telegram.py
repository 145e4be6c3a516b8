"""Settings específicas de Telegram.

Configurações do canal Telegram via Bot API.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

TELEGRAM_API_BASE_URL: str = "https://api.telegram.org"


@dataclass(frozen=True)
class TelegramSettings:
    """Configurações do canal Telegram.

    Attributes:
        bot_token: Token do bot (obtido via @BotFather). Também é o segmento
            secreto da URL do webhook.
        webhook_secret: Valor esperado no header
            X-Telegram-Bot-Api-Secret-Token (opcional).
        api_base_url: URL base da Bot API
        request_timeout_seconds: Timeout para requisições HTTP
    """

    bot_token: str = ""
    webhook_secret: str = ""

    api_base_url: str = TELEGRAM_API_BASE_URL

    request_timeout_seconds: float = 30.0

    def validate(self) -> list[str]:
        """Valida configurações mínimas de Telegram."""
        errors: list[str] = []

        if not self.bot_token:
            errors.append("TELEGRAM_BOT_TOKEN não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("TELEGRAM_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> TelegramSettings:
    """Carrega TelegramSettings de variáveis de ambiente."""
    return TelegramSettings(
        bot_token=os.getenv("TELEGRAM_BOT_TOKEN", "") or os.getenv("BOT_TOKEN", ""),
        webhook_secret=os.getenv("TELEGRAM_WEBHOOK_SECRET", ""),
        api_base_url=os.getenv("TELEGRAM_API_BASE_URL", TELEGRAM_API_BASE_URL),
        request_timeout_seconds=float(
            os.getenv("TELEGRAM_REQUEST_TIMEOUT_SECONDS", "30")
        ),
    )


@lru_cache(maxsize=1)
def get_telegram_settings() -> TelegramSettings:
    """Retorna instância cacheada de TelegramSettings."""
    return _load_from_env()
