"""Parsing de respostas de erro da Bot API.

Formato de erro: {"ok": false, "error_code": 400, "description": "..."}
"""

from __future__ import annotations

from typing import Any

from utils.errors import TelegramApiError


def parse_bot_api_error(response_data: dict[str, Any]) -> TelegramApiError | None:
    """Extrai o erro do response da Bot API.

    Returns:
        TelegramApiError se `ok` for falso, None se sucesso.
    """
    if response_data.get("ok") is True:
        return None

    raw_code = response_data.get("error_code")
    error_code = raw_code if isinstance(raw_code, int) else None
    description = str(response_data.get("description") or "Erro desconhecido")

    return TelegramApiError(description, error_code=error_code)
