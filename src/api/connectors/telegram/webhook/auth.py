"""Autenticação do webhook Telegram.

O segmento secreto da URL (/webhook/{token}) é comparado ao token do bot.
Opcionalmente, o header X-Telegram-Bot-Api-Secret-Token (definido via
setWebhook secret_token) também é exigido quando configurado.
"""

from __future__ import annotations

import hmac
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

SECRET_TOKEN_HEADER = "x-telegram-bot-api-secret-token"


@dataclass(frozen=True, slots=True)
class AuthResult:
    """Resultado da autenticação do webhook."""

    valid: bool
    secret_checked: bool = False
    error: str | None = None


def _constant_time_equals(received: str, expected: str) -> bool:
    return hmac.compare_digest(received.encode("utf-8"), expected.encode("utf-8"))


def verify_path_token(path_token: str | None, bot_token: str | None) -> AuthResult:
    """Compara o token do path com o token do bot em tempo constante."""
    if not bot_token:
        return AuthResult(valid=False, error="missing_bot_token")
    if not path_token or not _constant_time_equals(path_token, bot_token):
        return AuthResult(valid=False, error="path_token_mismatch")
    return AuthResult(valid=True)


def verify_secret_header(
    headers: Mapping[str, str],
    secret: str | None,
) -> AuthResult:
    """Valida o header de secret; sem secret configurado, a checagem é pulada."""
    if not secret:
        return AuthResult(valid=True, secret_checked=False)

    received = _get_header(headers, SECRET_TOKEN_HEADER)
    if not received:
        return AuthResult(valid=False, secret_checked=True, error="missing_secret_header")
    if not _constant_time_equals(received, secret):
        return AuthResult(valid=False, secret_checked=True, error="secret_header_mismatch")
    return AuthResult(valid=True, secret_checked=True)


def _get_header(headers: Mapping[str, str], name: str) -> str | None:
    for key, value in headers.items():
        if key.lower() == name:
            return value
    return None
