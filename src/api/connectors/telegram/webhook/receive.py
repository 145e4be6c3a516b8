"""Autenticação e parsing tipado do update recebido (sem PII)."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from pydantic import ValidationError

from api.connectors.telegram.models import TelegramUpdate

from .auth import AuthResult, verify_path_token, verify_secret_header

if TYPE_CHECKING:
    from collections.abc import Mapping


class WebhookRequestError(ValueError):
    """Erro base para falhas de webhook."""


class WebhookAuthError(WebhookRequestError):
    """Request não autenticado (resposta 401)."""


class InvalidPathTokenError(WebhookAuthError):
    """Token do path não confere com o token do bot."""


class InvalidSecretTokenError(WebhookAuthError):
    """Header de secret ausente ou diferente do configurado."""


class InvalidJsonError(WebhookRequestError):
    """JSON inválido no corpo do webhook."""


class InvalidUpdateError(WebhookRequestError):
    """JSON válido, mas fora do schema de Update."""


def authenticate_webhook_request(
    *,
    path_token: str | None,
    headers: Mapping[str, str],
    bot_token: str | None,
    secret: str | None,
) -> AuthResult:
    """Aplica as duas checagens de autenticação.

    Raises:
        InvalidPathTokenError: Token do path inválido.
        InvalidSecretTokenError: Header de secret inválido.
    """
    path_result = verify_path_token(path_token, bot_token)
    if not path_result.valid:
        raise InvalidPathTokenError(path_result.error or "invalid_path_token")

    secret_result = verify_secret_header(headers, secret)
    if not secret_result.valid:
        raise InvalidSecretTokenError(secret_result.error or "invalid_secret_token")

    return secret_result


def parse_update(raw_body: bytes) -> TelegramUpdate:
    """Converte o corpo bruto em TelegramUpdate.

    Raises:
        InvalidJsonError: Corpo não é JSON ou não é objeto.
        InvalidUpdateError: Objeto sem os campos obrigatórios do Update.
    """
    try:
        payload = json.loads(raw_body or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonError("invalid_json") from exc

    if not isinstance(payload, dict):
        raise InvalidJsonError("payload_not_object")

    try:
        return TelegramUpdate.model_validate(payload)
    except ValidationError as exc:
        raise InvalidUpdateError(f"invalid_update: {exc.error_count()} error(s)") from exc


def parse_webhook_request(
    *,
    raw_body: bytes,
    headers: Mapping[str, str],
    path_token: str | None,
    bot_token: str | None,
    secret: str | None = None,
) -> tuple[TelegramUpdate, AuthResult]:
    """Autentica e parseia o webhook. Autenticação sempre vem primeiro."""
    auth_result = authenticate_webhook_request(
        path_token=path_token,
        headers=headers,
        bot_token=bot_token,
        secret=secret,
    )
    return parse_update(raw_body), auth_result
