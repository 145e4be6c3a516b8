"""Webhook Telegram: autenticação por token e parsing tipado."""

from .auth import AuthResult, verify_path_token, verify_secret_header
from .receive import (
    InvalidJsonError,
    InvalidPathTokenError,
    InvalidSecretTokenError,
    InvalidUpdateError,
    WebhookAuthError,
    WebhookRequestError,
    authenticate_webhook_request,
    parse_update,
    parse_webhook_request,
)

__all__ = [
    "AuthResult",
    "InvalidJsonError",
    "InvalidPathTokenError",
    "InvalidSecretTokenError",
    "InvalidUpdateError",
    "WebhookAuthError",
    "WebhookRequestError",
    "authenticate_webhook_request",
    "parse_update",
    "parse_webhook_request",
    "verify_path_token",
    "verify_secret_header",
]
