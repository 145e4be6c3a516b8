"""Endpoint de webhook do Telegram.

POST /webhook/{token}: o segmento {token} precisa ser igual ao token do bot.

Respostas:
- 401: token do path (ou header de secret, se configurado) inválido
- 200: update processado, ignorado (sem texto, JSON/schema inválido) ou
  com erro (falha no envio, pipeline ausente).
  Após a autenticação nada responde diferente de 200, para o Telegram não
  reentregar o mesmo update.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Request, Response, status

from api.connectors.telegram.webhook.receive import (
    InvalidJsonError,
    InvalidUpdateError,
    WebhookAuthError,
    parse_webhook_request,
)
from app.coordinators.telegram.inbound.handler import process_inbound_update
from app.observability import get_correlation_id, reset_correlation_id, set_correlation_id
from config.settings import get_telegram_settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/{token}", response_model=None)
async def receive_update(token: str, request: Request) -> Response | dict[str, Any]:
    """Recebe um update do Telegram e responde ao chat de origem."""
    correlation_token = set_correlation_id(request.headers.get("x-correlation-id"))

    try:
        settings = get_telegram_settings()
        raw_body = await request.body()

        try:
            update, auth_result = parse_webhook_request(
                raw_body=raw_body,
                headers=dict(request.headers),
                path_token=token,
                bot_token=settings.bot_token,
                secret=settings.webhook_secret or None,
            )
        except WebhookAuthError as exc:
            logger.warning(
                "webhook_auth_failed",
                extra={"channel": "telegram", "error": str(exc)},
            )
            return Response(
                content="Unauthorized",
                media_type="text/plain",
                status_code=status.HTTP_401_UNAUTHORIZED,
            )
        except (InvalidJsonError, InvalidUpdateError) as exc:
            logger.warning(
                "webhook_payload_invalid",
                extra={
                    "channel": "telegram",
                    "error": str(exc),
                    "payload_size": len(raw_body),
                },
            )
            return {"status": "ignored", "correlation_id": get_correlation_id()}

        logger.info(
            "webhook_received",
            extra={
                "channel": "telegram",
                "update_id": update.update_id,
                "secret_checked": auth_result.secret_checked,
                "payload_size": len(raw_body),
            },
        )

        use_case = getattr(request.app.state, "process_update_use_case", None)
        if use_case is None:
            logger.error(
                "webhook_use_case_unavailable",
                extra={"channel": "telegram", "update_id": update.update_id},
            )
            return {"status": "error", "correlation_id": get_correlation_id()}

        try:
            result = await process_inbound_update(
                update=update,
                correlation_id=get_correlation_id(),
                use_case=use_case,
            )
        except Exception:
            logger.exception(
                "webhook_processing_failed",
                extra={"channel": "telegram", "update_id": update.update_id},
            )
            return {"status": "error", "correlation_id": get_correlation_id()}

        return {
            "status": "processed" if result.processed else "ignored",
            "correlation_id": get_correlation_id(),
        }

    finally:
        reset_correlation_id(correlation_token)
