"""Adapters concretos para Telegram (wiring em app/bootstrap).

Este módulo é o único autorizado a acoplar app <-> api.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.connectors.telegram.http_base import HttpError
from api.normalizers.telegram import normalize_update
from api.payload_builders.telegram import build_send_message_payload
from app.protocols.models import InboundTextMessage, OutboundMessageResponse
from utils.errors import TelegramApiError

if TYPE_CHECKING:
    from api.connectors.telegram.http_client import TelegramHttpClient
    from app.protocols.models import OutboundTextRequest

logger = logging.getLogger(__name__)


class BotApiUpdateNormalizer:
    """Normalizador de TelegramUpdate para InboundTextMessage."""

    def normalize(self, update: Any) -> InboundTextMessage | None:
        return normalize_update(update)


class BotApiOutboundSender:
    """Sender outbound usando o cliente HTTP da Bot API."""

    def __init__(self, client: TelegramHttpClient) -> None:
        self._client = client

    async def send(self, request: OutboundTextRequest) -> OutboundMessageResponse:
        try:
            payload = build_send_message_payload(request)
        except ValueError as exc:
            return OutboundMessageResponse(
                success=False,
                error_code="PAYLOAD_BUILD_ERROR",
                error_message=str(exc),
            )

        try:
            result = await self._client.send_message(payload)
        except TelegramApiError as exc:
            return OutboundMessageResponse(
                success=False,
                error_code=f"TELEGRAM_API_ERROR_{exc.error_code or 'UNKNOWN'}",
                error_message=exc.description,
            )
        except (HttpError, ValueError) as exc:
            return OutboundMessageResponse(
                success=False,
                error_code="TELEGRAM_TRANSPORT_ERROR",
                error_message=str(exc),
            )

        message_id = result.get("message_id")
        logger.info(
            "message_sent_to_telegram_api",
            extra={"message_id": message_id},
        )
        return OutboundMessageResponse(
            success=True,
            message_id=message_id if isinstance(message_id, int) else None,
        )
