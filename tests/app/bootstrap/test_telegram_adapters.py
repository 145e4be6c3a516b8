"""Testes para os adapters Telegram do bootstrap."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from api.connectors.telegram.http_base import HttpError
from api.connectors.telegram.models import TelegramUpdate
from app.bootstrap.telegram_adapters import BotApiOutboundSender, BotApiUpdateNormalizer
from app.protocols.models import OutboundTextRequest
from utils.errors import TelegramApiError


def _client(send_message: AsyncMock) -> MagicMock:
    client = MagicMock()
    client.send_message = send_message
    return client


class TestBotApiOutboundSender:
    """Testes para BotApiOutboundSender."""

    @pytest.mark.asyncio
    async def test_send_success_passes_built_payload(self) -> None:
        send_message = AsyncMock(return_value={"message_id": 99})
        sender = BotApiOutboundSender(_client(send_message))

        response = await sender.send(OutboundTextRequest(chat_id=1, text="مرحبا"))

        assert response.success is True
        assert response.message_id == 99
        payload: dict[str, Any] = send_message.await_args.args[0]
        assert payload == {"chat_id": 1, "text": "مرحبا", "parse_mode": "Markdown"}

    @pytest.mark.asyncio
    async def test_send_empty_text_is_payload_error(self) -> None:
        send_message = AsyncMock()
        sender = BotApiOutboundSender(_client(send_message))

        response = await sender.send(OutboundTextRequest(chat_id=1, text=""))

        assert response.success is False
        assert response.error_code == "PAYLOAD_BUILD_ERROR"
        send_message.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_send_bot_api_error(self) -> None:
        send_message = AsyncMock(
            side_effect=TelegramApiError("Forbidden: bot was blocked", error_code=403)
        )
        sender = BotApiOutboundSender(_client(send_message))

        response = await sender.send(OutboundTextRequest(chat_id=1, text="x"))

        assert response.success is False
        assert response.error_code == "TELEGRAM_API_ERROR_403"
        assert response.error_message == "Forbidden: bot was blocked"

    @pytest.mark.asyncio
    async def test_send_transport_error(self) -> None:
        send_message = AsyncMock(side_effect=HttpError("http_connection_error"))
        sender = BotApiOutboundSender(_client(send_message))

        response = await sender.send(OutboundTextRequest(chat_id=1, text="x"))

        assert response.success is False
        assert response.error_code == "TELEGRAM_TRANSPORT_ERROR"


def test_update_normalizer_extracts_text() -> None:
    update = TelegramUpdate.model_validate(
        {
            "update_id": 3,
            "message": {"message_id": 4, "chat": {"id": 8}, "text": " 0933123456 "},
        }
    )

    message = BotApiUpdateNormalizer().normalize(update)

    assert message is not None
    assert message.chat_id == 8
    assert message.text == "0933123456"
