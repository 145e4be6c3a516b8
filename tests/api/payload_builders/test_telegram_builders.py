"""Testes para o builder de sendMessage."""

from __future__ import annotations

import pytest

from api.payload_builders.telegram import build_send_message_payload
from api.payload_builders.telegram.text import MAX_TEXT_LENGTH
from app.protocols.models import OutboundTextRequest


def test_build_minimal_payload() -> None:
    payload = build_send_message_payload(
        OutboundTextRequest(chat_id=10, text="hi", parse_mode=None)
    )

    assert payload == {"chat_id": 10, "text": "hi"}


def test_build_payload_defaults_to_markdown() -> None:
    payload = build_send_message_payload(OutboundTextRequest(chat_id=10, text="hi"))

    assert payload == {"chat_id": 10, "text": "hi", "parse_mode": "Markdown"}


def test_empty_text_rejected() -> None:
    with pytest.raises(ValueError, match="vazio"):
        build_send_message_payload(OutboundTextRequest(chat_id=1, text=""))


def test_text_too_long_rejected() -> None:
    with pytest.raises(ValueError, match="excede"):
        build_send_message_payload(
            OutboundTextRequest(chat_id=1, text="x" * (MAX_TEXT_LENGTH + 1))
        )
