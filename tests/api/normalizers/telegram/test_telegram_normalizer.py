"""Testes para o normalizer de updates Telegram."""

from __future__ import annotations

from api.connectors.telegram.models import TelegramUpdate
from api.normalizers.telegram import normalize_update
from api.normalizers.telegram.extractor import extract_text_message


def _update(message: dict[str, object] | None = None, **extra: object) -> TelegramUpdate:
    payload: dict[str, object] = {"update_id": 77, **extra}
    if message is not None:
        payload["message"] = message
    return TelegramUpdate.model_validate(payload)


def test_normalize_text_message() -> None:
    update = _update({"message_id": 3, "chat": {"id": -100}, "text": "  0933123456\n"})

    message = normalize_update(update)

    assert message is not None
    assert message.update_id == 77
    assert message.chat_id == -100
    assert message.message_id == 3
    assert message.text == "0933123456"


def test_photo_without_text_is_ignored() -> None:
    update = _update({"message_id": 3, "chat": {"id": 1}, "photo": [{"file_id": "a"}]})

    assert normalize_update(update) is None


def test_blank_text_is_ignored() -> None:
    update = _update({"message_id": 3, "chat": {"id": 1}, "text": "   "})

    assert extract_text_message(update) is None


def test_edited_message_is_ignored() -> None:
    update = _update(
        edited_message={"message_id": 3, "chat": {"id": 1}, "text": "0933123456"}
    )

    assert normalize_update(update) is None
