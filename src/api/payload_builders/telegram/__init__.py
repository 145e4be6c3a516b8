"""Payload builders Telegram."""

from .text import build_send_message_payload

__all__ = ["build_send_message_payload"]
