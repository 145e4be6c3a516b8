"""Normalizer Telegram - extração de mensagens de texto do webhook."""

from .normalizer import normalize_update

__all__ = ["normalize_update"]
