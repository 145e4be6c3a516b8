"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    DatabaseUnavailableError,
    InfrastructureError,
    TelegramApiError,
)

__all__ = [
    "DatabaseUnavailableError",
    "InfrastructureError",
    "TelegramApiError",
]
