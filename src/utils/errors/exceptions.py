"""Exceções de domínio para falhas de infraestrutura."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura."""


class DatabaseUnavailableError(InfrastructureError):
    """Falha ao acessar o banco de contatos."""


class TelegramApiError(InfrastructureError):
    """Resposta de erro da Bot API (`{"ok": false, ...}`).

    Args:
        description: Texto devolvido pela API (sem token).
        error_code: Código numérico da API (espelha o HTTP status).
    """

    def __init__(self, description: str, error_code: int | None = None) -> None:
        super().__init__(description)
        self.description = description
        self.error_code = error_code
