"""Resultado da classificação de um número normalizado.

A classificação é um tipo-soma explícito: `NumberAccepted | NumberRejected`.
Rejeições são resultados esperados, não exceções.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Literal

from app.domain.contact import LineType


class RejectionReason(StrEnum):
    """Motivo de rejeição de um número."""

    UNPARSEABLE = "unparseable"
    WRONG_REGION = "wrong_region"


@dataclass(frozen=True, slots=True)
class NumberAccepted:
    """Número válido dentro da região alvo."""

    number: str
    line_type: LineType
    region: str

    @property
    def valid(self) -> Literal[True]:
        return True


@dataclass(frozen=True, slots=True)
class NumberRejected:
    """Número recusado pelo plano de numeração."""

    number: str
    reason: RejectionReason

    @property
    def valid(self) -> Literal[False]:
        return False


Classification = NumberAccepted | NumberRejected
