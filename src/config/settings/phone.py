"""Settings do plano de numeração alvo."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

import phonenumbers

DEFAULT_REGION: str = "SY"


@dataclass(frozen=True)
class PhoneSettings:
    """Região aceita pelo bot.

    Attributes:
        region: Código ISO 3166-1 alfa-2 da região (ex: "SY")
    """

    region: str = DEFAULT_REGION

    @property
    def country_code(self) -> str:
        """Código de discagem internacional da região, sem "+" (ex: "963")."""
        return str(phonenumbers.country_code_for_region(self.region))

    def validate(self) -> list[str]:
        """Valida se a região é conhecida pelo plano de numeração."""
        errors: list[str] = []
        if self.region not in phonenumbers.SUPPORTED_REGIONS:
            errors.append(f"PHONE_REGION desconhecida: {self.region}")
        return errors


def _load_from_env() -> PhoneSettings:
    """Carrega PhoneSettings de variáveis de ambiente."""
    return PhoneSettings(region=os.getenv("PHONE_REGION", DEFAULT_REGION).upper())


@lru_cache(maxsize=1)
def get_phone_settings() -> PhoneSettings:
    """Retorna instância cacheada de PhoneSettings."""
    return _load_from_env()
