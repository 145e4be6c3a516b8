"""Normalização de números digitados pelo usuário para o formato canônico.

Regras (ordem fixa, a primeira que casar vence), para o código 963:
    0933123456    -> +963933123456   (celular com zero nacional)
    933123456     -> +963933123456   (celular sem zero)
    0112345678    -> +963112345678   (fixo com zero nacional)
    +963933123456 -> inalterado
    963933123456  -> +963933123456
    00963933123456 -> +963933123456 (prefixo internacional 00)
    qualquer outro -> texto limpo, inalterado (falha na classificação)

Dígitos arábico-índicos (٠-٩) e persas (۰-۹) são convertidos para ASCII
antes das regras.
"""

from __future__ import annotations

DEFAULT_COUNTRY_CODE = "963"

_STRIPPED_CHARS = str.maketrans("", "", " -()")
_ASCII_DIGITS = str.maketrans(
    "\u0660\u0661\u0662\u0663\u0664\u0665\u0666\u0667\u0668\u0669"
    "\u06f0\u06f1\u06f2\u06f3\u06f4\u06f5\u06f6\u06f7\u06f8\u06f9",
    "01234567890123456789",
)
INTERNATIONAL_PREFIX = "00"

NATIONAL_NUMBER_LENGTH = 10
MOBILE_SUBSCRIBER_LENGTH = 9


def clean_phone_text(raw: str | None) -> str:
    """Remove espaços, hífens e parênteses; converte dígitos arábicos."""
    return (raw or "").strip().translate(_STRIPPED_CHARS).translate(_ASCII_DIGITS)


def normalize(raw: str | None, country_code: str = DEFAULT_COUNTRY_CODE) -> str:
    """Reescreve o texto do usuário no formato internacional canônico.

    Nunca levanta exceção e sempre retorna string.

    Args:
        raw: Texto recebido (pode conter espaços e pontuação).
        country_code: Código de discagem do país, sem "+".

    Returns:
        Número canônico (+<código><assinante>) ou o texto limpo quando
        nenhuma regra se aplica.
    """
    cleaned = clean_phone_text(raw)
    prefix = f"+{country_code}"
    length = len(cleaned)

    if cleaned.startswith("09") and length == NATIONAL_NUMBER_LENGTH:
        return prefix + cleaned[1:]
    if cleaned.startswith("9") and length == MOBILE_SUBSCRIBER_LENGTH:
        return prefix + cleaned
    if cleaned.startswith("0") and length == NATIONAL_NUMBER_LENGTH:
        # "09..." já foi tratado acima
        return prefix + cleaned[1:]
    if cleaned.startswith(INTERNATIONAL_PREFIX + country_code):
        return "+" + cleaned[len(INTERNATIONAL_PREFIX):]
    if cleaned.startswith(prefix):
        return cleaned
    if cleaned.startswith(country_code):
        return "+" + cleaned
    return cleaned


class PhoneNormalizer:
    """Normalizador ligado a um código de país (injeção no use case)."""

    def __init__(self, country_code: str = DEFAULT_COUNTRY_CODE) -> None:
        self._country_code = country_code

    @property
    def country_code(self) -> str:
        return self._country_code

    def normalize(self, raw: str | None) -> str:
        return normalize(raw, self._country_code)
