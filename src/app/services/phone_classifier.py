"""Classificação de números contra o plano de numeração da região alvo.

Usa `phonenumbers` (porta Python da libphonenumber). Resultados esperados
(texto ilegível, número de outro país) voltam como `NumberRejected`; nenhuma
exceção é usada para esses casos.
"""

from __future__ import annotations

import logging

import phonenumbers
from phonenumbers import NumberParseException, PhoneNumberType

from app.domain.contact import LineType
from app.domain.phone import (
    Classification,
    NumberAccepted,
    NumberRejected,
    RejectionReason,
)

logger = logging.getLogger(__name__)

DEFAULT_REGION = "SY"


def classify(normalized: str, region: str = DEFAULT_REGION) -> Classification:
    """Valida o número e identifica o tipo de linha.

    Args:
        normalized: Número já normalizado (ex: "+963933123456").
        region: Região ISO alvo; também usada como região padrão do parse.

    Returns:
        NumberAccepted com line_type MOBILE/LANDLINE, ou NumberRejected com
        UNPARSEABLE (parse falhou) / WRONG_REGION (inválido ou outro país).
    """
    try:
        parsed = phonenumbers.parse(normalized, region)
    except NumberParseException as exc:
        logger.debug(
            "phone_parse_failed",
            extra={"error_type": exc.error_type, "region": region},
        )
        return NumberRejected(number=normalized, reason=RejectionReason.UNPARSEABLE)

    if not phonenumbers.is_valid_number(parsed):
        return NumberRejected(number=normalized, reason=RejectionReason.WRONG_REGION)

    resolved_region = phonenumbers.region_code_for_number(parsed)
    if resolved_region != region:
        return NumberRejected(number=normalized, reason=RejectionReason.WRONG_REGION)

    number_type = phonenumbers.number_type(parsed)
    line_type = LineType.MOBILE if number_type == PhoneNumberType.MOBILE else LineType.LANDLINE
    return NumberAccepted(number=normalized, line_type=line_type, region=resolved_region)


class PhoneClassifier:
    """Classificador ligado a uma região (injeção no use case)."""

    def __init__(self, region: str = DEFAULT_REGION) -> None:
        self._region = region

    @property
    def region(self) -> str:
        return self._region

    def classify(self, normalized: str) -> Classification:
        return classify(normalized, self._region)
