"""Use case de consulta: normaliza, classifica, busca e formata.

Qualquer exceção inesperada no pipeline vira a resposta de erro interno;
esta é a única política de recuperação do fluxo.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from app.domain.phone import NumberAccepted, RejectionReason
from app.observability import get_correlation_id, record_latency, record_lookup_outcome
from app.services.lookup_replies import format_internal_error, format_lookup_reply
from config.logging import log_fallback

if TYPE_CHECKING:
    from app.protocols.contact_store import ContactStoreProtocol
    from app.services.phone_classifier import PhoneClassifier
    from app.services.phone_normalizer import PhoneNormalizer

logger = logging.getLogger(__name__)


class LookupOutcome(StrEnum):
    """Desfecho da consulta (usado em logs e métricas, sem PII)."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    UNPARSEABLE = "unparseable"
    WRONG_REGION = "wrong_region"
    INTERNAL_ERROR = "internal_error"


@dataclass(frozen=True, slots=True)
class PhoneLookupResult:
    """Resposta pronta para envio e o desfecho que a gerou."""

    reply_text: str
    outcome: LookupOutcome


class PhoneLookupUseCase:
    """Pipeline linear: normalize -> classify -> find_by_phone -> format."""

    def __init__(
        self,
        normalizer: PhoneNormalizer,
        classifier: PhoneClassifier,
        contact_store: ContactStoreProtocol,
    ) -> None:
        self._normalizer = normalizer
        self._classifier = classifier
        self._contact_store = contact_store

    async def execute(self, text: str) -> PhoneLookupResult:
        started_at = time.perf_counter()
        try:
            result = await self._run(text)
        except Exception as exc:
            logger.exception(
                "phone_lookup_failed",
                extra={"error_type": type(exc).__name__},
            )
            log_fallback(
                logger,
                "phone_lookup",
                reason=LookupOutcome.INTERNAL_ERROR.value,
                error_type=type(exc).__name__,
            )
            result = PhoneLookupResult(
                reply_text=format_internal_error(exc),
                outcome=LookupOutcome.INTERNAL_ERROR,
            )

        correlation_id = get_correlation_id()
        record_latency(
            "phone_lookup",
            "execute",
            (time.perf_counter() - started_at) * 1000,
            correlation_id,
        )
        record_lookup_outcome(result.outcome.value, correlation_id)
        return result

    async def _run(self, text: str) -> PhoneLookupResult:
        normalized = self._normalizer.normalize(text)
        classification = self._classifier.classify(normalized)

        if not isinstance(classification, NumberAccepted):
            outcome = (
                LookupOutcome.UNPARSEABLE
                if classification.reason is RejectionReason.UNPARSEABLE
                else LookupOutcome.WRONG_REGION
            )
            return PhoneLookupResult(
                reply_text=format_lookup_reply(normalized, classification),
                outcome=outcome,
            )

        contact = await self._contact_store.find_by_phone(normalized)
        return PhoneLookupResult(
            reply_text=format_lookup_reply(normalized, classification, contact),
            outcome=LookupOutcome.FOUND if contact is not None else LookupOutcome.NOT_FOUND,
        )
