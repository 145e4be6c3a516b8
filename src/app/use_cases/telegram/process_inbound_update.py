"""Use case inbound: update -> texto -> consulta -> uma resposta."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

from app.protocols.models import OutboundTextRequest

if TYPE_CHECKING:
    from app.protocols.models import InboundTextMessage
    from app.protocols.outbound_sender import OutboundSenderProtocol
    from app.use_cases.telegram.lookup_phone import PhoneLookupUseCase

logger = logging.getLogger(__name__)


class UpdateNormalizerProtocol(Protocol):
    """Converte o update do canal em mensagem interna (None = nada a fazer)."""

    def normalize(self, update: Any) -> InboundTextMessage | None: ...


@dataclass(frozen=True, slots=True)
class InboundProcessingResult:
    """Resumo do processamento de um update (sem PII)."""

    processed: bool
    sent: bool = False
    outcome: str | None = None
    skipped_reason: str | None = None
    error_code: str | None = None


class ProcessInboundUpdateUseCase:
    """Processa um update: no máximo uma mensagem outbound por update."""

    def __init__(
        self,
        normalizer: UpdateNormalizerProtocol,
        lookup: PhoneLookupUseCase,
        sender: OutboundSenderProtocol,
    ) -> None:
        self._normalizer = normalizer
        self._lookup = lookup
        self._sender = sender

    async def execute(self, update: Any) -> InboundProcessingResult:
        message = self._normalizer.normalize(update)
        if message is None:
            return InboundProcessingResult(processed=False, skipped_reason="no_text")

        lookup_result = await self._lookup.execute(message.text)

        response = await self._sender.send(
            OutboundTextRequest(
                chat_id=message.chat_id,
                text=lookup_result.reply_text,
            )
        )
        if not response.success:
            logger.error(
                "telegram_send_failed",
                extra={
                    "update_id": message.update_id,
                    "error_code": response.error_code,
                },
            )

        return InboundProcessingResult(
            processed=True,
            sent=response.success,
            outcome=lookup_result.outcome.value,
            error_code=response.error_code,
        )
