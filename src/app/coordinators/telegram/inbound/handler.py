"""Processamento inbound: executa o use case e registra o resumo."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.use_cases.telegram.process_inbound_update import (
        InboundProcessingResult,
        ProcessInboundUpdateUseCase,
    )

logger = logging.getLogger(__name__)


async def process_inbound_update(
    update: Any,
    correlation_id: str,
    use_case: ProcessInboundUpdateUseCase,
) -> InboundProcessingResult:
    """Processa um update via use case injetado. Sem logs com PII.

    Args:
        update: TelegramUpdate já validado
        correlation_id: ID de correlação para rastreamento
        use_case: Use case inbound construído no startup
    """
    result = await use_case.execute(update)

    logger.info(
        "inbound_processed",
        extra={
            "correlation_id": correlation_id,
            "processed": result.processed,
            "sent": result.sent,
            "outcome": result.outcome,
            "skipped_reason": result.skipped_reason,
        },
    )

    return result
