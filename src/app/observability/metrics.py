"""Métricas registradas como logs estruturados.

Os registros podem ser agregados depois pelo coletor de logs da
hospedagem. Nenhum valor de telefone ou texto de mensagem é registrado.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de uma operação.

    Args:
        component: Nome do componente (ex: "phone_lookup")
        operation: Nome da operação (ex: "execute")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id,
        },
    )


def record_lookup_outcome(outcome: str, correlation_id: str | None = None) -> None:
    """Conta o desfecho de uma consulta (found, not_found, unparseable...)."""
    logger.info(
        "metric_lookup_outcome",
        extra={
            "metric_type": "counter",
            "outcome": outcome,
            "correlation_id": correlation_id,
        },
    )
