"""Bootstrap da aplicação - inicialização e wiring.

Composition root: configura logging, valida settings e constrói as
dependências concretas (engine, store, cliente Telegram, use cases).
Nada aqui é guardado em variável global de módulo; os handles criados
no startup ficam em `app.state`.
"""

from __future__ import annotations

import logging

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_database_settings,
    get_phone_settings,
    get_telegram_settings,
)

SERVICE_NAME = "raqam_bot"

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging JSON com correlation_id. Chamar uma vez no startup."""
    configure_logging(
        level=get_base_settings().effective_log_level,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> list[str]:
    """Valida settings obrigatórias no startup.

    Em staging/production falha rápido; em development apenas registra.

    Returns:
        Lista de erros encontrados (vazia = OK).

    Raises:
        RuntimeError: Configuração inválida em ambiente estrito.
    """
    base = get_base_settings()
    errors: list[str] = []
    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"telegram: {error}" for error in get_telegram_settings().validate())
    errors.extend(f"database: {error}" for error in get_database_settings().validate())
    errors.extend(f"phone: {error}" for error in get_phone_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return errors

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.is_strict:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")
    return errors
