"""Logging estruturado JSON do raqam_bot.

Uso:
    from config.logging import configure_logging, get_logger

    # Uma vez, no bootstrap
    configure_logging(level="INFO", service_name="raqam_bot")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("contact_lookup_done", extra={"found": True})

Todo registro carrega correlation_id, service, level, logger, message e
asctime. Nunca logar números de telefone, texto de mensagens ou tokens.
"""

from config.logging.config import configure_logging, get_logger, log_fallback
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_fallback",
]
