"""Factories de stores e use cases - criação de implementações concretas."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.bootstrap.telegram_adapters import BotApiOutboundSender, BotApiUpdateNormalizer
from app.infra.stores import MemoryContactStore, SqlContactStore
from app.services.phone_classifier import PhoneClassifier
from app.services.phone_normalizer import PhoneNormalizer
from app.use_cases.telegram import PhoneLookupUseCase, ProcessInboundUpdateUseCase

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

    from api.connectors.telegram.http_client import TelegramHttpClient
    from app.protocols.contact_store import (
        ContactStoreProtocol,
        SeedableContactStoreProtocol,
    )
    from config.settings import DatabaseSettings, PhoneSettings

logger = logging.getLogger(__name__)


def create_contact_store(
    settings: DatabaseSettings,
    engine: Engine | None = None,
) -> SeedableContactStoreProtocol:
    """Cria store de contatos conforme CONTACT_STORE_BACKEND.

    - "sql": SqlContactStore (exige engine)
    - "memory": MemoryContactStore (dev/testes)
    """
    if settings.backend == "memory":
        logger.info("contact_store_created", extra={"backend": "memory"})
        return MemoryContactStore()

    if engine is None:
        msg = "engine é obrigatório para CONTACT_STORE_BACKEND=sql"
        raise ValueError(msg)

    logger.info("contact_store_created", extra={"backend": "sql"})
    return SqlContactStore(engine)


def create_phone_lookup_use_case(
    phone_settings: PhoneSettings,
    contact_store: ContactStoreProtocol,
) -> PhoneLookupUseCase:
    """Cria o pipeline de consulta para a região configurada."""
    return PhoneLookupUseCase(
        normalizer=PhoneNormalizer(phone_settings.country_code),
        classifier=PhoneClassifier(phone_settings.region),
        contact_store=contact_store,
    )


def create_process_inbound_update(
    *,
    lookup: PhoneLookupUseCase,
    telegram_client: TelegramHttpClient,
) -> ProcessInboundUpdateUseCase:
    """Cria o use case inbound com normalizer e sender da Bot API."""
    return ProcessInboundUpdateUseCase(
        normalizer=BotApiUpdateNormalizer(),
        lookup=lookup,
        sender=BotApiOutboundSender(telegram_client),
    )
