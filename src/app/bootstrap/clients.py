"""Factories de clientes externos - Engine SQLAlchemy e Bot API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from api.connectors.telegram.http_client import (
    TelegramHttpClient,
    create_telegram_http_client,
)

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

    from config.settings import DatabaseSettings, TelegramSettings

logger = logging.getLogger(__name__)


def create_database_engine(settings: DatabaseSettings) -> Engine:
    """Cria Engine a partir de DATABASE_URL.

    SQLite em memória usa StaticPool para que todas as threads vejam o
    mesmo banco; SQLite em arquivo libera check_same_thread porque as
    consultas rodam via asyncio.to_thread.
    """
    url = settings.sqlalchemy_url

    if url.startswith("sqlite"):
        kwargs: dict[str, object] = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        engine = create_engine(url, echo=settings.echo, **kwargs)
    else:
        engine = create_engine(url, echo=settings.echo, pool_pre_ping=True)

    logger.info(
        "database_engine_created",
        extra={"dialect": engine.dialect.name, "driver": engine.dialect.driver},
    )
    return engine


def create_telegram_client(settings: TelegramSettings) -> TelegramHttpClient:
    """Cria cliente da Bot API."""
    client = create_telegram_http_client(settings)
    logger.info("telegram_client_created", extra={"token_set": bool(settings.bot_token)})
    return client
