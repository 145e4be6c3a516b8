"""Entrypoint da aplicação raqam_bot.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 10000

Uso (desenvolvimento):
    python -m app.app
"""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import initialize_app, validate_runtime_settings
from app.bootstrap.clients import create_database_engine, create_telegram_client
from app.bootstrap.dependencies import (
    create_contact_store,
    create_phone_lookup_use_case,
    create_process_inbound_update,
)
from app.constants.seed_contacts import SEED_CONTACTS
from config.logging import get_logger
from config.settings import (
    get_base_settings,
    get_database_settings,
    get_phone_settings,
    get_telegram_settings,
)

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# Logging antes de qualquer import que registre logs no startup
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações
    - Cria engine e store de contatos; garante schema e seed
    - Cria cliente da Bot API e os use cases, guardados em app.state

    Shutdown:
    - Libera o pool de conexões
    """
    logger.info("app_starting", extra={"service": "raqam-bot"})
    validate_runtime_settings()

    database_settings = get_database_settings()
    telegram_settings = get_telegram_settings()

    app.state.engine = None
    app.state.contact_store = None
    app.state.process_update_use_case = None

    if database_settings.backend == "sql":
        app.state.engine = create_database_engine(database_settings)

    contact_store = create_contact_store(database_settings, app.state.engine)
    await contact_store.ensure_schema()
    if database_settings.seed_on_startup:
        await contact_store.seed_if_empty(list(SEED_CONTACTS))
    app.state.contact_store = contact_store

    lookup = create_phone_lookup_use_case(get_phone_settings(), contact_store)
    app.state.process_update_use_case = create_process_inbound_update(
        lookup=lookup,
        telegram_client=create_telegram_client(telegram_settings),
    )

    logger.info("app_started", extra={"service": "raqam-bot"})

    yield

    logger.info("app_shutting_down", extra={"service": "raqam-bot"})
    engine = getattr(app.state, "engine", None)
    if engine is not None:
        await asyncio.to_thread(engine.dispose)


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI."""
    fastapi_app = FastAPI(
        title="raqam_bot",
        description="Bot Telegram de consulta de números de telefone sírios",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url=None,
        openapi_url="/openapi.json",
    )

    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": "raqam-bot"})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Executa o servidor em 0.0.0.0:${PORT} (padrão 10000)."""
    import uvicorn

    port = get_base_settings().port
    logger.info("Starting raqam_bot", extra={"port": port})
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=port,
    )


if __name__ == "__main__":
    main()
