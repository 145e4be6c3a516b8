"""Store de Contact em banco relacional (SQLAlchemy).

Tabela `contacts` (phone único, name, type). O driver é síncrono; cada
operação roda em thread via asyncio.to_thread para não bloquear o loop.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from sqlalchemy import Column, Integer, String, func, select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker

from app.domain.contact import Contact
from utils.errors import DatabaseUnavailableError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)

Base = declarative_base()


class ContactRecord(Base):
    __tablename__ = "contacts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    phone = Column(String(32), nullable=False, unique=True, index=True)
    name = Column(String(255), nullable=False)
    type = Column(String(16), nullable=False)

    def to_contact(self) -> Contact:
        return Contact.from_row(self.phone, self.name, self.type)


class SqlContactStore:
    """Store de Contact sobre um Engine SQLAlchemy."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine
        self._sessions = sessionmaker(bind=engine, expire_on_commit=False)

    async def find_by_phone(self, phone: str) -> Contact | None:
        return await asyncio.to_thread(self._find_by_phone_sync, phone)

    def _find_by_phone_sync(self, phone: str) -> Contact | None:
        try:
            with self._sessions() as session:
                record = session.execute(
                    select(ContactRecord).where(ContactRecord.phone == phone)
                ).scalar_one_or_none()
                return record.to_contact() if record is not None else None
        except SQLAlchemyError as exc:
            logger.error(
                "contact_lookup_failed",
                extra={"error_type": type(exc).__name__},
            )
            raise DatabaseUnavailableError("falha ao consultar contatos") from exc

    async def ensure_schema(self) -> None:
        """Cria a tabela se ainda não existir (idempotente)."""
        await asyncio.to_thread(Base.metadata.create_all, self._engine)
        logger.info("contact_schema_ready")

    async def seed_if_empty(self, contacts: Iterable[Contact]) -> int:
        """Insere os contatos iniciais apenas se a tabela estiver vazia.

        Returns:
            Quantidade de linhas inseridas (0 se já havia dados).
        """
        return await asyncio.to_thread(self._seed_if_empty_sync, list(contacts))

    def _seed_if_empty_sync(self, contacts: list[Contact]) -> int:
        with self._sessions() as session:
            existing = session.execute(select(func.count(ContactRecord.id))).scalar_one()
            if existing:
                logger.info("contact_seed_skipped", extra={"existing_rows": existing})
                return 0
            session.add_all(
                ContactRecord(phone=c.phone, name=c.name, type=c.line_type.value)
                for c in contacts
            )
            session.commit()
        logger.info("contact_seed_inserted", extra={"inserted_rows": len(contacts)})
        return len(contacts)

    async def ping(self) -> bool:
        """Executa SELECT 1; levanta DatabaseUnavailableError se falhar."""
        return await asyncio.to_thread(self._ping_sync)

    def _ping_sync(self) -> bool:
        try:
            with self._engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            raise DatabaseUnavailableError("banco indisponível") from exc
        return True
