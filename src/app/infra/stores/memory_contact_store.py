"""Store de Contact em memória para desenvolvimento/testes."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from app.domain.contact import Contact

logger = logging.getLogger(__name__)


class MemoryContactStore:
    """Store em memória; não compartilha estado entre processos."""

    def __init__(self, contacts: Iterable[Contact] | None = None) -> None:
        self._contacts: dict[str, Contact] = {c.phone: c for c in contacts or ()}

    async def find_by_phone(self, phone: str) -> Contact | None:
        return self._contacts.get(phone)

    async def ensure_schema(self) -> None:
        return None

    async def seed_if_empty(self, contacts: Iterable[Contact]) -> int:
        if self._contacts:
            return 0
        self._contacts = {c.phone: c for c in contacts}
        logger.info("contact_seed_inserted", extra={"backend": "memory"})
        return len(self._contacts)

    async def ping(self) -> bool:
        return True
