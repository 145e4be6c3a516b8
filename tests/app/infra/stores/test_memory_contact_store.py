"""Testes para MemoryContactStore."""

from __future__ import annotations

import pytest

from app.constants.seed_contacts import SEED_CONTACTS
from app.domain import Contact, LineType
from app.infra.stores import MemoryContactStore
from app.protocols import SeedableContactStoreProtocol


@pytest.mark.asyncio
async def test_memory_store_seed_and_find() -> None:
    store = MemoryContactStore()

    inserted = await store.seed_if_empty(SEED_CONTACTS)
    contact = await store.find_by_phone("+963944123456")

    assert inserted == len(SEED_CONTACTS)
    assert contact is not None
    assert contact.name == "فاطمة علي"


@pytest.mark.asyncio
async def test_memory_store_seed_skipped_when_not_empty() -> None:
    store = MemoryContactStore(
        [Contact(phone="+963933000000", name="x", line_type=LineType.MOBILE)]
    )

    assert await store.seed_if_empty(SEED_CONTACTS) == 0
    assert await store.find_by_phone("+963933123456") is None


@pytest.mark.asyncio
async def test_memory_store_health_operations() -> None:
    store = MemoryContactStore()

    assert await store.ensure_schema() is None
    assert await store.ping() is True


def test_memory_store_satisfies_protocol() -> None:
    assert isinstance(MemoryContactStore(), SeedableContactStoreProtocol)
