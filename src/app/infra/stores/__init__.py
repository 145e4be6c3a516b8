"""Stores - implementações concretas de persistência.

Módulos disponíveis:
    - sql_contact_store: contatos em banco relacional (SQLAlchemy)
    - memory_contact_store: contatos em memória para desenvolvimento/testes
"""

from __future__ import annotations

from app.infra.stores.memory_contact_store import MemoryContactStore
from app.infra.stores.sql_contact_store import Base, ContactRecord, SqlContactStore

__all__ = [
    "Base",
    "ContactRecord",
    "MemoryContactStore",
    "SqlContactStore",
]
