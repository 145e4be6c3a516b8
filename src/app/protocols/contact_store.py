"""Protocolo para leitura de contatos."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from app.domain.contact import Contact


@runtime_checkable
class ContactStoreProtocol(Protocol):
    """Contrato para store de Contact (somente leitura no fluxo de request)."""

    async def find_by_phone(self, phone: str) -> Contact | None:
        """Busca contato por igualdade exata do telefone canônico."""
        ...


@runtime_checkable
class SeedableContactStoreProtocol(ContactStoreProtocol, Protocol):
    """Operações de startup: schema, seed e verificação de saúde."""

    async def ensure_schema(self) -> None: ...

    async def seed_if_empty(self, contacts: list[Contact]) -> int: ...

    async def ping(self) -> bool: ...
