"""Protocolos de envio outbound."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import OutboundMessageResponse, OutboundTextRequest


class OutboundSenderProtocol(Protocol):
    """Contrato mínimo para enviar uma mensagem de texto."""

    async def send(self, request: OutboundTextRequest) -> OutboundMessageResponse: ...
