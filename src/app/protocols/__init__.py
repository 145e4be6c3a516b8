"""Protocolos e contratos do core da aplicação."""

from .contact_store import ContactStoreProtocol, SeedableContactStoreProtocol
from .models import InboundTextMessage, OutboundMessageResponse, OutboundTextRequest
from .outbound_sender import OutboundSenderProtocol

__all__ = [
    "ContactStoreProtocol",
    "InboundTextMessage",
    "OutboundMessageResponse",
    "OutboundSenderProtocol",
    "OutboundTextRequest",
    "SeedableContactStoreProtocol",
]
