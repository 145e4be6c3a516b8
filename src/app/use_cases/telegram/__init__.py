"""Casos de uso do canal Telegram."""

from .lookup_phone import LookupOutcome, PhoneLookupResult, PhoneLookupUseCase
from .process_inbound_update import (
    InboundProcessingResult,
    ProcessInboundUpdateUseCase,
    UpdateNormalizerProtocol,
)

__all__ = [
    "InboundProcessingResult",
    "LookupOutcome",
    "PhoneLookupResult",
    "PhoneLookupUseCase",
    "ProcessInboundUpdateUseCase",
    "UpdateNormalizerProtocol",
]
