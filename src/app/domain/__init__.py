"""Modelos de domínio do raqam_bot."""

from app.domain.contact import Contact, LineType
from app.domain.phone import (
    Classification,
    NumberAccepted,
    NumberRejected,
    RejectionReason,
)

__all__ = [
    "Classification",
    "Contact",
    "LineType",
    "NumberAccepted",
    "NumberRejected",
    "RejectionReason",
]
