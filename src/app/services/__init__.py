"""Serviços de aplicação.

Unidades puras do pipeline de consulta (sem IO direto).
Implementações concretas de IO ficam em app/infra/.
"""

from app.services.lookup_replies import (
    escape_markdown,
    format_internal_error,
    format_lookup_reply,
)
from app.services.phone_classifier import PhoneClassifier, classify
from app.services.phone_normalizer import PhoneNormalizer, normalize

__all__ = [
    "PhoneClassifier",
    "PhoneNormalizer",
    "classify",
    "escape_markdown",
    "format_internal_error",
    "format_lookup_reply",
    "normalize",
]
