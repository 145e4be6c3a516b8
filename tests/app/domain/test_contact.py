"""Testes para os modelos de domínio."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from app.domain import Contact, LineType, NumberAccepted, NumberRejected, RejectionReason


class TestContact:
    """Testes do modelo Contact."""

    def test_from_row_mobile(self) -> None:
        contact = Contact.from_row("+963933123456", "محمد أحمد", "mobile")
        assert contact.line_type is LineType.MOBILE

    def test_from_row_unknown_type_is_landline(self) -> None:
        contact = Contact.from_row("+963112345678", "x", "fixed")
        assert contact.line_type is LineType.LANDLINE

    def test_phone_must_be_canonical(self) -> None:
        with pytest.raises(ValidationError):
            Contact(phone="0933123456", name="x", line_type=LineType.MOBILE)

    def test_contact_is_frozen(self) -> None:
        contact = Contact(phone="+963933123456", name="x", line_type=LineType.MOBILE)
        with pytest.raises(ValidationError):
            contact.name = "y"  # type: ignore[misc]


def test_classification_valid_flag() -> None:
    accepted = NumberAccepted(number="+963933123456", line_type=LineType.MOBILE, region="SY")
    rejected = NumberRejected(number="abc", reason=RejectionReason.UNPARSEABLE)

    assert accepted.valid is True
    assert rejected.valid is False
