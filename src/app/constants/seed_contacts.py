"""Contatos gravados na primeira inicialização (tabela vazia)."""

from __future__ import annotations

from app.domain.contact import Contact, LineType

SEED_CONTACTS: tuple[Contact, ...] = (
    Contact(phone="+963933123456", name="محمد أحمد", line_type=LineType.MOBILE),
    Contact(phone="+963112345678", name="شركة الاتصالات", line_type=LineType.LANDLINE),
    Contact(phone="+963944123456", name="فاطمة علي", line_type=LineType.MOBILE),
    Contact(phone="+963113456789", name="المستشفى الوطني", line_type=LineType.LANDLINE),
)
