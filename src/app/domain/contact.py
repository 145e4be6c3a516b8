"""Contact - registro nomeado associado a um número canônico.

O telefone é sempre guardado no mesmo formato produzido pelo normalizador
(+<código do país><assinante>), pois a busca é por igualdade exata.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class LineType(StrEnum):
    """Tipo de linha telefônica."""

    MOBILE = "mobile"
    LANDLINE = "landline"


class Contact(BaseModel):
    """Contato persistido no banco relacional."""

    model_config = ConfigDict(frozen=True)

    phone: str = Field(..., min_length=1, pattern=r"^\+\d{6,15}$")
    name: str = Field(..., min_length=1)
    line_type: LineType

    @classmethod
    def from_row(cls, phone: str, name: str, type_: str) -> Contact:
        """Constrói Contact a partir das colunas da tabela `contacts`.

        Qualquer valor de tipo diferente de "mobile" é tratado como fixo.
        """
        line_type = LineType.MOBILE if type_ == LineType.MOBILE.value else LineType.LANDLINE
        return cls(phone=phone, name=name, line_type=line_type)
