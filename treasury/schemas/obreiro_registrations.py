import datetime as dt
import json
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from treasury.core.constants import ObreiroTipo

from .base import BaseSchema, PatchSchema


class BankAccount(BaseModel):
    agencia: str = Field(min_length=1, max_length=20)
    conta_poupanca: Optional[str] = Field(default=None, max_length=30)
    conta_corrente: Optional[str] = Field(default=None, max_length=30)


class Pagamento(BaseModel):
    tipo: Literal["dinheiro", "banco"]
    banco: Optional[BankAccount] = None

    @model_validator(mode="after")
    def bank_details_required(self):
        if self.tipo == "banco" and self.banco is None:
            raise ValueError("banco details are required when tipo is 'banco'")
        return self


class ObreiroRegistrationBase(BaseModel):
    nome_completo: str = Field(min_length=1, max_length=255)
    setor: str = Field(min_length=1, max_length=100)
    campo: str = Field(min_length=1, max_length=150)
    campo_missionario: Optional[str] = Field(default=None, max_length=150)
    tipo: ObreiroTipo
    pagamento: Pagamento
    observacoes: Optional[str] = None
    date: dt.date


class ObreiroRegistrationCreate(ObreiroRegistrationBase):
    pass


class ObreiroRegistrationUpdate(PatchSchema):
    required_fields = frozenset({"nome_completo", "setor", "campo", "tipo", "pagamento", "date"})

    nome_completo: Optional[str] = Field(default=None, min_length=1, max_length=255)
    setor: Optional[str] = Field(default=None, min_length=1, max_length=100)
    campo: Optional[str] = Field(default=None, min_length=1, max_length=150)
    campo_missionario: Optional[str] = Field(default=None, max_length=150)
    tipo: Optional[ObreiroTipo] = None
    pagamento: Optional[Pagamento] = None
    observacoes: Optional[str] = None
    date: Optional[dt.date] = None


class ObreiroRegistrationOut(ObreiroRegistrationBase, BaseSchema):
    id: str
    created_by: str
    created_at: dt.datetime

    @field_validator("pagamento", mode="before")
    @classmethod
    def parse_json_text(cls, v):
        if isinstance(v, str):
            return json.loads(v)
        return v
