import datetime as dt
from typing import Optional

from pydantic import BaseModel, Field

from treasury.core.constants import MovementType, PaymentMethod

from .base import BaseSchema, Money, PatchSchema


class PrebendaBase(BaseModel):
    type: MovementType
    pastor: str = Field(min_length=1, max_length=255)
    amount: Money
    month: str = Field(min_length=1, max_length=20)
    field: Optional[str] = Field(default=None, max_length=150)
    description: str = Field(min_length=1)
    payment_method: PaymentMethod
    document_number: Optional[str] = Field(default=None, max_length=100)
    is_auxilio: bool = False
    is_prebenda: bool = False
    date: dt.date


class PrebendaCreate(PrebendaBase):
    pass


class PrebendaUpdate(PatchSchema):
    required_fields = frozenset(
        {"type", "pastor", "amount", "month", "description", "payment_method", "is_auxilio", "is_prebenda", "date"}
    )

    type: Optional[MovementType] = None
    pastor: Optional[str] = Field(default=None, min_length=1, max_length=255)
    amount: Optional[Money] = None
    month: Optional[str] = Field(default=None, min_length=1, max_length=20)
    field: Optional[str] = Field(default=None, max_length=150)
    description: Optional[str] = Field(default=None, min_length=1)
    payment_method: Optional[PaymentMethod] = None
    document_number: Optional[str] = Field(default=None, max_length=100)
    is_auxilio: Optional[bool] = None
    is_prebenda: Optional[bool] = None
    date: Optional[dt.date] = None


class PrebendaOut(PrebendaBase, BaseSchema):
    id: str
    created_by: str
    created_at: dt.datetime
