import datetime as dt
from typing import Optional

from pydantic import BaseModel, Field

from treasury.core.constants import MovementType, PaymentMethod

from .base import BaseSchema, Money, PatchSchema


class TransactionBase(BaseModel):
    type: MovementType
    category: str = Field(min_length=1, max_length=150)
    amount: Money
    payment_method: PaymentMethod
    description: str = Field(min_length=1)
    field: Optional[str] = Field(default=None, max_length=150)
    month: Optional[str] = Field(default=None, max_length=20)
    start_date: Optional[dt.date] = None
    document_number: Optional[str] = Field(default=None, max_length=100)
    date: dt.date


class TransactionCreate(TransactionBase):
    pass


class TransactionUpdate(PatchSchema):
    required_fields = frozenset({"type", "category", "amount", "payment_method", "description", "date"})

    type: Optional[MovementType] = None
    category: Optional[str] = Field(default=None, min_length=1, max_length=150)
    amount: Optional[Money] = None
    payment_method: Optional[PaymentMethod] = None
    description: Optional[str] = Field(default=None, min_length=1)
    field: Optional[str] = Field(default=None, max_length=150)
    month: Optional[str] = Field(default=None, max_length=20)
    start_date: Optional[dt.date] = None
    document_number: Optional[str] = Field(default=None, max_length=100)
    date: Optional[dt.date] = None


class TransactionOut(TransactionBase, BaseSchema):
    id: str
    created_by: str
    created_at: dt.datetime
