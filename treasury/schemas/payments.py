import datetime as dt
from typing import Optional

from pydantic import BaseModel, Field

from treasury.core.constants import PaymentMethod

from .base import BaseSchema, Money, PatchSchema


class PaymentBase(BaseModel):
    category: str = Field(min_length=1, max_length=150)
    amount: Money
    payment_method: PaymentMethod
    description: str = Field(min_length=1)
    field: Optional[str] = Field(default=None, max_length=150)
    month: Optional[str] = Field(default=None, max_length=20)
    date: dt.date


class PaymentCreate(PaymentBase):
    pass


class PaymentUpdate(PatchSchema):
    required_fields = frozenset({"category", "amount", "payment_method", "description", "date"})

    category: Optional[str] = Field(default=None, min_length=1, max_length=150)
    amount: Optional[Money] = None
    payment_method: Optional[PaymentMethod] = None
    description: Optional[str] = Field(default=None, min_length=1)
    field: Optional[str] = Field(default=None, max_length=150)
    month: Optional[str] = Field(default=None, max_length=20)
    date: Optional[dt.date] = None


class PaymentOut(PaymentBase, BaseSchema):
    id: str
    created_by: str
    created_at: dt.datetime
