import datetime as dt
from typing import Optional

from pydantic import BaseModel, Field

from .base import BaseSchema, Money, PatchSchema


class RegistrationBase(BaseModel):
    field: str = Field(min_length=1, max_length=150)
    month: str = Field(min_length=1, max_length=20)
    category: str = Field(min_length=1, max_length=150)
    amount: Money
    date: dt.date


class RegistrationCreate(RegistrationBase):
    pass


class RegistrationUpdate(PatchSchema):
    required_fields = frozenset({"field", "month", "category", "amount", "date"})

    field: Optional[str] = Field(default=None, min_length=1, max_length=150)
    month: Optional[str] = Field(default=None, min_length=1, max_length=20)
    category: Optional[str] = Field(default=None, min_length=1, max_length=150)
    amount: Optional[Money] = None
    date: Optional[dt.date] = None


class RegistrationOut(RegistrationBase, BaseSchema):
    id: str
    created_by: str
    created_at: dt.datetime
