import datetime as dt
import json
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .base import BaseSchema, PatchSchema


class Child(BaseModel):
    id: str
    name: str = Field(min_length=1, max_length=255)
    birth_date: Optional[dt.date] = None


class PreviousField(BaseModel):
    id: str
    field_name: str = Field(min_length=1, max_length=150)
    year: str = Field(min_length=1, max_length=20)


class PastorRegistrationBase(BaseModel):
    pastor_name: str = Field(min_length=1, max_length=255)
    spouse_name: str = Field(min_length=1, max_length=255)
    current_field: str = Field(min_length=1, max_length=150)
    field_period: str = Field(min_length=1, max_length=100)
    children: list[Child] = Field(default_factory=list)
    birth_date: dt.date
    description: str = Field(min_length=1)
    phone: str = Field(min_length=1, max_length=50)
    previous_fields: list[PreviousField] = Field(default_factory=list)


class PastorRegistrationCreate(PastorRegistrationBase):
    pass


class PastorRegistrationUpdate(PatchSchema):
    required_fields = frozenset(
        {
            "pastor_name", "spouse_name", "current_field", "field_period", "children",
            "birth_date", "description", "phone", "previous_fields", "date",
        }
    )

    pastor_name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    spouse_name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    current_field: Optional[str] = Field(default=None, min_length=1, max_length=150)
    field_period: Optional[str] = Field(default=None, min_length=1, max_length=100)
    children: Optional[list[Child]] = None
    birth_date: Optional[dt.date] = None
    description: Optional[str] = Field(default=None, min_length=1)
    phone: Optional[str] = Field(default=None, min_length=1, max_length=50)
    previous_fields: Optional[list[PreviousField]] = None


class PastorRegistrationOut(PastorRegistrationBase, BaseSchema):
    id: str
    date: dt.date
    created_by: str
    created_at: dt.datetime

    @field_validator("children", "previous_fields", mode="before")
    @classmethod
    def parse_json_text(cls, v):
        # stored as JSON text on the row
        if isinstance(v, str):
            return json.loads(v or "[]")
        return v
