from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from .base import BaseSchema, PatchSchema


class DocumentRangeBase(BaseModel):
    name: str = Field(min_length=1, max_length=150)
    start_number: str = Field(min_length=1, max_length=100)
    end_number: str = Field(min_length=1, max_length=100)
    description: Optional[str] = None
    is_active: bool = True


class DocumentRangeCreate(DocumentRangeBase):
    pass


class DocumentRangeUpdate(PatchSchema):
    required_fields = frozenset({"name", "start_number", "end_number", "is_active"})

    name: Optional[str] = Field(default=None, min_length=1, max_length=150)
    start_number: Optional[str] = Field(default=None, min_length=1, max_length=100)
    end_number: Optional[str] = Field(default=None, min_length=1, max_length=100)
    description: Optional[str] = None
    is_active: Optional[bool] = None


class DocumentRangeOut(DocumentRangeBase, BaseSchema):
    id: str
    created_by: str
    created_at: datetime


class DocumentNumberCheckRequest(BaseModel):
    document_number: str = ""
    # set when editing an existing record so its own number is not a duplicate
    owner_type: Optional[str] = Field(default=None, pattern="^(transaction|prebenda)$")
    owner_id: Optional[str] = None


class DocumentNumberCheckResponse(BaseModel):
    is_valid: bool
    is_duplicate: bool
    message: str
