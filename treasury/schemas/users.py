from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from treasury.core.constants import UserRole

from .base import BaseSchema, PatchSchema


class UserBase(BaseModel):
    username: str = Field(min_length=1, max_length=150)
    role: UserRole = "usuario"
    full_name: Optional[str] = Field(default=None, max_length=255)
    email: Optional[EmailStr] = None
    is_active: bool = True


class UserCreate(UserBase):
    password: str = Field(min_length=1, max_length=128)


class UserUpdate(PatchSchema):
    required_fields = frozenset({"username", "password", "role", "is_active"})

    # all optional for partial updates
    username: Optional[str] = Field(default=None, min_length=1, max_length=150)
    password: Optional[str] = Field(default=None, min_length=1, max_length=128)
    role: Optional[UserRole] = None
    full_name: Optional[str] = Field(default=None, max_length=255)
    email: Optional[EmailStr] = None
    is_active: Optional[bool] = None


class UserOut(UserBase, BaseSchema):
    # stored emails are not re-validated on the way out
    email: Optional[str] = None

    id: str
    created_at: datetime
    created_by: str
