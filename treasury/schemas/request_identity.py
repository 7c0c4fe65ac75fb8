from __future__ import annotations

from pydantic import BaseModel, Field

from treasury.core.constants import ADMIN_ROLE


class RequestIdentity(BaseModel):
    user_id: str
    username: str
    role: str = "usuario"
    claims: dict = Field(default_factory=dict)

    @property
    def is_admin(self) -> bool:
        return (self.role or "").strip().lower() == ADMIN_ROLE
