import json
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from treasury.core.constants import MONTHS

from .base import BaseSchema, Money, PatchSchema


def _check_month_keys(v: dict[str, Decimal] | None) -> dict[str, Decimal] | None:
    if v is None:
        return v
    unknown = sorted(set(v) - set(MONTHS))
    if unknown:
        raise ValueError(f"Unknown month(s) in monthly_goals: {', '.join(unknown)}")
    return v


class FinancialGoalBase(BaseModel):
    field: str = Field(min_length=1, max_length=150)
    year: int = Field(ge=1900, le=9999)
    monthly_goals: dict[str, Decimal] = Field(default_factory=dict)
    annual_goal: Money
    description: Optional[str] = None
    is_active: bool = True

    @field_validator("monthly_goals")
    @classmethod
    def known_months(cls, v):
        return _check_month_keys(v)


class FinancialGoalCreate(FinancialGoalBase):
    pass


class FinancialGoalUpdate(PatchSchema):
    required_fields = frozenset({"field", "year", "monthly_goals", "annual_goal", "is_active"})

    field: Optional[str] = Field(default=None, min_length=1, max_length=150)
    year: Optional[int] = Field(default=None, ge=1900, le=9999)
    monthly_goals: Optional[dict[str, Decimal]] = None
    annual_goal: Optional[Money] = None
    description: Optional[str] = None
    is_active: Optional[bool] = None

    @field_validator("monthly_goals")
    @classmethod
    def known_months(cls, v):
        return _check_month_keys(v)


class FinancialGoalOut(FinancialGoalBase, BaseSchema):
    id: str
    created_by: str
    created_at: datetime

    @field_validator("monthly_goals", mode="before")
    @classmethod
    def parse_json_text(cls, v):
        if isinstance(v, str):
            return json.loads(v or "{}")
        return v


class GoalProgressOut(BaseSchema):
    field: str
    year: int
    month: str
    goal_amount: Decimal
    actual_amount: Decimal
    percentage: Decimal
    status: str


class GoalsSummaryOut(BaseSchema):
    total_goals: int
    total_monthly_goals: int
    achieved_monthly: int
    on_track_monthly: int
    below_monthly: int
    achieved_annual: int
    on_track_annual: int
    below_annual: int
    total_goal_amount: Decimal
    total_actual_amount: Decimal
