from __future__ import annotations

import json
from dataclasses import dataclass
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.orm import Session

from treasury.models.financial_goals import FinancialGoal
from treasury.schemas.financial_goals import FinancialGoalCreate, FinancialGoalUpdate


def dump_monthly_goals(monthly_goals: dict[str, Decimal] | None) -> str:
    return json.dumps({k: str(v) for k, v in (monthly_goals or {}).items()}, ensure_ascii=False)


def load_monthly_goals(raw: str | None) -> dict[str, Decimal]:
    return {k: Decimal(str(v)) for k, v in json.loads(raw or "{}").items()}


def create_financial_goal(db: Session, data: FinancialGoalCreate, *, created_by: str) -> FinancialGoal:
    payload = data.model_dump(exclude={"monthly_goals"})
    obj = FinancialGoal(
        created_by=created_by,
        monthly_goals=dump_monthly_goals(data.monthly_goals),
        **payload,
    )
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return obj


def get_financial_goal(db: Session, goal_id: str) -> FinancialGoal | None:
    return db.get(FinancialGoal, goal_id)


def list_financial_goals(
    db: Session,
    year: int | None = None,
    field: str | None = None,
) -> list[FinancialGoal]:
    stmt = select(FinancialGoal).order_by(FinancialGoal.created_at.desc(), FinancialGoal.id.desc())
    if year is not None:
        stmt = stmt.where(FinancialGoal.year == year)
    if field:
        stmt = stmt.where(FinancialGoal.field == field)
    return list(db.execute(stmt).scalars().all())


def update_financial_goal(db: Session, goal_id: str, data: FinancialGoalUpdate) -> FinancialGoal | None:
    obj = db.get(FinancialGoal, goal_id)
    if not obj:
        return None

    patch = data.model_dump(exclude_unset=True, exclude={"monthly_goals"})
    if data.monthly_goals is not None:
        patch["monthly_goals"] = dump_monthly_goals(data.monthly_goals)
    for k, v in patch.items():
        setattr(obj, k, v)

    db.commit()
    db.refresh(obj)
    return obj


def delete_financial_goal(db: Session, goal_id: str) -> bool:
    obj = db.get(FinancialGoal, goal_id)
    if not obj:
        return False

    db.delete(obj)
    db.commit()
    return True


@dataclass(frozen=True)
class GoalView:
    """A stored goal with `monthly_goals` decoded, as aggregation expects."""
    field: str
    year: int
    monthly_goals: dict[str, Decimal]
    annual_goal: Decimal
    is_active: bool


def goal_views(goals: list[FinancialGoal]) -> list[GoalView]:
    return [
        GoalView(
            field=g.field,
            year=g.year,
            monthly_goals=load_monthly_goals(g.monthly_goals),
            annual_goal=g.annual_goal,
            is_active=g.is_active,
        )
        for g in goals
    ]
