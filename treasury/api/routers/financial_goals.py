import datetime as dt

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from treasury.api.deps.request_identity import get_request_identity
from treasury.crud.financial_goals import (
    create_financial_goal,
    delete_financial_goal,
    get_financial_goal,
    goal_views,
    list_financial_goals,
    update_financial_goal,
)
from treasury.db.session import get_db
from treasury.schemas.financial_goals import (
    FinancialGoalCreate,
    FinancialGoalOut,
    FinancialGoalUpdate,
    GoalProgressOut,
    GoalsSummaryOut,
)
from treasury.schemas.request_identity import RequestIdentity
from treasury.services.aggregation import goals_progress, goals_summary
from treasury.services.report_service import load_year_records

router = APIRouter(
    prefix="/financial-goals",
    tags=["financial-goals"],
    dependencies=[Depends(get_request_identity)],
)


def _progress_for_year(db: Session, year: int):
    goals = goal_views(list_financial_goals(db, year=year))
    records = load_year_records(db, year)
    progress = goals_progress(
        goals,
        year,
        transactions=records.transactions,
        registrations=records.registrations,
        prebendas=records.prebendas,
    )
    return goals, progress


@router.get("/progress", response_model=list[GoalProgressOut])
def goals_progress_api(
    year: int | None = Query(None, ge=1900, le=9999),
    db: Session = Depends(get_db),
):
    _, progress = _progress_for_year(db, year or dt.date.today().year)
    return progress


@router.get("/summary", response_model=GoalsSummaryOut)
def goals_summary_api(
    year: int | None = Query(None, ge=1900, le=9999),
    db: Session = Depends(get_db),
):
    target_year = year or dt.date.today().year
    goals, progress = _progress_for_year(db, target_year)
    return goals_summary(goals, progress, target_year)


@router.post("", response_model=FinancialGoalOut, status_code=status.HTTP_201_CREATED)
def create_financial_goal_api(
    payload: FinancialGoalCreate,
    db: Session = Depends(get_db),
    identity: RequestIdentity = Depends(get_request_identity),
):
    return create_financial_goal(db, payload, created_by=identity.username)


@router.get("/{goal_id}", response_model=FinancialGoalOut)
def get_financial_goal_api(goal_id: str, db: Session = Depends(get_db)):
    obj = get_financial_goal(db, goal_id)
    if not obj:
        raise HTTPException(status_code=404, detail="Financial goal not found")
    return obj


@router.get("", response_model=list[FinancialGoalOut])
def list_financial_goals_api(
    year: int | None = Query(None),
    field: str | None = Query(None),
    db: Session = Depends(get_db),
):
    return list_financial_goals(db, year=year, field=field)


@router.put("/{goal_id}", response_model=FinancialGoalOut)
def update_financial_goal_api(goal_id: str, payload: FinancialGoalUpdate, db: Session = Depends(get_db)):
    obj = update_financial_goal(db, goal_id, payload)
    if not obj:
        raise HTTPException(status_code=404, detail="Financial goal not found")
    return obj


@router.delete("/{goal_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_financial_goal_api(goal_id: str, db: Session = Depends(get_db)):
    ok = delete_financial_goal(db, goal_id)
    if not ok:
        raise HTTPException(status_code=404, detail="Financial goal not found")
    return None
