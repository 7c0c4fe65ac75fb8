"""
Derived figures over in-memory record collections.

Every function here is pure: it reads the records it is given and returns a
new value. Amounts are summed as Decimal, so results do not depend on the
order of the input collection.
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from treasury.core.constants import ANNUAL_PERIOD, ENTRY, EXIT, MONTHS, UNSPECIFIED_KEY, month_name
from treasury.core.money import to_decimal

ZERO = Decimal("0")
HUNDRED = Decimal("100")

STATUS_EXCEEDED = "exceeded"
STATUS_ON_TRACK = "on-track"
STATUS_BELOW = "below"


def _amount(record: Any) -> Decimal:
    return to_decimal(getattr(record, "amount", None))


def total_amount(records: Iterable[Any]) -> Decimal:
    return sum((_amount(r) for r in records), ZERO)


def balance(records: Iterable[Any]) -> Decimal:
    result = ZERO
    for record in records:
        if record.type == ENTRY:
            result += _amount(record)
        elif record.type == EXIT:
            result -= _amount(record)
    return result


def total_by_type(records: Iterable[Any], movement_type: str) -> Decimal:
    return sum((_amount(r) for r in records if r.type == movement_type), ZERO)


def total_by_key(
    records: Iterable[Any],
    key: str | Callable[[Any], Any],
) -> dict[str, Decimal]:
    """Sum amounts per key (attribute name or callable); keys appear in first-seen order."""
    getter = key if callable(key) else (lambda record: getattr(record, key, None))
    totals: dict[str, Decimal] = {}
    for record in records:
        raw = getter(record)
        label = str(raw).strip() if raw is not None else ""
        label = label or UNSPECIFIED_KEY
        totals[label] = totals.get(label, ZERO) + _amount(record)
    return totals


def classify_goal_status(percentage: Decimal | float) -> str:
    if percentage >= 100:
        return STATUS_EXCEEDED
    if percentage >= 80:
        return STATUS_ON_TRACK
    return STATUS_BELOW


@dataclass(frozen=True)
class GoalProgress:
    field: str
    year: int
    month: str
    goal_amount: Decimal
    actual_amount: Decimal
    percentage: Decimal
    status: str


def goal_progress(
    field: str,
    year: int,
    month: str,
    goal_amount: Decimal | float | str,
    actual_amount: Decimal | float | str,
) -> GoalProgress:
    goal = to_decimal(goal_amount)
    actual = to_decimal(actual_amount)
    # a zero goal has no meaningful ratio; report 0 % instead of dividing
    percentage = (actual / goal * HUNDRED) if goal != ZERO else ZERO
    return GoalProgress(
        field=field,
        year=year,
        month=month,
        goal_amount=goal,
        actual_amount=actual,
        percentage=percentage,
        status=classify_goal_status(percentage),
    )


def _in_period(record: Any, field_name: str, year: int, month: str | None) -> bool:
    record_date = getattr(record, "date", None)
    if getattr(record, "field", None) != field_name or not isinstance(record_date, dt.date):
        return False
    if record_date.year != year:
        return False
    return month is None or month_name(record_date.month) == month


def actual_amount(
    field_name: str,
    year: int,
    month: str | None,
    *,
    transactions: Iterable[Any] = (),
    registrations: Iterable[Any] = (),
    prebendas: Iterable[Any] = (),
) -> Decimal:
    """Money raised by a field: entry transactions, registrations and entry prebendas."""
    total = ZERO
    total += sum(
        (_amount(t) for t in transactions if t.type == ENTRY and _in_period(t, field_name, year, month)),
        ZERO,
    )
    total += sum(
        (_amount(r) for r in registrations if _in_period(r, field_name, year, month)),
        ZERO,
    )
    total += sum(
        (_amount(p) for p in prebendas if p.type == ENTRY and _in_period(p, field_name, year, month)),
        ZERO,
    )
    return total


def goals_progress(
    goals: Iterable[Any],
    year: int,
    *,
    transactions: Iterable[Any] = (),
    registrations: Iterable[Any] = (),
    prebendas: Iterable[Any] = (),
) -> list[GoalProgress]:
    """
    One row per month with a positive goal, then one annual row, for every
    active goal of `year`. Goals expose `monthly_goals` as a mapping.
    """
    transactions = list(transactions)
    registrations = list(registrations)
    prebendas = list(prebendas)
    sources = {
        "transactions": transactions,
        "registrations": registrations,
        "prebendas": prebendas,
    }

    rows: list[GoalProgress] = []
    for goal in goals:
        if goal.year != year or not goal.is_active:
            continue
        monthly = goal.monthly_goals or {}
        for month in MONTHS:
            monthly_goal = to_decimal(monthly.get(month))
            if monthly_goal <= ZERO:
                continue
            rows.append(
                goal_progress(
                    goal.field,
                    year,
                    month,
                    monthly_goal,
                    actual_amount(goal.field, year, month, **sources),
                )
            )
        rows.append(
            goal_progress(
                goal.field,
                year,
                ANNUAL_PERIOD,
                goal.annual_goal,
                actual_amount(goal.field, year, None, **sources),
            )
        )
    return rows


@dataclass(frozen=True)
class GoalsSummary:
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


def goals_summary(goals: Iterable[Any], progress: Iterable[GoalProgress], year: int) -> GoalsSummary:
    active = [g for g in goals if g.year == year and g.is_active]
    rows = list(progress)
    monthly = [p for p in rows if p.month != ANNUAL_PERIOD]
    annual = [p for p in rows if p.month == ANNUAL_PERIOD]

    def _count(items: list[GoalProgress], status: str) -> int:
        return sum(1 for p in items if p.status == status)

    return GoalsSummary(
        total_goals=len(active),
        total_monthly_goals=len(monthly),
        achieved_monthly=_count(monthly, STATUS_EXCEEDED),
        on_track_monthly=_count(monthly, STATUS_ON_TRACK),
        below_monthly=_count(monthly, STATUS_BELOW),
        achieved_annual=_count(annual, STATUS_EXCEEDED),
        on_track_annual=_count(annual, STATUS_ON_TRACK),
        below_annual=_count(annual, STATUS_BELOW),
        total_goal_amount=sum((to_decimal(g.annual_goal) for g in active), ZERO),
        total_actual_amount=sum((p.actual_amount for p in annual), ZERO),
    )


@dataclass(frozen=True)
class DashboardSummary:
    transaction_balance: Decimal
    total_entries: Decimal
    total_exits: Decimal
    prebenda_entries: Decimal
    prebenda_exits: Decimal
    balance: Decimal
    total_registrations: Decimal
    total_payments: Decimal
    by_payment_method: dict[str, Decimal] = field(default_factory=dict)
    by_category: dict[str, Decimal] = field(default_factory=dict)
    by_pastor: dict[str, Decimal] = field(default_factory=dict)
    prebendas_by_month: dict[str, Decimal] = field(default_factory=dict)
    registrations_by_field: dict[str, Decimal] = field(default_factory=dict)
    registrations_by_month: dict[str, Decimal] = field(default_factory=dict)


def dashboard_summary(
    *,
    transactions: Iterable[Any] = (),
    prebendas: Iterable[Any] = (),
    registrations: Iterable[Any] = (),
    payments: Iterable[Any] = (),
) -> DashboardSummary:
    transactions = list(transactions)
    prebendas = list(prebendas)
    registrations = list(registrations)
    payments = list(payments)

    transaction_balance = balance(transactions)
    prebenda_entries = total_by_type(prebendas, ENTRY)
    prebenda_exits = total_by_type(prebendas, EXIT)

    return DashboardSummary(
        transaction_balance=transaction_balance,
        total_entries=total_by_type(transactions, ENTRY),
        total_exits=total_by_type(transactions, EXIT),
        prebenda_entries=prebenda_entries,
        prebenda_exits=prebenda_exits,
        balance=transaction_balance + (prebenda_entries - prebenda_exits),
        total_registrations=total_amount(registrations),
        total_payments=total_amount(payments),
        by_payment_method=total_by_key(transactions, "payment_method"),
        by_category=total_by_key(transactions, "category"),
        by_pastor=total_by_key(prebendas, "pastor"),
        prebendas_by_month=total_by_key(prebendas, "month"),
        registrations_by_field=total_by_key(registrations, "field"),
        registrations_by_month=total_by_key(registrations, "month"),
    )
