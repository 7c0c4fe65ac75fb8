from __future__ import annotations

import datetime as dt
import random
from decimal import Decimal
from types import SimpleNamespace

import pytest

from treasury.core.constants import UNSPECIFIED_KEY
from treasury.core.money import to_decimal
from treasury.services.aggregation import (
    STATUS_BELOW,
    STATUS_EXCEEDED,
    STATUS_ON_TRACK,
    actual_amount,
    balance,
    classify_goal_status,
    dashboard_summary,
    goal_progress,
    goals_progress,
    goals_summary,
    total_amount,
    total_by_key,
    total_by_type,
)


def _tx(type_, amount, **extra):
    defaults = {"payment_method": "pix", "category": "Dízimo", "field": "Sede", "date": dt.date(2026, 3, 10)}
    defaults.update(extra)
    return SimpleNamespace(type=type_, amount=amount, **defaults)


def test_balance_adds_entries_and_subtracts_exits():
    records = [_tx("entry", Decimal("100.10")), _tx("exit", "30.05"), _tx("entry", 0.2)]
    assert balance(records) == Decimal("70.25")
    assert total_by_type(records, "entry") == Decimal("100.30")
    assert total_by_type(records, "exit") == Decimal("30.05")
    assert total_amount(records) == Decimal("130.35")


def test_sums_do_not_depend_on_order_or_repetition():
    rng = random.Random(7)
    records = [_tx(rng.choice(["entry", "exit"]), Decimal(rng.randint(1, 100000)) / 100) for _ in range(200)]
    expected = balance(records)
    assert balance(records) == expected
    for _ in range(5):
        shuffled = records[:]
        rng.shuffle(shuffled)
        assert balance(shuffled) == expected
        assert total_amount(shuffled) == total_amount(records)


def test_total_by_key_groups_missing_values():
    records = [
        _tx("entry", "10", payment_method="pix"),
        _tx("entry", "5", payment_method=None),
        _tx("exit", "2", payment_method="cash"),
        _tx("entry", "1", payment_method="  "),
    ]
    totals = total_by_key(records, "payment_method")
    assert list(totals) == ["pix", UNSPECIFIED_KEY, "cash"]
    assert totals[UNSPECIFIED_KEY] == Decimal("6")

    by_year = total_by_key(records, lambda r: r.date.year)
    assert by_year == {"2026": Decimal("18")}


@pytest.mark.parametrize(
    "percentage,status",
    [
        (Decimal("100"), STATUS_EXCEEDED),
        (Decimal("80"), STATUS_ON_TRACK),
        (Decimal("79.999"), STATUS_BELOW),
        (Decimal("99.99"), STATUS_ON_TRACK),
        (Decimal("0"), STATUS_BELOW),
    ],
)
def test_goal_status_boundaries(percentage, status):
    assert classify_goal_status(percentage) == status


def test_goal_progress_percentage_and_zero_goal():
    progress = goal_progress("Sede", 2026, "Março", "1000", "800")
    assert progress.percentage == Decimal("80")
    assert progress.status == STATUS_ON_TRACK

    zero = goal_progress("Sede", 2026, "Anual", "0", "500")
    assert zero.percentage == Decimal("0")
    assert zero.status == STATUS_BELOW


def test_actual_amount_counts_entries_registrations_and_entry_prebendas():
    transactions = [
        _tx("entry", "100", date=dt.date(2026, 3, 1)),
        _tx("exit", "40", date=dt.date(2026, 3, 2)),
        _tx("entry", "7", date=dt.date(2026, 4, 1)),
        _tx("entry", "9", field="Outro", date=dt.date(2026, 3, 1)),
    ]
    registrations = [SimpleNamespace(amount="50", field="Sede", date=dt.date(2026, 3, 20))]
    prebendas = [
        SimpleNamespace(type="entry", amount="25", field="Sede", date=dt.date(2026, 3, 5)),
        SimpleNamespace(type="exit", amount="60", field="Sede", date=dt.date(2026, 3, 6)),
    ]
    march = actual_amount(
        "Sede", 2026, "Março",
        transactions=transactions, registrations=registrations, prebendas=prebendas,
    )
    assert march == Decimal("175")

    year = actual_amount(
        "Sede", 2026, None,
        transactions=transactions, registrations=registrations, prebendas=prebendas,
    )
    assert year == Decimal("182")


def test_goals_progress_rows_and_summary():
    goals = [
        SimpleNamespace(
            field="Sede",
            year=2026,
            monthly_goals={"Março": Decimal("100"), "Abril": Decimal("0")},
            annual_goal=Decimal("1000"),
            is_active=True,
        ),
        SimpleNamespace(field="Sede", year=2026, monthly_goals={}, annual_goal=Decimal("1"), is_active=False),
        SimpleNamespace(field="Sede", year=2025, monthly_goals={}, annual_goal=Decimal("1"), is_active=True),
    ]
    transactions = [_tx("entry", "120", date=dt.date(2026, 3, 1))]

    rows = goals_progress(goals, 2026, transactions=transactions)
    assert [(r.month, r.status) for r in rows] == [("Março", STATUS_EXCEEDED), ("Anual", STATUS_BELOW)]
    assert rows[1].percentage == Decimal("12")

    summary = goals_summary(goals, rows, 2026)
    assert summary.total_goals == 1
    assert summary.total_monthly_goals == 1
    assert summary.achieved_monthly == 1
    assert summary.below_annual == 1
    assert summary.total_goal_amount == Decimal("1000")
    assert summary.total_actual_amount == Decimal("120")


def test_dashboard_summary_combines_transactions_and_prebendas():
    transactions = [_tx("entry", "500"), _tx("exit", "200", category="Aluguel", payment_method="cash")]
    prebendas = [
        SimpleNamespace(type="entry", amount="80", pastor="Pr. João", month="Março"),
        SimpleNamespace(type="exit", amount="300", pastor="Pr. João", month="Março"),
    ]
    registrations = [SimpleNamespace(amount="40", field="Sede", month="Março")]
    payments = [SimpleNamespace(amount="15")]

    summary = dashboard_summary(
        transactions=transactions,
        prebendas=prebendas,
        registrations=registrations,
        payments=payments,
    )
    assert summary.transaction_balance == Decimal("300")
    assert summary.balance == Decimal("80")
    assert summary.total_registrations == Decimal("40")
    assert summary.total_payments == Decimal("15")
    assert summary.by_category == {"Dízimo": Decimal("500"), "Aluguel": Decimal("200")}
    assert summary.by_pastor == {"Pr. João": Decimal("380")}
    assert summary.registrations_by_field == {"Sede": Decimal("40")}


def test_to_decimal_rejects_non_numbers():
    assert to_decimal(None) == Decimal("0")
    assert to_decimal(" 12.50 ") == Decimal("12.50")
    assert to_decimal(0.1) == Decimal("0.1")
    for bad in ("abc", "NaN", Decimal("NaN"), Decimal("Infinity"), float("inf")):
        with pytest.raises(ValueError):
            to_decimal(bad)
