from __future__ import annotations

import datetime as dt
from types import SimpleNamespace

import pytest

from treasury.schemas.reports import ReportFilter
from treasury.services.report_service import filter_records, period_window, resolve_window


@pytest.mark.parametrize(
    "period,reference,expected",
    [
        ("daily", dt.date(2026, 5, 14), (dt.date(2026, 5, 14), dt.date(2026, 5, 14))),
        # 2026-05-14 is a Thursday; weeks start on Sunday
        ("weekly", dt.date(2026, 5, 14), (dt.date(2026, 5, 10), dt.date(2026, 5, 16))),
        ("weekly", dt.date(2026, 5, 10), (dt.date(2026, 5, 10), dt.date(2026, 5, 16))),
        ("monthly", dt.date(2024, 2, 10), (dt.date(2024, 2, 1), dt.date(2024, 2, 29))),
        ("monthly", dt.date(2026, 12, 31), (dt.date(2026, 12, 1), dt.date(2026, 12, 31))),
        ("quarterly", dt.date(2026, 5, 14), (dt.date(2026, 4, 1), dt.date(2026, 6, 30))),
        ("quarterly", dt.date(2026, 11, 2), (dt.date(2026, 10, 1), dt.date(2026, 12, 31))),
        ("annual", dt.date(2026, 5, 14), (dt.date(2026, 1, 1), dt.date(2026, 12, 31))),
    ],
)
def test_period_window(period, reference, expected):
    assert period_window(period, reference) == expected


def test_explicit_dates_win_over_period():
    filters = ReportFilter(
        period="annual",
        reference_date=dt.date(2026, 1, 1),
        start_date=dt.date(2026, 3, 1),
        end_date=dt.date(2026, 3, 31),
    )
    assert resolve_window(filters) == (dt.date(2026, 3, 1), dt.date(2026, 3, 31))
    assert resolve_window(ReportFilter()) == (None, None)


def test_start_after_end_is_rejected():
    with pytest.raises(ValueError):
        ReportFilter(start_date=dt.date(2026, 4, 1), end_date=dt.date(2026, 3, 1))


def test_filter_records_by_window_and_attributes():
    records = [
        SimpleNamespace(date=dt.date(2026, 3, 1), type="entry", payment_method="pix", field="Sede"),
        SimpleNamespace(date=dt.date(2026, 3, 31), type="exit", payment_method="cash", field="Sede"),
        SimpleNamespace(date=dt.date(2026, 4, 1), type="entry", payment_method="pix", field="Sede"),
        SimpleNamespace(date=dt.date(2026, 3, 15), field="Sede"),
    ]
    march = ReportFilter(period="monthly", reference_date=dt.date(2026, 3, 20))
    assert len(filter_records(records, march)) == 3

    entries = ReportFilter(period="monthly", reference_date=dt.date(2026, 3, 20), type="entry")
    assert filter_records(records, entries) == [records[0]]

    other_field = ReportFilter(field="Missões")
    assert filter_records(records, other_field) == []
