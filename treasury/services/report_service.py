"""
Loads stored records for dashboards and exports.

A report window is either a named period around a reference date (the week
starts on Sunday) or an explicit inclusive start/end pair. Filters on
`type`, `payment_method` and `field` drop records that do not carry a
matching value, so a `type` filter leaves registrations and payments out.
"""

from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass, field
from io import BytesIO
from typing import Any

import pandas as pd
from fastapi.responses import StreamingResponse
from openpyxl.utils import get_column_letter
from sqlalchemy import select
from sqlalchemy.orm import Session

from treasury.models.payments import Payment
from treasury.models.prebendas import Prebenda
from treasury.models.registrations import Registration
from treasury.models.transactions import Transaction
from treasury.schemas.reports import ReportFilter
from treasury.services.aggregation import DashboardSummary, dashboard_summary

logger = logging.getLogger(__name__)

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

_SHEET_COLUMNS = {
    "Transacoes": [
        "date", "type", "category", "amount", "payment_method",
        "field", "month", "document_number", "description", "created_by",
    ],
    "Prebendas": [
        "date", "type", "pastor", "amount", "payment_method", "field",
        "month", "document_number", "is_prebenda", "is_auxilio", "description",
    ],
    "Inscricoes": ["date", "field", "month", "category", "amount"],
    "Pagamentos": ["date", "category", "amount", "payment_method", "field", "month", "description"],
}


def period_window(period: str, reference: dt.date) -> tuple[dt.date, dt.date]:
    if period == "daily":
        return reference, reference
    if period == "weekly":
        start = reference - dt.timedelta(days=(reference.weekday() + 1) % 7)
        return start, start + dt.timedelta(days=6)
    if period == "monthly":
        start = reference.replace(day=1)
        return start, _month_end(start)
    if period == "quarterly":
        first_month = 3 * ((reference.month - 1) // 3) + 1
        start = reference.replace(month=first_month, day=1)
        return start, _month_end(start.replace(month=first_month + 2))
    if period == "annual":
        return reference.replace(month=1, day=1), reference.replace(month=12, day=31)
    raise ValueError(f"Unknown report period '{period}'.")


def _month_end(day: dt.date) -> dt.date:
    following = (day.replace(day=28) + dt.timedelta(days=4)).replace(day=1)
    return following - dt.timedelta(days=1)


def resolve_window(filters: ReportFilter) -> tuple[dt.date | None, dt.date | None]:
    if filters.start_date or filters.end_date:
        return filters.start_date, filters.end_date
    if filters.period:
        return period_window(filters.period, filters.reference_date or dt.date.today())
    return None, None


def _matches(record: Any, filters: ReportFilter, start: dt.date | None, end: dt.date | None) -> bool:
    record_date = getattr(record, "date", None)
    if start and (record_date is None or record_date < start):
        return False
    if end and (record_date is None or record_date > end):
        return False
    for attr in ("type", "payment_method", "field"):
        wanted = getattr(filters, attr)
        if wanted and getattr(record, attr, None) != wanted:
            return False
    return True


def filter_records(records, filters: ReportFilter) -> list:
    start, end = resolve_window(filters)
    return [r for r in records if _matches(r, filters, start, end)]


@dataclass
class ReportRecords:
    transactions: list = field(default_factory=list)
    prebendas: list = field(default_factory=list)
    registrations: list = field(default_factory=list)
    payments: list = field(default_factory=list)

    def summary(self) -> DashboardSummary:
        return dashboard_summary(
            transactions=self.transactions,
            prebendas=self.prebendas,
            registrations=self.registrations,
            payments=self.payments,
        )


def _load_all(db: Session, model) -> list:
    stmt = select(model).order_by(model.date.desc(), model.created_at.desc())
    return list(db.execute(stmt).scalars().all())


def load_report_records(db: Session, filters: ReportFilter) -> ReportRecords:
    records = ReportRecords(
        transactions=filter_records(_load_all(db, Transaction), filters),
        prebendas=filter_records(_load_all(db, Prebenda), filters),
        registrations=filter_records(_load_all(db, Registration), filters),
        payments=filter_records(_load_all(db, Payment), filters),
    )
    logger.debug(
        "report_records_loaded transactions=%s prebendas=%s registrations=%s payments=%s",
        len(records.transactions),
        len(records.prebendas),
        len(records.registrations),
        len(records.payments),
    )
    return records


def load_year_records(db: Session, year: int) -> ReportRecords:
    """Records dated inside `year`, used for goal progress."""
    filters = ReportFilter(start_date=dt.date(year, 1, 1), end_date=dt.date(year, 12, 31))
    return load_report_records(db, filters)


def _frame(records: list, columns: list[str]) -> pd.DataFrame:
    rows = [{col: getattr(r, col, None) for col in columns} for r in records]
    return pd.DataFrame(rows, columns=columns)


def _summary_frame(summary: DashboardSummary) -> pd.DataFrame:
    rows = [
        ("Saldo de transacoes", summary.transaction_balance),
        ("Total de entradas", summary.total_entries),
        ("Total de saidas", summary.total_exits),
        ("Prebendas (entradas)", summary.prebenda_entries),
        ("Prebendas (saidas)", summary.prebenda_exits),
        ("Saldo geral", summary.balance),
        ("Total de inscricoes", summary.total_registrations),
        ("Total de pagamentos", summary.total_payments),
    ]
    rows.extend((f"Forma de pagamento: {k}", v) for k, v in summary.by_payment_method.items())
    rows.extend((f"Categoria: {k}", v) for k, v in summary.by_category.items())
    rows.extend((f"Pastor: {k}", v) for k, v in summary.by_pastor.items())
    return pd.DataFrame([(label, float(value)) for label, value in rows], columns=["Indicador", "Valor"])


def build_export_workbook(records: ReportRecords) -> BytesIO:
    sheets = {
        "Resumo": _summary_frame(records.summary()),
        "Transacoes": _frame(records.transactions, _SHEET_COLUMNS["Transacoes"]),
        "Prebendas": _frame(records.prebendas, _SHEET_COLUMNS["Prebendas"]),
        "Inscricoes": _frame(records.registrations, _SHEET_COLUMNS["Inscricoes"]),
        "Pagamentos": _frame(records.payments, _SHEET_COLUMNS["Pagamentos"]),
    }

    output = BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        for sheet_name, df in sheets.items():
            if "amount" in df.columns:
                df["amount"] = df["amount"].map(lambda v: float(v) if v is not None else None)
            df.to_excel(writer, index=False, sheet_name=sheet_name)

            worksheet = writer.sheets[sheet_name]
            for idx, col in enumerate(df.columns):
                col_lengths = df[col].fillna("").astype(str).str.len()
                max_len = max(col_lengths.max() if not col_lengths.empty else 0, len(col)) + 2
                worksheet.column_dimensions[get_column_letter(idx + 1)].width = max_len

    output.seek(0)
    return output


def export_response(records: ReportRecords) -> StreamingResponse:
    output = build_export_workbook(records)
    filename = f"Relatorio_{dt.datetime.now().strftime('%Y%m%d_%H%M')}.xlsx"
    headers = {"Content-Disposition": f'attachment; filename="{filename}"'}
    return StreamingResponse(output, headers=headers, media_type=XLSX_MEDIA_TYPE)
