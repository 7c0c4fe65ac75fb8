import datetime as dt
from decimal import Decimal
from typing import Literal, Optional

from pydantic import BaseModel, model_validator

from treasury.core.constants import MovementType, PaymentMethod

from .base import BaseSchema

Period = Literal["daily", "weekly", "monthly", "quarterly", "annual"]


class ReportFilter(BaseModel):
    """
    Either a named `period` ending at `reference_date` (default today) or an
    explicit `start_date`/`end_date` window. Both bounds are inclusive.
    """
    period: Optional[Period] = None
    reference_date: Optional[dt.date] = None
    start_date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None
    type: Optional[MovementType] = None
    payment_method: Optional[PaymentMethod] = None
    field: Optional[str] = None

    @model_validator(mode="after")
    def window_is_ordered(self):
        if self.start_date and self.end_date and self.start_date > self.end_date:
            raise ValueError("start_date must not be after end_date")
        return self


class DashboardSummaryOut(BaseSchema):
    transaction_balance: Decimal
    total_entries: Decimal
    total_exits: Decimal
    prebenda_entries: Decimal
    prebenda_exits: Decimal
    balance: Decimal
    total_registrations: Decimal
    total_payments: Decimal
    by_payment_method: dict[str, Decimal]
    by_category: dict[str, Decimal]
    by_pastor: dict[str, Decimal]
    prebendas_by_month: dict[str, Decimal]
    registrations_by_field: dict[str, Decimal]
    registrations_by_month: dict[str, Decimal]
