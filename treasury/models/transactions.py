import datetime as dt
from decimal import Decimal

from sqlalchemy import Date, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from treasury.db.base import Base
from treasury.models.mixins import AuditMixin, StringIdMixin


class Transaction(StringIdMixin, AuditMixin, Base):
    """
    General treasury movement. `type` is 'entry' or 'exit'; entries add to
    the balance and exits subtract from it.
    """
    __tablename__ = "transactions"

    type: Mapped[str] = mapped_column(String(10), nullable=False)
    category: Mapped[str] = mapped_column(String(150), nullable=False)
    amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    payment_method: Mapped[str] = mapped_column(String(20), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    field: Mapped[str | None] = mapped_column(String(150), nullable=True, index=True)
    month: Mapped[str | None] = mapped_column(String(20), nullable=True)
    start_date: Mapped[dt.date | None] = mapped_column(Date, nullable=True)
    document_number: Mapped[str | None] = mapped_column(String(100), nullable=True)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
