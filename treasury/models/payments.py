import datetime as dt
from decimal import Decimal

from sqlalchemy import Date, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from treasury.db.base import Base
from treasury.models.mixins import AuditMixin, StringIdMixin


class Payment(StringIdMixin, AuditMixin, Base):
    __tablename__ = "payments"

    category: Mapped[str] = mapped_column(String(150), nullable=False)
    amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    payment_method: Mapped[str] = mapped_column(String(20), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    field: Mapped[str | None] = mapped_column(String(150), nullable=True)
    month: Mapped[str | None] = mapped_column(String(20), nullable=True)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
