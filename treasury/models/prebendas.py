import datetime as dt
from decimal import Decimal

from sqlalchemy import Boolean, Date, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from treasury.db.base import Base
from treasury.models.mixins import AuditMixin, StringIdMixin


class Prebenda(StringIdMixin, AuditMixin, Base):
    """
    Pastoral stipend (prebenda) or aid (auxílio) movement for a pastor.
    Shares the document number space with Transaction.
    """
    __tablename__ = "prebendas"

    type: Mapped[str] = mapped_column(String(10), nullable=False)
    pastor: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    month: Mapped[str] = mapped_column(String(20), nullable=False)
    field: Mapped[str | None] = mapped_column(String(150), nullable=True, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    payment_method: Mapped[str] = mapped_column(String(20), nullable=False)
    document_number: Mapped[str | None] = mapped_column(String(100), nullable=True)
    is_auxilio: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_prebenda: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
