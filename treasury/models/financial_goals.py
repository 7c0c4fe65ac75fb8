from decimal import Decimal

from sqlalchemy import Boolean, Integer, Numeric, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from treasury.db.base import Base
from treasury.models.mixins import AuditMixin, StringIdMixin


class FinancialGoal(StringIdMixin, AuditMixin, Base):
    __tablename__ = "financial_goals"

    field: Mapped[str] = mapped_column(String(150), nullable=False, index=True)
    year: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    # JSON text: {"Janeiro": "1000.00", ...}
    monthly_goals: Mapped[str] = mapped_column(
        Text, nullable=False, default="{}", server_default=text("'{}'")
    )
    annual_goal: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
