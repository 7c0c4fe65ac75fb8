import datetime as dt

from sqlalchemy import Date, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from treasury.db.base import Base
from treasury.models.mixins import AuditMixin, StringIdMixin


class PastorRegistration(StringIdMixin, AuditMixin, Base):
    __tablename__ = "pastor_registrations"

    pastor_name: Mapped[str] = mapped_column(String(255), nullable=False)
    spouse_name: Mapped[str] = mapped_column(String(255), nullable=False)
    current_field: Mapped[str] = mapped_column(String(150), nullable=False)
    field_period: Mapped[str] = mapped_column(String(100), nullable=False)
    # JSON text: [{"id", "name", "birth_date"}]
    children: Mapped[str] = mapped_column(
        Text, nullable=False, default="[]", server_default=text("'[]'")
    )
    birth_date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    phone: Mapped[str] = mapped_column(String(50), nullable=False)
    # JSON text: [{"id", "field_name", "year"}]
    previous_fields: Mapped[str] = mapped_column(
        Text, nullable=False, default="[]", server_default=text("'[]'")
    )
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
