from sqlalchemy import Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from treasury.db.base import Base
from treasury.models.mixins import AuditMixin, StringIdMixin


class DocumentRange(StringIdMixin, AuditMixin, Base):
    """
    Named window of acceptable document numbers.
    Bounds are opaque strings; whether they compare numerically or
    lexicographically is decided when the range is loaded for validation.
    """
    __tablename__ = "document_ranges"

    name: Mapped[str] = mapped_column(String(150), nullable=False)
    start_number: Mapped[str] = mapped_column(String(100), nullable=False)
    end_number: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
