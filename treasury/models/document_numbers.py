from sqlalchemy import String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from treasury.db.base import Base
from treasury.models.mixins import AuditMixin, StringIdMixin


class DocumentNumberClaim(StringIdMixin, AuditMixin, Base):
    """
    One row per document number in use by a transaction or prebenda.
    `number_key` is the trimmed, lower-cased number; its unique constraint is
    what makes the document number space global across both record types.
    """
    __tablename__ = "document_number_claims"

    __table_args__ = (
        UniqueConstraint("number_key", name="uq_document_number_claims_key"),
        UniqueConstraint("owner_type", "owner_id", name="uq_document_number_claims_owner"),
    )

    number_key: Mapped[str] = mapped_column(String(100), nullable=False)
    document_number: Mapped[str] = mapped_column(String(100), nullable=False)
    owner_type: Mapped[str] = mapped_column(String(20), nullable=False)
    owner_id: Mapped[str] = mapped_column(String(36), nullable=False)
