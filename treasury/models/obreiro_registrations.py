import datetime as dt

from sqlalchemy import Date, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from treasury.db.base import Base
from treasury.models.mixins import AuditMixin, StringIdMixin


class ObreiroRegistration(StringIdMixin, AuditMixin, Base):
    """Worker (obreiro) registration with the payment channel used for stipends."""
    __tablename__ = "obreiro_registrations"

    nome_completo: Mapped[str] = mapped_column(String(255), nullable=False)
    setor: Mapped[str] = mapped_column(String(100), nullable=False)
    campo: Mapped[str] = mapped_column(String(150), nullable=False)
    campo_missionario: Mapped[str | None] = mapped_column(String(150), nullable=True)
    tipo: Mapped[str] = mapped_column(String(20), nullable=False)
    # JSON text: {"tipo": "dinheiro"|"banco", "banco": {...}}
    pagamento: Mapped[str] = mapped_column(Text, nullable=False)
    observacoes: Mapped[str | None] = mapped_column(Text, nullable=True)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
