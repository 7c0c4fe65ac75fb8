from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from treasury.core.config import settings
from treasury.models.document_numbers import DocumentNumberClaim
from treasury.models.document_ranges import DocumentRange
from treasury.models.prebendas import Prebenda
from treasury.models.transactions import Transaction
from treasury.services.document_range_validation import (
    DocumentOwner,
    LoadedRange,
    enforce_submission,
    normalize_document_number,
)

OWNER_TRANSACTION = "transaction"
OWNER_PREBENDA = "prebenda"

# how a violated number_key uniqueness shows up in PostgreSQL and SQLite errors
DOCUMENT_NUMBER_KEY_MARKERS = ("uq_document_number_claims_key", "document_number_claims.number_key")

_DOCUMENT_BEARING_MODELS = {
    OWNER_TRANSACTION: Transaction,
    OWNER_PREBENDA: Prebenda,
}


class SqlDocumentNumberRepository:
    """Reads ranges and every document number in use across document-bearing tables."""

    def __init__(self, db: Session):
        self.db = db

    def list_ranges(self) -> list[LoadedRange]:
        rows = self.db.execute(select(DocumentRange)).scalars().all()
        return [LoadedRange.from_record(row) for row in rows]

    def existing_document_numbers(
        self,
        *,
        exclude: DocumentOwner | None = None,
    ) -> list[str]:
        numbers: list[str] = []
        for owner_type, model in _DOCUMENT_BEARING_MODELS.items():
            stmt = select(model.document_number).where(model.document_number.isnot(None))
            if exclude is not None and exclude.owner_type == owner_type:
                stmt = stmt.where(model.id != exclude.owner_id)
            numbers.extend(value for value in self.db.execute(stmt).scalars().all() if value)
        return numbers


def guard_document_number(
    db: Session,
    document_number: str | None,
    *,
    owner: DocumentOwner | None = None,
) -> None:
    """Raise DocumentNumberRejected when the number fails the submission gate."""
    if not settings.DOCUMENT_NUMBER_ENFORCE:
        return
    enforce_submission(document_number, SqlDocumentNumberRepository(db), exclude=owner)


def sync_document_number_claim(
    db: Session,
    *,
    owner: DocumentOwner,
    document_number: str | None,
) -> None:
    """
    Keep the owner's claim row in step with its current document number.
    Callers flush/commit; a clash on number_key surfaces as IntegrityError.
    """
    key = normalize_document_number(document_number)
    claim = db.execute(
        select(DocumentNumberClaim)
        .where(DocumentNumberClaim.owner_type == owner.owner_type)
        .where(DocumentNumberClaim.owner_id == owner.owner_id)
    ).scalar_one_or_none()

    if not key:
        if claim is not None:
            db.delete(claim)
        return

    if claim is None:
        db.add(
            DocumentNumberClaim(
                number_key=key,
                document_number=(document_number or "").strip(),
                owner_type=owner.owner_type,
                owner_id=owner.owner_id,
            )
        )
        return

    claim.number_key = key
    claim.document_number = (document_number or "").strip()


def release_document_number_claim(db: Session, *, owner: DocumentOwner) -> None:
    sync_document_number_claim(db, owner=owner, document_number=None)
