from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from treasury.models.document_ranges import DocumentRange
from treasury.schemas.document_ranges import DocumentRangeCreate, DocumentRangeUpdate
from treasury.services.document_range_validation import ensure_range_ordered


def create_document_range(db: Session, data: DocumentRangeCreate, *, created_by: str) -> DocumentRange:
    ensure_range_ordered(data.start_number, data.end_number)
    obj = DocumentRange(created_by=created_by, **data.model_dump())
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return obj


def get_document_range(db: Session, range_id: str) -> DocumentRange | None:
    return db.get(DocumentRange, range_id)


def list_document_ranges(db: Session, is_active: bool | None = None) -> list[DocumentRange]:
    stmt = select(DocumentRange).order_by(DocumentRange.created_at.desc(), DocumentRange.id.desc())
    if is_active is not None:
        stmt = stmt.where(DocumentRange.is_active == is_active)
    return list(db.execute(stmt).scalars().all())


def update_document_range(db: Session, range_id: str, data: DocumentRangeUpdate) -> DocumentRange | None:
    obj = db.get(DocumentRange, range_id)
    if not obj:
        return None

    patch = data.model_dump(exclude_unset=True)
    # bounds are checked as they will be stored, so a one-sided edit is covered
    ensure_range_ordered(
        patch.get("start_number") or obj.start_number,
        patch.get("end_number") or obj.end_number,
    )
    for k, v in patch.items():
        setattr(obj, k, v)

    db.commit()
    db.refresh(obj)
    return obj


def delete_document_range(db: Session, range_id: str) -> bool:
    obj = db.get(DocumentRange, range_id)
    if not obj:
        return False

    db.delete(obj)
    db.commit()
    return True
