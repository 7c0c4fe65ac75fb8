from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from treasury.crud.errors import commit_or_raise
from treasury.models.mixins import new_id
from treasury.models.prebendas import Prebenda
from treasury.schemas.prebendas import PrebendaCreate, PrebendaUpdate
from treasury.services.document_number_service import (
    DOCUMENT_NUMBER_KEY_MARKERS,
    OWNER_PREBENDA,
    guard_document_number,
    release_document_number_claim,
    sync_document_number_claim,
)
from treasury.services.document_range_validation import DocumentOwner, normalize_document_number

_DUPLICATE_MESSAGE = "Document number already in use by another record."


def _clean_number(value: str | None) -> str | None:
    return (value or "").strip() or None


def create_prebenda(db: Session, data: PrebendaCreate, *, created_by: str) -> Prebenda:
    payload = data.model_dump()
    payload["document_number"] = _clean_number(payload.get("document_number"))
    obj = Prebenda(id=new_id(), created_by=created_by, **payload)

    guard_document_number(db, obj.document_number)
    db.add(obj)
    sync_document_number_claim(
        db,
        owner=DocumentOwner(OWNER_PREBENDA, obj.id),
        document_number=obj.document_number,
    )
    commit_or_raise(db, _DUPLICATE_MESSAGE, unique_markers=DOCUMENT_NUMBER_KEY_MARKERS)
    db.refresh(obj)
    return obj


def get_prebenda(db: Session, prebenda_id: str) -> Prebenda | None:
    return db.get(Prebenda, prebenda_id)


def list_prebendas(
    db: Session,
    skip: int = 0,
    limit: int | None = None,
    type: str | None = None,
    pastor: str | None = None,
) -> list[Prebenda]:
    stmt = select(Prebenda).order_by(Prebenda.created_at.desc(), Prebenda.id.desc())
    if type:
        stmt = stmt.where(Prebenda.type == type)
    if pastor:
        stmt = stmt.where(Prebenda.pastor == pastor)
    stmt = stmt.offset(skip)
    if limit is not None:
        stmt = stmt.limit(limit)
    return list(db.execute(stmt).scalars().all())


def update_prebenda(db: Session, prebenda_id: str, data: PrebendaUpdate) -> Prebenda | None:
    obj = db.get(Prebenda, prebenda_id)
    if not obj:
        return None

    patch = data.model_dump(exclude_unset=True)
    owner = DocumentOwner(OWNER_PREBENDA, obj.id)
    if "document_number" in patch:
        patch["document_number"] = _clean_number(patch["document_number"])
        # an unchanged number was accepted earlier and is not re-checked
        if normalize_document_number(patch["document_number"]) != normalize_document_number(obj.document_number):
            guard_document_number(db, patch["document_number"], owner=owner)
        sync_document_number_claim(db, owner=owner, document_number=patch["document_number"])

    for k, v in patch.items():
        setattr(obj, k, v)

    commit_or_raise(db, _DUPLICATE_MESSAGE, unique_markers=DOCUMENT_NUMBER_KEY_MARKERS)
    db.refresh(obj)
    return obj


def delete_prebenda(db: Session, prebenda_id: str) -> bool:
    obj = db.get(Prebenda, prebenda_id)
    if not obj:
        return False

    release_document_number_claim(db, owner=DocumentOwner(OWNER_PREBENDA, obj.id))
    db.delete(obj)
    db.commit()
    return True
