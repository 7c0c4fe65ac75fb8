from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from treasury.crud.errors import commit_or_raise
from treasury.models.mixins import new_id
from treasury.models.transactions import Transaction
from treasury.schemas.transactions import TransactionCreate, TransactionUpdate
from treasury.services.document_number_service import (
    DOCUMENT_NUMBER_KEY_MARKERS,
    OWNER_TRANSACTION,
    guard_document_number,
    release_document_number_claim,
    sync_document_number_claim,
)
from treasury.services.document_range_validation import DocumentOwner, normalize_document_number

_DUPLICATE_MESSAGE = "Document number already in use by another record."


def _clean_number(value: str | None) -> str | None:
    return (value or "").strip() or None


def create_transaction(db: Session, data: TransactionCreate, *, created_by: str) -> Transaction:
    payload = data.model_dump()
    payload["document_number"] = _clean_number(payload.get("document_number"))
    obj = Transaction(id=new_id(), created_by=created_by, **payload)

    guard_document_number(db, obj.document_number)
    db.add(obj)
    sync_document_number_claim(
        db,
        owner=DocumentOwner(OWNER_TRANSACTION, obj.id),
        document_number=obj.document_number,
    )
    commit_or_raise(db, _DUPLICATE_MESSAGE, unique_markers=DOCUMENT_NUMBER_KEY_MARKERS)
    db.refresh(obj)
    return obj


def get_transaction(db: Session, transaction_id: str) -> Transaction | None:
    return db.get(Transaction, transaction_id)


def list_transactions(
    db: Session,
    skip: int = 0,
    limit: int | None = None,
    type: str | None = None,
) -> list[Transaction]:
    stmt = select(Transaction).order_by(Transaction.created_at.desc(), Transaction.id.desc())
    if type:
        stmt = stmt.where(Transaction.type == type)
    stmt = stmt.offset(skip)
    if limit is not None:
        stmt = stmt.limit(limit)
    return list(db.execute(stmt).scalars().all())


def update_transaction(db: Session, transaction_id: str, data: TransactionUpdate) -> Transaction | None:
    obj = db.get(Transaction, transaction_id)
    if not obj:
        return None

    patch = data.model_dump(exclude_unset=True)
    owner = DocumentOwner(OWNER_TRANSACTION, obj.id)
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


def delete_transaction(db: Session, transaction_id: str) -> bool:
    obj = db.get(Transaction, transaction_id)
    if not obj:
        return False

    release_document_number_claim(db, owner=DocumentOwner(OWNER_TRANSACTION, obj.id))
    db.delete(obj)
    db.commit()
    return True
