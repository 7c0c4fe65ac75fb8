from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from treasury.models.payments import Payment
from treasury.schemas.payments import PaymentCreate, PaymentUpdate


def create_payment(db: Session, data: PaymentCreate, *, created_by: str) -> Payment:
    obj = Payment(created_by=created_by, **data.model_dump())
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return obj


def get_payment(db: Session, payment_id: str) -> Payment | None:
    return db.get(Payment, payment_id)


def list_payments(
    db: Session,
    skip: int = 0,
    limit: int | None = None,
    category: str | None = None,
) -> list[Payment]:
    stmt = select(Payment).order_by(Payment.created_at.desc(), Payment.id.desc())
    if category:
        stmt = stmt.where(Payment.category == category)
    stmt = stmt.offset(skip)
    if limit is not None:
        stmt = stmt.limit(limit)
    return list(db.execute(stmt).scalars().all())


def update_payment(db: Session, payment_id: str, data: PaymentUpdate) -> Payment | None:
    obj = db.get(Payment, payment_id)
    if not obj:
        return None

    for k, v in data.model_dump(exclude_unset=True).items():
        setattr(obj, k, v)

    db.commit()
    db.refresh(obj)
    return obj


def delete_payment(db: Session, payment_id: str) -> bool:
    obj = db.get(Payment, payment_id)
    if not obj:
        return False

    db.delete(obj)
    db.commit()
    return True
