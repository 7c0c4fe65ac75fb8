from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from treasury.models.registrations import Registration
from treasury.schemas.registrations import RegistrationCreate, RegistrationUpdate


def create_registration(db: Session, data: RegistrationCreate, *, created_by: str) -> Registration:
    obj = Registration(created_by=created_by, **data.model_dump())
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return obj


def get_registration(db: Session, registration_id: str) -> Registration | None:
    return db.get(Registration, registration_id)


def list_registrations(
    db: Session,
    skip: int = 0,
    limit: int | None = None,
    field: str | None = None,
) -> list[Registration]:
    stmt = select(Registration).order_by(Registration.created_at.desc(), Registration.id.desc())
    if field:
        stmt = stmt.where(Registration.field == field)
    stmt = stmt.offset(skip)
    if limit is not None:
        stmt = stmt.limit(limit)
    return list(db.execute(stmt).scalars().all())


def update_registration(db: Session, registration_id: str, data: RegistrationUpdate) -> Registration | None:
    obj = db.get(Registration, registration_id)
    if not obj:
        return None

    for k, v in data.model_dump(exclude_unset=True).items():
        setattr(obj, k, v)

    db.commit()
    db.refresh(obj)
    return obj


def delete_registration(db: Session, registration_id: str) -> bool:
    obj = db.get(Registration, registration_id)
    if not obj:
        return False

    db.delete(obj)
    db.commit()
    return True
