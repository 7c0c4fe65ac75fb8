from __future__ import annotations

import json
from datetime import date

from sqlalchemy import select
from sqlalchemy.orm import Session

from treasury.models.pastor_registrations import PastorRegistration
from treasury.schemas.pastor_registrations import (
    PastorRegistrationCreate,
    PastorRegistrationUpdate,
)

# list-valued columns persisted as JSON text
_JSON_FIELDS = ("children", "previous_fields")


def _serialize(patch: dict) -> dict:
    for key in _JSON_FIELDS:
        if key in patch and patch[key] is not None:
            patch[key] = json.dumps(patch[key], ensure_ascii=False)
    return patch


def create_pastor_registration(
    db: Session,
    data: PastorRegistrationCreate,
    *,
    created_by: str,
) -> PastorRegistration:
    payload = _serialize(data.model_dump(mode="json"))
    payload["birth_date"] = data.birth_date
    obj = PastorRegistration(created_by=created_by, date=date.today(), **payload)
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return obj


def get_pastor_registration(db: Session, registration_id: str) -> PastorRegistration | None:
    return db.get(PastorRegistration, registration_id)


def list_pastor_registrations(
    db: Session,
    skip: int = 0,
    limit: int | None = None,
) -> list[PastorRegistration]:
    stmt = (
        select(PastorRegistration)
        .order_by(PastorRegistration.created_at.desc(), PastorRegistration.id.desc())
        .offset(skip)
    )
    if limit is not None:
        stmt = stmt.limit(limit)
    return list(db.execute(stmt).scalars().all())


def update_pastor_registration(
    db: Session,
    registration_id: str,
    data: PastorRegistrationUpdate,
) -> PastorRegistration | None:
    obj = db.get(PastorRegistration, registration_id)
    if not obj:
        return None

    patch = _serialize(data.model_dump(mode="json", exclude_unset=True))
    if "birth_date" in patch:
        patch["birth_date"] = data.birth_date
    for k, v in patch.items():
        if v is None and k in _JSON_FIELDS:
            continue
        setattr(obj, k, v)

    db.commit()
    db.refresh(obj)
    return obj


def delete_pastor_registration(db: Session, registration_id: str) -> bool:
    obj = db.get(PastorRegistration, registration_id)
    if not obj:
        return False

    db.delete(obj)
    db.commit()
    return True
