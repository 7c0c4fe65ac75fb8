from __future__ import annotations

import json

from sqlalchemy import select
from sqlalchemy.orm import Session

from treasury.models.obreiro_registrations import ObreiroRegistration
from treasury.schemas.obreiro_registrations import (
    ObreiroRegistrationCreate,
    ObreiroRegistrationUpdate,
)


def create_obreiro_registration(
    db: Session,
    data: ObreiroRegistrationCreate,
    *,
    created_by: str,
) -> ObreiroRegistration:
    payload = data.model_dump(exclude={"pagamento"})
    obj = ObreiroRegistration(
        created_by=created_by,
        pagamento=json.dumps(data.pagamento.model_dump(), ensure_ascii=False),
        **payload,
    )
    db.add(obj)
    db.commit()
    db.refresh(obj)
    return obj


def get_obreiro_registration(db: Session, registration_id: str) -> ObreiroRegistration | None:
    return db.get(ObreiroRegistration, registration_id)


def list_obreiro_registrations(
    db: Session,
    skip: int = 0,
    limit: int | None = None,
    tipo: str | None = None,
) -> list[ObreiroRegistration]:
    stmt = select(ObreiroRegistration).order_by(
        ObreiroRegistration.created_at.desc(), ObreiroRegistration.id.desc()
    )
    if tipo:
        stmt = stmt.where(ObreiroRegistration.tipo == tipo)
    stmt = stmt.offset(skip)
    if limit is not None:
        stmt = stmt.limit(limit)
    return list(db.execute(stmt).scalars().all())


def update_obreiro_registration(
    db: Session,
    registration_id: str,
    data: ObreiroRegistrationUpdate,
) -> ObreiroRegistration | None:
    obj = db.get(ObreiroRegistration, registration_id)
    if not obj:
        return None

    patch = data.model_dump(exclude_unset=True, exclude={"pagamento"})
    if data.pagamento is not None:
        patch["pagamento"] = json.dumps(data.pagamento.model_dump(), ensure_ascii=False)
    for k, v in patch.items():
        setattr(obj, k, v)

    db.commit()
    db.refresh(obj)
    return obj


def delete_obreiro_registration(db: Session, registration_id: str) -> bool:
    obj = db.get(ObreiroRegistration, registration_id)
    if not obj:
        return False

    db.delete(obj)
    db.commit()
    return True
