from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from treasury.api.deps.request_identity import get_request_identity
from treasury.crud.obreiro_registrations import (
    create_obreiro_registration,
    delete_obreiro_registration,
    get_obreiro_registration,
    list_obreiro_registrations,
    update_obreiro_registration,
)
from treasury.db.session import get_db
from treasury.schemas.obreiro_registrations import ObreiroRegistrationCreate, ObreiroRegistrationOut, ObreiroRegistrationUpdate
from treasury.schemas.request_identity import RequestIdentity

router = APIRouter(
    prefix="/obreiro-registrations",
    tags=["obreiro_registrations"],
    dependencies=[Depends(get_request_identity)],
)


@router.post("", response_model=ObreiroRegistrationOut, status_code=status.HTTP_201_CREATED)
def create_obreiro_registration_api(
    payload: ObreiroRegistrationCreate,
    db: Session = Depends(get_db),
    identity: RequestIdentity = Depends(get_request_identity),
):
    return create_obreiro_registration(db, payload, created_by=identity.username)


@router.get("/{item_id}", response_model=ObreiroRegistrationOut)
def get_obreiro_registration_api(item_id: str, db: Session = Depends(get_db)):
    obj = get_obreiro_registration(db, item_id)
    if not obj:
        raise HTTPException(status_code=404, detail="Obreiro registration not found")
    return obj


@router.get("", response_model=list[ObreiroRegistrationOut])
def list_obreiro_registrations_api(
    skip: int = Query(0, ge=0),
    limit: int | None = Query(None, ge=1, le=5000),
    tipo: str | None = Query(None),
    db: Session = Depends(get_db),
):
    return list_obreiro_registrations(db, skip=skip, limit=limit, tipo=tipo)


@router.put("/{item_id}", response_model=ObreiroRegistrationOut)
def update_obreiro_registration_api(item_id: str, payload: ObreiroRegistrationUpdate, db: Session = Depends(get_db)):
    obj = update_obreiro_registration(db, item_id, payload)
    if not obj:
        raise HTTPException(status_code=404, detail="Obreiro registration not found")
    return obj


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_obreiro_registration_api(item_id: str, db: Session = Depends(get_db)):
    ok = delete_obreiro_registration(db, item_id)
    if not ok:
        raise HTTPException(status_code=404, detail="Obreiro registration not found")
    return None
