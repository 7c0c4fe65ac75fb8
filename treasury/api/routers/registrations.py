from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from treasury.api.deps.request_identity import get_request_identity
from treasury.crud.registrations import (
    create_registration,
    delete_registration,
    get_registration,
    list_registrations,
    update_registration,
)
from treasury.db.session import get_db
from treasury.schemas.registrations import RegistrationCreate, RegistrationOut, RegistrationUpdate
from treasury.schemas.request_identity import RequestIdentity

router = APIRouter(
    prefix="/registrations",
    tags=["registrations"],
    dependencies=[Depends(get_request_identity)],
)


@router.post("", response_model=RegistrationOut, status_code=status.HTTP_201_CREATED)
def create_registration_api(
    payload: RegistrationCreate,
    db: Session = Depends(get_db),
    identity: RequestIdentity = Depends(get_request_identity),
):
    return create_registration(db, payload, created_by=identity.username)


@router.get("/{item_id}", response_model=RegistrationOut)
def get_registration_api(item_id: str, db: Session = Depends(get_db)):
    obj = get_registration(db, item_id)
    if not obj:
        raise HTTPException(status_code=404, detail="Registration not found")
    return obj


@router.get("", response_model=list[RegistrationOut])
def list_registrations_api(
    skip: int = Query(0, ge=0),
    limit: int | None = Query(None, ge=1, le=5000),
    field: str | None = Query(None),
    db: Session = Depends(get_db),
):
    return list_registrations(db, skip=skip, limit=limit, field=field)


@router.put("/{item_id}", response_model=RegistrationOut)
def update_registration_api(item_id: str, payload: RegistrationUpdate, db: Session = Depends(get_db)):
    obj = update_registration(db, item_id, payload)
    if not obj:
        raise HTTPException(status_code=404, detail="Registration not found")
    return obj


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_registration_api(item_id: str, db: Session = Depends(get_db)):
    ok = delete_registration(db, item_id)
    if not ok:
        raise HTTPException(status_code=404, detail="Registration not found")
    return None
