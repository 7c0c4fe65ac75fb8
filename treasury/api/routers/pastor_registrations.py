from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from treasury.api.deps.request_identity import get_request_identity
from treasury.crud.pastor_registrations import (
    create_pastor_registration,
    delete_pastor_registration,
    get_pastor_registration,
    list_pastor_registrations,
    update_pastor_registration,
)
from treasury.db.session import get_db
from treasury.schemas.pastor_registrations import PastorRegistrationCreate, PastorRegistrationOut, PastorRegistrationUpdate
from treasury.schemas.request_identity import RequestIdentity

router = APIRouter(
    prefix="/pastor-registrations",
    tags=["pastor_registrations"],
    dependencies=[Depends(get_request_identity)],
)


@router.post("", response_model=PastorRegistrationOut, status_code=status.HTTP_201_CREATED)
def create_pastor_registration_api(
    payload: PastorRegistrationCreate,
    db: Session = Depends(get_db),
    identity: RequestIdentity = Depends(get_request_identity),
):
    return create_pastor_registration(db, payload, created_by=identity.username)


@router.get("/{item_id}", response_model=PastorRegistrationOut)
def get_pastor_registration_api(item_id: str, db: Session = Depends(get_db)):
    obj = get_pastor_registration(db, item_id)
    if not obj:
        raise HTTPException(status_code=404, detail="Pastor registration not found")
    return obj


@router.get("", response_model=list[PastorRegistrationOut])
def list_pastor_registrations_api(
    skip: int = Query(0, ge=0),
    limit: int | None = Query(None, ge=1, le=5000),
    db: Session = Depends(get_db),
):
    return list_pastor_registrations(db, skip=skip, limit=limit)


@router.put("/{item_id}", response_model=PastorRegistrationOut)
def update_pastor_registration_api(item_id: str, payload: PastorRegistrationUpdate, db: Session = Depends(get_db)):
    obj = update_pastor_registration(db, item_id, payload)
    if not obj:
        raise HTTPException(status_code=404, detail="Pastor registration not found")
    return obj


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_pastor_registration_api(item_id: str, db: Session = Depends(get_db)):
    ok = delete_pastor_registration(db, item_id)
    if not ok:
        raise HTTPException(status_code=404, detail="Pastor registration not found")
    return None
