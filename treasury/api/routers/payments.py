from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from treasury.api.deps.request_identity import get_request_identity
from treasury.crud.payments import (
    create_payment,
    delete_payment,
    get_payment,
    list_payments,
    update_payment,
)
from treasury.db.session import get_db
from treasury.schemas.payments import PaymentCreate, PaymentOut, PaymentUpdate
from treasury.schemas.request_identity import RequestIdentity

router = APIRouter(
    prefix="/payments",
    tags=["payments"],
    dependencies=[Depends(get_request_identity)],
)


@router.post("", response_model=PaymentOut, status_code=status.HTTP_201_CREATED)
def create_payment_api(
    payload: PaymentCreate,
    db: Session = Depends(get_db),
    identity: RequestIdentity = Depends(get_request_identity),
):
    return create_payment(db, payload, created_by=identity.username)


@router.get("/{item_id}", response_model=PaymentOut)
def get_payment_api(item_id: str, db: Session = Depends(get_db)):
    obj = get_payment(db, item_id)
    if not obj:
        raise HTTPException(status_code=404, detail="Payment not found")
    return obj


@router.get("", response_model=list[PaymentOut])
def list_payments_api(
    skip: int = Query(0, ge=0),
    limit: int | None = Query(None, ge=1, le=5000),
    category: str | None = Query(None),
    db: Session = Depends(get_db),
):
    return list_payments(db, skip=skip, limit=limit, category=category)


@router.put("/{item_id}", response_model=PaymentOut)
def update_payment_api(item_id: str, payload: PaymentUpdate, db: Session = Depends(get_db)):
    obj = update_payment(db, item_id, payload)
    if not obj:
        raise HTTPException(status_code=404, detail="Payment not found")
    return obj


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_payment_api(item_id: str, db: Session = Depends(get_db)):
    ok = delete_payment(db, item_id)
    if not ok:
        raise HTTPException(status_code=404, detail="Payment not found")
    return None
