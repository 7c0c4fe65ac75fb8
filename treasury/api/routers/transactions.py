from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from treasury.api.deps.request_identity import get_request_identity
from treasury.core.constants import MovementType
from treasury.crud.errors import DuplicateError
from treasury.crud.transactions import (
    create_transaction,
    delete_transaction,
    get_transaction,
    list_transactions,
    update_transaction,
)
from treasury.db.session import get_db
from treasury.schemas.request_identity import RequestIdentity
from treasury.schemas.transactions import TransactionCreate, TransactionOut, TransactionUpdate
from treasury.services.document_range_validation import DocumentNumberRejected

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.post("", response_model=TransactionOut, status_code=status.HTTP_201_CREATED)
def create_transaction_api(
    payload: TransactionCreate,
    db: Session = Depends(get_db),
    identity: RequestIdentity = Depends(get_request_identity),
):
    try:
        return create_transaction(db, payload, created_by=identity.username)
    except DocumentNumberRejected as e:
        raise HTTPException(status_code=e.status_code, detail=e.to_detail())
    except DuplicateError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.get("/{transaction_id}", response_model=TransactionOut)
def get_transaction_api(
    transaction_id: str,
    db: Session = Depends(get_db),
    _: RequestIdentity = Depends(get_request_identity),
):
    obj = get_transaction(db, transaction_id)
    if not obj:
        raise HTTPException(status_code=404, detail="Transaction not found")
    return obj


@router.get("", response_model=list[TransactionOut])
def list_transactions_api(
    skip: int = Query(0, ge=0),
    limit: int | None = Query(None, ge=1, le=5000),
    type: MovementType | None = Query(None),
    db: Session = Depends(get_db),
    _: RequestIdentity = Depends(get_request_identity),
):
    return list_transactions(db, skip=skip, limit=limit, type=type)


@router.put("/{transaction_id}", response_model=TransactionOut)
def update_transaction_api(
    transaction_id: str,
    payload: TransactionUpdate,
    db: Session = Depends(get_db),
    _: RequestIdentity = Depends(get_request_identity),
):
    try:
        obj = update_transaction(db, transaction_id, payload)
    except DocumentNumberRejected as e:
        raise HTTPException(status_code=e.status_code, detail=e.to_detail())
    except DuplicateError as e:
        raise HTTPException(status_code=409, detail=str(e))

    if not obj:
        raise HTTPException(status_code=404, detail="Transaction not found")
    return obj


@router.delete("/{transaction_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_transaction_api(
    transaction_id: str,
    db: Session = Depends(get_db),
    _: RequestIdentity = Depends(get_request_identity),
):
    ok = delete_transaction(db, transaction_id)
    if not ok:
        raise HTTPException(status_code=404, detail="Transaction not found")
    return None
