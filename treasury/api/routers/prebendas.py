from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from treasury.api.deps.request_identity import get_request_identity
from treasury.core.constants import MovementType
from treasury.crud.errors import DuplicateError
from treasury.crud.prebendas import (
    create_prebenda,
    delete_prebenda,
    get_prebenda,
    list_prebendas,
    update_prebenda,
)
from treasury.db.session import get_db
from treasury.schemas.prebendas import PrebendaCreate, PrebendaOut, PrebendaUpdate
from treasury.schemas.request_identity import RequestIdentity
from treasury.services.document_range_validation import DocumentNumberRejected

router = APIRouter(
    prefix="/prebendas",
    tags=["prebendas"],
    dependencies=[Depends(get_request_identity)],
)


@router.post("", response_model=PrebendaOut, status_code=status.HTTP_201_CREATED)
def create_prebenda_api(
    payload: PrebendaCreate,
    db: Session = Depends(get_db),
    identity: RequestIdentity = Depends(get_request_identity),
):
    try:
        return create_prebenda(db, payload, created_by=identity.username)
    except DocumentNumberRejected as e:
        raise HTTPException(status_code=e.status_code, detail=e.to_detail())
    except DuplicateError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.get("/{prebenda_id}", response_model=PrebendaOut)
def get_prebenda_api(prebenda_id: str, db: Session = Depends(get_db)):
    obj = get_prebenda(db, prebenda_id)
    if not obj:
        raise HTTPException(status_code=404, detail="Prebenda not found")
    return obj


@router.get("", response_model=list[PrebendaOut])
def list_prebendas_api(
    skip: int = Query(0, ge=0),
    limit: int | None = Query(None, ge=1, le=5000),
    type: MovementType | None = Query(None),
    pastor: str | None = Query(None),
    db: Session = Depends(get_db),
):
    return list_prebendas(db, skip=skip, limit=limit, type=type, pastor=pastor)


@router.put("/{prebenda_id}", response_model=PrebendaOut)
def update_prebenda_api(prebenda_id: str, payload: PrebendaUpdate, db: Session = Depends(get_db)):
    try:
        obj = update_prebenda(db, prebenda_id, payload)
    except DocumentNumberRejected as e:
        raise HTTPException(status_code=e.status_code, detail=e.to_detail())
    except DuplicateError as e:
        raise HTTPException(status_code=409, detail=str(e))

    if not obj:
        raise HTTPException(status_code=404, detail="Prebenda not found")
    return obj


@router.delete("/{prebenda_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_prebenda_api(prebenda_id: str, db: Session = Depends(get_db)):
    ok = delete_prebenda(db, prebenda_id)
    if not ok:
        raise HTTPException(status_code=404, detail="Prebenda not found")
    return None
