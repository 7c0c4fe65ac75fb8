from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from treasury.api.deps.request_identity import get_request_identity, require_admin
from treasury.crud.document_ranges import (
    create_document_range,
    delete_document_range,
    get_document_range,
    list_document_ranges,
    update_document_range,
)
from treasury.db.session import get_db
from treasury.schemas.document_ranges import (
    DocumentNumberCheckRequest,
    DocumentNumberCheckResponse,
    DocumentRangeCreate,
    DocumentRangeOut,
    DocumentRangeUpdate,
)
from treasury.schemas.request_identity import RequestIdentity
from treasury.services.document_number_service import SqlDocumentNumberRepository
from treasury.services.document_range_validation import (
    DocumentOwner,
    InvalidRangeError,
    check_submission,
)

# Reading and checking against ranges is open to every signed-in user;
# changing them is a settings action reserved for administrators.
router = APIRouter(
    prefix="/document-ranges",
    tags=["document-ranges"],
    dependencies=[Depends(get_request_identity)],
)


@router.post("/validate", response_model=DocumentNumberCheckResponse)
def validate_document_number_api(payload: DocumentNumberCheckRequest, db: Session = Depends(get_db)):
    """Pre-submission check for a transaction or prebenda document number."""
    exclude = None
    if payload.owner_type and payload.owner_id:
        exclude = DocumentOwner(payload.owner_type, payload.owner_id)

    decision = check_submission(
        payload.document_number,
        SqlDocumentNumberRepository(db),
        exclude=exclude,
    )
    return DocumentNumberCheckResponse(
        is_valid=decision.accepted,
        is_duplicate=decision.is_duplicate,
        message=decision.message,
    )


@router.post("", response_model=DocumentRangeOut, status_code=status.HTTP_201_CREATED)
def create_document_range_api(
    payload: DocumentRangeCreate,
    db: Session = Depends(get_db),
    identity: RequestIdentity = Depends(require_admin),
):
    try:
        return create_document_range(db, payload, created_by=identity.username)
    except InvalidRangeError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/{range_id}", response_model=DocumentRangeOut)
def get_document_range_api(range_id: str, db: Session = Depends(get_db)):
    obj = get_document_range(db, range_id)
    if not obj:
        raise HTTPException(status_code=404, detail="Document range not found")
    return obj


@router.get("", response_model=list[DocumentRangeOut])
def list_document_ranges_api(
    is_active: bool | None = Query(None),
    db: Session = Depends(get_db),
):
    return list_document_ranges(db, is_active=is_active)


@router.put(
    "/{range_id}",
    response_model=DocumentRangeOut,
    dependencies=[Depends(require_admin)],
)
def update_document_range_api(range_id: str, payload: DocumentRangeUpdate, db: Session = Depends(get_db)):
    try:
        obj = update_document_range(db, range_id, payload)
    except InvalidRangeError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if not obj:
        raise HTTPException(status_code=404, detail="Document range not found")
    return obj


@router.delete(
    "/{range_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)],
)
def delete_document_range_api(range_id: str, db: Session = Depends(get_db)):
    ok = delete_document_range(db, range_id)
    if not ok:
        raise HTTPException(status_code=404, detail="Document range not found")
    return None
