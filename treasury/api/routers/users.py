from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from treasury.api.deps.request_identity import require_admin
from treasury.crud.users import (
    DuplicateError,
    ProtectedUserError,
    create_user,
    delete_user,
    get_user,
    list_users,
    update_user,
)
from treasury.db.session import get_db
from treasury.schemas.request_identity import RequestIdentity
from treasury.schemas.users import UserCreate, UserOut, UserUpdate

router = APIRouter(prefix="/users", tags=["users"], dependencies=[Depends(require_admin)])


@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def create_user_api(
    payload: UserCreate,
    db: Session = Depends(get_db),
    identity: RequestIdentity = Depends(require_admin),
):
    try:
        return create_user(db, payload, created_by=identity.username)
    except DuplicateError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.get("/{user_id}", response_model=UserOut)
def get_user_api(user_id: str, db: Session = Depends(get_db)):
    obj = get_user(db, user_id)
    if not obj:
        raise HTTPException(status_code=404, detail="User not found")
    return obj


@router.get("", response_model=list[UserOut])
def list_users_api(
    is_active: bool | None = Query(None),
    db: Session = Depends(get_db),
):
    return list_users(db, is_active=is_active)


@router.put("/{user_id}", response_model=UserOut)
def update_user_api(user_id: str, payload: UserUpdate, db: Session = Depends(get_db)):
    try:
        obj = update_user(db, user_id, payload)
    except DuplicateError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except ProtectedUserError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if not obj:
        raise HTTPException(status_code=404, detail="User not found")
    return obj


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user_api(user_id: str, db: Session = Depends(get_db)):
    try:
        ok = delete_user(db, user_id)
    except ProtectedUserError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not ok:
        raise HTTPException(status_code=404, detail="User not found")
    return None
