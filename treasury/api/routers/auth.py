import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from treasury.api.deps.request_identity import get_current_user
from treasury.core.flow_logging import flow_info
from treasury.core.security.tokens import issue_access_token
from treasury.crud.users import DuplicateError, authenticate_user, update_credentials
from treasury.db.session import get_db
from treasury.models.users import User
from treasury.schemas.auth import CredentialsUpdate, LoginRequest, LoginResponse
from treasury.schemas.users import UserOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def _login_response(user: User) -> LoginResponse:
    token = issue_access_token(user_id=user.id, username=user.username, role=user.role)
    return LoginResponse(token=token, user=UserOut.model_validate(user))


@router.post("/login", response_model=LoginResponse)
def login_api(payload: LoginRequest, db: Session = Depends(get_db)):
    user = authenticate_user(db, payload.username.strip(), payload.password)
    if user is None:
        flow_info(logger, "login_failed username=%s", payload.username, category="auth")
        raise HTTPException(status_code=401, detail="Invalid username or password.")
    flow_info(logger, "login_ok user_id=%s", user.id, category="auth")
    return _login_response(user)


@router.get("/me", response_model=UserOut)
def me_api(user: User = Depends(get_current_user)):
    return user


@router.put("/credentials", response_model=LoginResponse)
def update_credentials_api(
    payload: CredentialsUpdate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Change the caller's own username and password; a fresh token is returned."""
    try:
        updated = update_credentials(
            db,
            user,
            new_username=payload.new_username.strip(),
            new_password=payload.new_password,
        )
    except DuplicateError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return _login_response(updated)
