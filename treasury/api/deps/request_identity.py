from __future__ import annotations

import logging

from fastapi import Depends, HTTPException, Request
from sqlalchemy.orm import Session

from treasury.core.flow_logging import flow_info
from treasury.core.security.tokens import AuthTokenValidationError, decode_access_token
from treasury.crud.users import get_user
from treasury.db.session import get_db
from treasury.models.users import User
from treasury.schemas.request_identity import RequestIdentity

logger = logging.getLogger(__name__)


def _extract_bearer_token(request: Request) -> str | None:
    header = request.headers.get("Authorization") or ""
    prefix = "Bearer "
    if not header.startswith(prefix):
        return None
    token = header[len(prefix) :].strip()
    return token or None


def _claims_from_request(request: Request) -> dict:
    token = _extract_bearer_token(request)
    if not token:
        raise HTTPException(status_code=401, detail="Missing Bearer access token.")
    try:
        return decode_access_token(token)
    except AuthTokenValidationError as exc:
        flow_info(logger, "token_rejected reason=%s", exc, category="auth")
        raise HTTPException(status_code=401, detail=str(exc)) from exc


def get_current_user(
    request: Request,
    db: Session = Depends(get_db),
) -> User:
    """
    Resolve the bearer token to a stored, active user.
    A token outlives neither its user's deletion nor deactivation.
    """
    claims = _claims_from_request(request)
    user = get_user(db, str(claims["sub"]))
    if user is None or not user.is_active:
        flow_info(logger, "token_user_inactive subject=%s", claims.get("sub"), category="auth")
        raise HTTPException(status_code=401, detail="User not found or inactive.")
    return user


def get_request_identity(user: User = Depends(get_current_user)) -> RequestIdentity:
    return RequestIdentity(
        user_id=user.id,
        username=user.username,
        role=user.role,
        claims={},
    )


def require_admin(identity: RequestIdentity = Depends(get_request_identity)) -> RequestIdentity:
    if not identity.is_admin:
        logger.warning("admin_required_denied user=%s role=%s", identity.username, identity.role)
        raise HTTPException(status_code=403, detail="Administrator role required.")
    return identity
