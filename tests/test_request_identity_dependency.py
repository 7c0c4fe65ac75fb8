from __future__ import annotations

from types import SimpleNamespace

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from treasury.api.deps import request_identity as request_identity_module
from treasury.core.config import settings
from treasury.core.security.tokens import issue_access_token
from treasury.db.session import get_db
from treasury.schemas.request_identity import RequestIdentity

_USERS = {
    "u-admin": SimpleNamespace(id="u-admin", username="CEDADER", role="admin", is_active=True),
    "u-1": SimpleNamespace(id="u-1", username="tesoureiro", role="usuario", is_active=True),
    "u-off": SimpleNamespace(id="u-off", username="inativo", role="admin", is_active=False),
}


def _build_app() -> FastAPI:
    app = FastAPI()

    @app.get("/whoami")
    def whoami(identity: RequestIdentity = Depends(request_identity_module.get_request_identity)):
        return {"user_id": identity.user_id, "username": identity.username, "admin": identity.is_admin}

    @app.get("/settings")
    def admin_only(identity: RequestIdentity = Depends(request_identity_module.require_admin)):
        return {"username": identity.username}

    app.dependency_overrides[get_db] = lambda: None
    return app


def _bearer(user_id: str) -> dict[str, str]:
    user = _USERS[user_id]
    token = issue_access_token(user_id=user.id, username=user.username, role=user.role)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture(autouse=True)
def _fake_user_lookup(monkeypatch):
    monkeypatch.setattr(request_identity_module, "get_user", lambda _db, user_id: _USERS.get(user_id))


def test_missing_bearer_is_unauthorized():
    with TestClient(_build_app()) as client:
        r = client.get("/whoami")
        assert r.status_code == 401
        r = client.get("/whoami", headers={"Authorization": "Basic abc"})
        assert r.status_code == 401


def test_bearer_resolves_stored_user():
    with TestClient(_build_app()) as client:
        r = client.get("/whoami", headers=_bearer("u-1"))
        assert r.status_code == 200
        assert r.json() == {"user_id": "u-1", "username": "tesoureiro", "admin": False}


def test_inactive_user_token_is_rejected():
    with TestClient(_build_app()) as client:
        assert client.get("/whoami", headers=_bearer("u-off")).status_code == 401


def test_admin_dependency():
    with TestClient(_build_app()) as client:
        assert client.get("/settings", headers=_bearer("u-1")).status_code == 403
        r = client.get("/settings", headers=_bearer("u-admin"))
        assert r.status_code == 200
        assert r.json() == {"username": "CEDADER"}


def test_token_signed_with_other_secret_is_rejected(monkeypatch):
    headers = _bearer("u-admin")
    monkeypatch.setattr(settings, "JWT_SECRET", "rotated-secret")
    with TestClient(_build_app()) as client:
        r = client.get("/whoami", headers=headers)
        assert r.status_code == 401
        assert r.json()["detail"] == "Invalid token."
