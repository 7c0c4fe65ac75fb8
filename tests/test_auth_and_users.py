from __future__ import annotations

import datetime as dt

import jwt

from treasury.core.config import settings
from treasury.core.constants import DEFAULT_ADMIN_ID
from treasury.core.security.passwords import is_hashed
from treasury.models.users import User


def test_login_returns_token_and_user(client, admin_user):
    r = client.post("/api/auth/login", json={"username": "CEDADER", "password": "123456789"})
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["user"]["id"] == DEFAULT_ADMIN_ID
    assert body["user"]["role"] == "admin"
    assert "password_hash" not in body["user"]

    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {body['token']}"})
    assert me.status_code == 200
    assert me.json()["username"] == "CEDADER"


def test_login_rejects_bad_password_and_inactive_user(client, db_session, regular_user):
    r = client.post("/api/auth/login", json={"username": "tesoureiro", "password": "wrong"})
    assert r.status_code == 401

    regular_user.is_active = False
    db_session.commit()
    r = client.post("/api/auth/login", json={"username": "tesoureiro", "password": "senha123"})
    assert r.status_code == 401


def test_legacy_plain_text_password_is_rehashed(client, db_session):
    db_session.add(User(id="legacy-1", username="antigo", password_hash="segredo", role="usuario"))
    db_session.commit()

    r = client.post("/api/auth/login", json={"username": "antigo", "password": "segredo"})
    assert r.status_code == 200

    db_session.expire_all()
    stored = db_session.get(User, "legacy-1").password_hash
    assert is_hashed(stored)


def test_routes_require_bearer_token(client):
    assert client.get("/api/health").status_code == 200
    assert client.get("/api/transactions").status_code == 401
    assert client.get("/api/transactions", headers={"Authorization": "Bearer nope"}).status_code == 401


def test_expired_token_is_rejected(client, regular_user):
    token = jwt.encode(
        {
            "sub": regular_user.id,
            "username": regular_user.username,
            "role": regular_user.role,
            "exp": dt.datetime.now(dt.timezone.utc) - dt.timedelta(minutes=1),
        },
        settings.JWT_SECRET,
        algorithm=settings.JWT_ALGORITHM,
    )
    r = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 401
    assert r.json()["detail"] == "Token expired."


def test_token_of_deleted_user_stops_working(client, admin_headers, user_headers, regular_user):
    assert client.get("/api/auth/me", headers=user_headers).status_code == 200
    assert client.delete(f"/api/users/{regular_user.id}", headers=admin_headers).status_code == 204
    assert client.get("/api/auth/me", headers=user_headers).status_code == 401


def test_update_own_credentials(client, user_headers, admin_user):
    r = client.put(
        "/api/auth/credentials",
        json={"new_username": "CEDADER", "new_password": "x"},
        headers=user_headers,
    )
    assert r.status_code == 409

    r = client.put(
        "/api/auth/credentials",
        json={"new_username": "tesoureira", "new_password": "nova-senha"},
        headers=user_headers,
    )
    assert r.status_code == 200
    assert r.json()["user"]["username"] == "tesoureira"

    login = client.post("/api/auth/login", json={"username": "tesoureira", "password": "nova-senha"})
    assert login.status_code == 200


def test_user_management_is_admin_only(client, user_headers, admin_headers):
    payload = {"username": "secretaria", "password": "abc123", "role": "client"}
    assert client.post("/api/users", json=payload, headers=user_headers).status_code == 403
    assert client.get("/api/users", headers=user_headers).status_code == 403

    r = client.post("/api/users", json=payload, headers=admin_headers)
    assert r.status_code == 201, r.text
    assert r.json()["created_by"] == "CEDADER"

    assert client.post("/api/users", json=payload, headers=admin_headers).status_code == 409

    r = client.put(f"/api/users/{r.json()['id']}", json={"full_name": "Secretaria Geral"}, headers=admin_headers)
    assert r.status_code == 200
    assert r.json()["full_name"] == "Secretaria Geral"

    usernames = [u["username"] for u in client.get("/api/users", headers=admin_headers).json()]
    assert set(usernames) == {"CEDADER", "tesoureiro", "secretaria"}


def test_default_admin_is_protected(client, admin_headers):
    assert client.delete(f"/api/users/{DEFAULT_ADMIN_ID}", headers=admin_headers).status_code == 400
    r = client.put(f"/api/users/{DEFAULT_ADMIN_ID}", json={"is_active": False}, headers=admin_headers)
    assert r.status_code == 400
    assert client.get(f"/api/users/{DEFAULT_ADMIN_ID}", headers=admin_headers).json()["is_active"] is True
    assert client.get("/api/users/missing", headers=admin_headers).status_code == 404
