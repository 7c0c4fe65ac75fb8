from __future__ import annotations

import os
import sys

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

import importlib

fastapi_app = importlib.import_module("treasury.main").app
from treasury.core.config import settings
from treasury.core.security.tokens import issue_access_token
from treasury.db.base import Base
from treasury.db.session import get_db

# Ensure all models are registered with SQLAlchemy metadata
import treasury.models  # noqa: F401
from treasury.models.users import User
from treasury.crud.users import ensure_default_admin
from treasury.core.security.passwords import hash_password


@pytest.fixture(scope="session")
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn, _connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(engine)
    return engine


@pytest.fixture(autouse=True)
def _fast_settings(monkeypatch):
    # minimum bcrypt cost keeps the suite quick; enforcement on as in production
    monkeypatch.setattr(settings, "BCRYPT_ROUNDS", 4)
    monkeypatch.setattr(settings, "DOCUMENT_NUMBER_ENFORCE", True)
    monkeypatch.setattr(settings, "JWT_SECRET", "test-secret")


@pytest.fixture(scope="function")
def db_session(engine):
    Base.metadata.drop_all(engine)
    Base.metadata.create_all(engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="function")
def client(engine, db_session):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def _override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    fastapi_app.dependency_overrides[get_db] = _override_get_db
    with TestClient(fastapi_app) as test_client:
        yield test_client
    fastapi_app.dependency_overrides.clear()


def _headers_for(user: User) -> dict[str, str]:
    token = issue_access_token(user_id=user.id, username=user.username, role=user.role)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_user(db_session):
    return ensure_default_admin(db_session, username="CEDADER", password="123456789")


@pytest.fixture
def regular_user(db_session):
    user = User(
        username="tesoureiro",
        password_hash=hash_password("senha123"),
        role="usuario",
        full_name="Tesoureiro Local",
        is_active=True,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def admin_headers(admin_user):
    return _headers_for(admin_user)


@pytest.fixture
def user_headers(regular_user):
    return _headers_for(regular_user)
