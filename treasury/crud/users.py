from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from treasury.core.constants import ADMIN_ROLE, DEFAULT_ADMIN_ID
from treasury.core.security.passwords import hash_password, needs_rehash, verify_password
from treasury.crud.errors import DuplicateError, ProtectedUserError, commit_or_raise
from treasury.models.users import User
from treasury.schemas.users import UserCreate, UserUpdate

__all__ = [
    "DuplicateError",
    "ProtectedUserError",
    "authenticate_user",
    "create_user",
    "delete_user",
    "ensure_default_admin",
    "get_user",
    "list_users",
    "update_credentials",
    "update_user",
]

_USERNAME_MARKERS = ("uq_users_username", "users.username")


def create_user(db: Session, data: UserCreate, *, created_by: str) -> User:
    obj = User(
        username=data.username,
        password_hash=hash_password(data.password),
        role=data.role,
        full_name=data.full_name,
        email=str(data.email) if data.email else None,
        is_active=data.is_active,
        created_by=created_by,
    )
    db.add(obj)
    commit_or_raise(db, "Username already exists.", unique_markers=_USERNAME_MARKERS)
    db.refresh(obj)
    return obj


def get_user(db: Session, user_id: str) -> User | None:
    return db.get(User, user_id)


def list_users(db: Session, is_active: bool | None = None) -> list[User]:
    stmt = select(User).order_by(User.created_at.desc(), User.id.desc())
    if is_active is not None:
        stmt = stmt.where(User.is_active == is_active)
    return list(db.execute(stmt).scalars().all())


def update_user(db: Session, user_id: str, data: UserUpdate) -> User | None:
    obj = db.get(User, user_id)
    if not obj:
        return None

    patch = data.model_dump(exclude_unset=True)
    if obj.id == DEFAULT_ADMIN_ID and patch.get("is_active") is False:
        raise ProtectedUserError("Cannot deactivate the default administrator.")

    password = patch.pop("password", None)
    if password:
        obj.password_hash = hash_password(password)
    for k, v in patch.items():
        if k == "email" and v is not None:
            v = str(v)
        setattr(obj, k, v)

    commit_or_raise(db, "Username already exists.", unique_markers=_USERNAME_MARKERS)
    db.refresh(obj)
    return obj


def delete_user(db: Session, user_id: str) -> bool:
    if user_id == DEFAULT_ADMIN_ID:
        raise ProtectedUserError("Cannot delete the default administrator.")

    obj = db.get(User, user_id)
    if not obj:
        return False

    db.delete(obj)
    db.commit()
    return True


def authenticate_user(db: Session, username: str, password: str) -> User | None:
    """
    Return the active user matching the credentials.
    Legacy plain-text passwords are upgraded to bcrypt on the first good login.
    """
    stmt = select(User).where(User.username == username, User.is_active.is_(True))
    user = db.execute(stmt).scalar_one_or_none()
    if user is None or not verify_password(password, user.password_hash):
        return None

    if needs_rehash(user.password_hash):
        user.password_hash = hash_password(password)
        db.commit()
        db.refresh(user)
    return user


def update_credentials(db: Session, user: User, *, new_username: str, new_password: str) -> User:
    clash = db.execute(
        select(User.id).where(User.username == new_username, User.id != user.id)
    ).first()
    if clash:
        raise DuplicateError("Username already exists.")

    user.username = new_username
    user.password_hash = hash_password(new_password)
    commit_or_raise(db, "Username already exists.", unique_markers=_USERNAME_MARKERS)
    db.refresh(user)
    return user


def ensure_default_admin(
    db: Session,
    *,
    username: str,
    password: str,
    email: str | None = None,
) -> User:
    existing = db.get(User, DEFAULT_ADMIN_ID)
    if existing is not None:
        return existing

    obj = User(
        id=DEFAULT_ADMIN_ID,
        username=username,
        password_hash=hash_password(password),
        role=ADMIN_ROLE,
        full_name="Administrador CEDADER",
        email=email,
        is_active=True,
        created_by="system",
    )
    db.add(obj)
    commit_or_raise(db, "Username already exists.", unique_markers=_USERNAME_MARKERS)
    db.refresh(obj)
    return obj
