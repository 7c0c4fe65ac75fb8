from __future__ import annotations

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session


class DuplicateError(Exception):
    """Raised when a unique constraint is violated (username, document number claim)."""


class ProtectedUserError(Exception):
    """Raised on attempts to delete or deactivate the default administrator."""


def commit_or_raise(db: Session, message: str, *, unique_markers: tuple[str, ...]) -> None:
    """
    Commit, turning a violation of the named unique constraint into
    DuplicateError. `unique_markers` holds the constraint name (PostgreSQL
    reports it) and the `table.column` form SQLite reports. Any other
    integrity failure is rolled back and re-raised unchanged.
    """
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if any(marker in str(e.orig) for marker in unique_markers):
            raise DuplicateError(message) from e
        raise
