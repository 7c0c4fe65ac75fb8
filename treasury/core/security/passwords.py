from __future__ import annotations

import hmac

import bcrypt

from treasury.core.config import settings

_BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def is_hashed(stored: str | None) -> bool:
    return bool(stored) and stored.startswith(_BCRYPT_PREFIXES)


def verify_password(password: str, stored: str | None) -> bool:
    """
    Check `password` against a stored credential.

    Rows imported from the legacy store may still hold plain text; those are
    compared in constant time and the caller is expected to re-hash on success
    (see `needs_rehash`).
    """
    if not stored:
        return False
    if is_hashed(stored):
        try:
            return bcrypt.checkpw(password.encode("utf-8"), stored.encode("utf-8"))
        except ValueError:
            return False
    return hmac.compare_digest(password.encode("utf-8"), stored.encode("utf-8"))


def needs_rehash(stored: str | None) -> bool:
    return not is_hashed(stored)
