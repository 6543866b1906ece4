# File: yorkrealty/core/security.py

"""
Password hashing for the York Realty API.

bcrypt with a fixed work factor (settings.bcrypt_rounds, default 10).
bcrypt only looks at the first 72 bytes of a password, so longer
passwords are refused instead of being silently truncated.
"""

from functools import lru_cache

import bcrypt

from yorkrealty.core.config import settings


MAX_PASSWORD_BYTES = 72


def password_too_long(raw_password: str) -> bool:
    return len(raw_password.encode("utf-8")) > MAX_PASSWORD_BYTES


def hash_password(raw_password: str) -> str:
    """Return the bcrypt hash of raw_password as text."""
    if password_too_long(raw_password):
        raise ValueError(f"Password exceeds {MAX_PASSWORD_BYTES} bytes")
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(raw_password.encode("utf-8"), salt).decode("utf-8")


def verify_password(raw_password: str, password_hash: str) -> bool:
    """Constant-time check of raw_password against a stored bcrypt hash."""
    if password_too_long(raw_password):
        return False
    try:
        return bcrypt.checkpw(raw_password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed stored hash
        return False


@lru_cache
def dummy_password_hash() -> str:
    """Hash used to spend comparable time when a login email is unknown."""
    return hash_password("york-realty-unknown-user")
