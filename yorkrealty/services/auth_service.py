# File: yorkrealty/services/auth_service.py

"""
Authentication service.

Registration hashes the password before anything is written and leaves
duplicate detection to the users.email unique constraint. Login answers an
unknown email and a wrong password with the same InvalidCredential error.
"""

import logging

from sqlalchemy.orm import Session

from yorkrealty.core.errors import InvalidCredential, ValidationError
from yorkrealty.core.security import (
    MAX_PASSWORD_BYTES,
    dummy_password_hash,
    hash_password,
    password_too_long,
    verify_password,
)
from yorkrealty.db import crud
from yorkrealty.models.user import User

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def register_user(
    db: Session,
    *,
    full_name: str | None,
    email: str | None,
    password: str | None,
) -> User:
    """
    Create a user account.

    Raises ValidationError for blank fields or an over-long password and
    DuplicateEmail when the address is already registered.
    """
    if not full_name or not full_name.strip() or not email or not email.strip() or not password:
        raise ValidationError("All fields are required.")
    if password_too_long(password):
        raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes.")

    password_hash = hash_password(password)
    user = crud.insert_user(
        db,
        full_name=full_name.strip(),
        email=normalize_email(email),
        password_hash=password_hash,
    )
    logger.info("User registered", extra={"user_id": user.id})
    return user


def authenticate_user(
    db: Session,
    *,
    email: str | None,
    password: str | None,
) -> User:
    """
    Look up a user by email and verify the password hash.

    If several rows share the email, the most recently inserted one wins.
    """
    if not email or not email.strip() or not password:
        raise ValidationError("Email and password are required.")

    users = crud.select_users_by_email(db, normalize_email(email))
    if not users:
        verify_password(password, dummy_password_hash())
        logger.info("Login failed")
        raise InvalidCredential()

    user = users[-1]
    if not verify_password(password, user.password_hash):
        logger.info("Login failed")
        raise InvalidCredential()

    logger.info("User logged in", extra={"user_id": user.id})
    return user
